# ABOUTME: Tests for the append-only search history.
# ABOUTME: Checks ordering, snapshot isolation, and concurrent appends.

import threading

from skyglance.history import SearchHistory
from skyglance.models import SearchHistoryEntry


def _entry(i: int) -> SearchHistoryEntry:
    return SearchHistoryEntry(city_name=f"City {i}", local_time=f"2025-06-05T{i % 24:02d}:00")


class TestSearchHistory:
    def test_starts_empty(self):
        history = SearchHistory()
        assert len(history) == 0
        assert history.snapshot() == ()

    def test_keeps_append_order(self):
        history = SearchHistory()
        for i in range(3):
            history.append(_entry(i))
        assert [e.city_name for e in history.snapshot()] == ["City 0", "City 1", "City 2"]

    def test_snapshot_is_not_affected_by_later_appends(self):
        """A snapshot is a frozen view; later appends do not show up in it."""
        history = SearchHistory()
        history.append(_entry(0))
        before = history.snapshot()
        history.append(_entry(1))
        assert len(before) == 1
        assert len(history) == 2

    def test_has_no_mutators_besides_append(self):
        history = SearchHistory()
        for name in ("clear", "pop", "remove", "__delitem__", "__setitem__"):
            assert not hasattr(history, name)

    def test_concurrent_appends_each_land_once(self):
        """Appends from many threads are all preserved exactly once.

        Implementation: Eight threads append fifty distinct entries each.
        Passing implies: No append is lost or duplicated under contention.
        """
        history = SearchHistory()

        def worker(offset: int):
            for i in range(50):
                history.append(_entry(offset * 50 + i))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        names = [e.city_name for e in history.snapshot()]
        assert len(names) == 400
        assert len(set(names)) == 400
