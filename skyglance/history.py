# ABOUTME: Append-only search history kept for the lifetime of the process.
# ABOUTME: Safe for concurrent writers; there is deliberately no way to remove entries.

import threading

from skyglance.models import SearchHistoryEntry


class SearchHistory:
    """Ordered record of completed lookups."""

    def __init__(self) -> None:
        self._entries: list[SearchHistoryEntry] = []
        self._lock = threading.Lock()

    def append(self, entry: SearchHistoryEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def snapshot(self) -> tuple[SearchHistoryEntry, ...]:
        """Entries in the order they were appended."""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
