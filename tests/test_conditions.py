# ABOUTME: Tests for the weather code interpreter.
# ABOUTME: Walks the WMO code table boundaries and the Unknown fallback.

import pytest

from skyglance.conditions import describe, describe_with_icon


class TestDescribe:
    @pytest.mark.parametrize(
        ("code", "label"),
        [
            (0, "Clear sky"),
            (1, "Partly cloudy"),
            (2, "Partly cloudy"),
            (3, "Overcast"),
            (45, "Fog"),
            (48, "Fog"),
            (51, "Drizzle"),
            (61, "Drizzle"),
            (67, "Drizzle"),
            (71, "Snowfall"),
            (77, "Snowfall"),
            (80, "Rain showers"),
            (82, "Rain showers"),
            (95, "Thunderstorm"),
            (96, "Thunderstorm"),
            (99, "Thunderstorm"),
        ],
    )
    def test_known_codes(self, code, label):
        assert describe(code) == label

    @pytest.mark.parametrize("code", [4, 17, 44, 46, 50, 68, 70, 78, 83, 94, 100, -1])
    def test_codes_outside_table_are_unknown(self, code):
        """Codes between or beyond the table ranges map to Unknown rather than raising."""
        assert describe(code) == "Unknown"


class TestDescribeWithIcon:
    def test_appends_icon(self):
        assert describe_with_icon(0) == "Clear sky ☀️"
        assert describe_with_icon(96) == "Thunderstorm ⛈️"

    def test_unknown_icon(self):
        assert describe_with_icon(17) == "Unknown ⛅"
