"""
Tests for trading session lookup.
"""
from datetime import datetime, timezone

import pytest

from confluence.shared.sessions import SESSIONS, session_for_timestamp


def _ts(hour, minute=0):
    return int(datetime(2024, 3, 4, hour, minute, tzinfo=timezone.utc).timestamp())


class TestSessions:

    @pytest.mark.parametrize("hour,expected", [
        (0, "Asia"),
        (7, "Asia"),
        (8, "London"),
        (13, "London"),
        (15, "London"),
        (16, "New York"),
        (21, "New York"),
        (22, None),
        (23, None),
    ])
    def test_session_for_timestamp(self, hour, expected):
        assert session_for_timestamp(_ts(hour, 30)) == expected

    def test_overlap_resolves_to_first_session(self):
        london, new_york = SESSIONS[1], SESSIONS[2]
        assert london.contains_hour(14) and new_york.contains_hour(14)
        assert session_for_timestamp(_ts(14)) == "London"
