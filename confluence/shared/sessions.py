"""
Trading session lookup by UTC hour.

Sessions overlap (London and New York share 13:00-16:00 UTC); the first
matching session in SESSIONS order wins.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class TradingSession:
    """A named session window in UTC hours (start inclusive, end exclusive)."""
    name: str
    start_hour_utc: int
    end_hour_utc: int

    def contains_hour(self, hour: int) -> bool:
        return self.start_hour_utc <= hour < self.end_hour_utc


SESSIONS: Tuple[TradingSession, ...] = (
    TradingSession("Asia", 0, 8),
    TradingSession("London", 8, 16),
    TradingSession("New York", 13, 22),
)


def session_for_timestamp(utc_timestamp_seconds: int) -> Optional[str]:
    """
    Return the session name for a UTC timestamp, or None outside all sessions.

    Args:
        utc_timestamp_seconds: Seconds since epoch

    Returns:
        Session name ("Asia", "London", "New York") or None (22:00-24:00 UTC)
    """
    hour = datetime.fromtimestamp(utc_timestamp_seconds, tz=timezone.utc).hour
    for session in SESSIONS:
        if session.contains_hour(hour):
            return session.name
    return None
