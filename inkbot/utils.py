"""Shared utility functions for inkbot."""

from __future__ import annotations

from datetime import datetime, tzinfo

# Indexed by day-of-week with Sunday = 0
WEEKDAYS_JA = ("日", "月", "火", "水", "木", "金", "土")

NOT_AVAILABLE = "N/A"


def parse_timestamp(value: str) -> datetime:
    """Parse an upstream ISO-8601 timestamp ("2024-01-01T10:00:00Z")."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_time_range(start: datetime, end: datetime, tz: tzinfo) -> str:
    """Render "M/D(曜) H:MM – M/D H:MM" in tz.

    Month, day and hour are not zero-padded; minutes are. Only the start
    carries a weekday.
    """
    start = start.astimezone(tz)
    end = end.astimezone(tz)
    weekday = WEEKDAYS_JA[(start.weekday() + 1) % 7]
    return (
        f"{start.month}/{start.day}({weekday}) {start.hour}:{start.minute:02d}"
        f" – {end.month}/{end.day} {end.hour}:{end.minute:02d}"
    )
