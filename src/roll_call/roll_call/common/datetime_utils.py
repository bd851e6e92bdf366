from __future__ import annotations

from datetime import datetime, timedelta


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(now: datetime) -> datetime:
    """Local midnight of the day ``now`` falls on."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def minutes_after(start: datetime, minutes: int) -> datetime:
    return start + timedelta(minutes=int(minutes))
