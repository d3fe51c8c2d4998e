from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

Clock = Callable[[], datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_clock(tz_name: Optional[str] = None, *, utc_now: Callable[[], datetime] = _utc_now) -> Clock:
    """Build the single clock the service uses for day boundaries.

    Without a timezone the server's local time is used. With one, wall time in
    that zone is returned as a naive datetime so it can be stored as-is. An
    unknown zone name raises ValueError here, at startup.
    """

    if not tz_name:
        return now_local

    try:
        zone = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown TIMEZONE: {tz_name!r}")

    def _now() -> datetime:
        return utc_now().astimezone(zone).replace(tzinfo=None)

    return _now
