"""UTC unix-timestamp utilities."""

from datetime import datetime, timezone

SECONDS_PER_YEAR = 365 * 24 * 60 * 60


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def unix_now() -> int:
    return int(utc_now().timestamp())


def unix_in_years(years: int) -> int:
    """Unix timestamp `years` from now (365-day years)."""
    return unix_now() + years * SECONDS_PER_YEAR
