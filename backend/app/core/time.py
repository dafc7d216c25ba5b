"""UTC clock used by model timestamps and login bookkeeping."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)
