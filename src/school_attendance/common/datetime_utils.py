from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_millis() -> int:
    return epoch_millis(now_local())


def epoch_millis(value: datetime) -> int:
    """Epoch milliseconds of a datetime; naive values are device-local time."""
    whole_seconds = int(value.replace(microsecond=0).timestamp())
    return whole_seconds * 1000 + value.microsecond // 1000


def local_datetime(epoch_ms: int) -> datetime:
    """Naive device-local datetime for epoch milliseconds (millisecond exact)."""
    seconds, millis = divmod(int(epoch_ms), 1000)
    return datetime.fromtimestamp(seconds) + timedelta(milliseconds=millis)


def local_date(epoch_ms: int) -> date:
    return local_datetime(epoch_ms).date()


def calendar_date(epoch_ms: int) -> str:
    """Canonical YYYY-MM-DD calendar date of an instant in device-local time."""
    return format_iso_date(local_date(epoch_ms))


def date_range(end: date, num_days: int) -> list[date]:
    """`num_days` consecutive dates ending at `end` inclusive, oldest first."""
    return [end - timedelta(days=offset) for offset in range(num_days - 1, -1, -1)]
