from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..core.constants import MONTH_ABBREVIATIONS

_FRACTION = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")
_SHORT_OFFSET = re.compile(r"([T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?[+-]\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Like parse_iso_date but returns None for empty or malformed input."""
    if not value or not str(value).strip():
        return None
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        return None


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def next_day_start(day: date) -> datetime:
    """Exclusive upper bound: anything strictly before it falls on `day`."""
    return datetime.combine(day + timedelta(days=1), time.min)


def to_local_naive(value: datetime) -> datetime:
    """Aware datetimes are converted to local wall time; naive ones pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Union[str, datetime, None]) -> datetime:
    """Parse a store timestamp (datetime or ISO-8601 text, `Z` allowed)."""
    if isinstance(value, datetime):
        return to_local_naive(value)
    if not value or not isinstance(value, str):
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # Postgres trims trailing zeros from fractions and may send "+07" offsets.
    text = _FRACTION.sub(lambda m: f"{m.group(1)}.{(m.group(2) + '00000')[:6]}", text)
    text = _SHORT_OFFSET.sub(r"\1:00", text)
    return to_local_naive(datetime.fromisoformat(text))


def format_report_date(value: datetime) -> str:
    """`01 May 2024`"""
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_report_time(value: datetime) -> str:
    """24-hour `HH:MM`."""
    return f"{value.hour:02d}:{value.minute:02d}"


def format_number(value: Union[int, float]) -> str:
    """Render hours/coordinates without a trailing `.0` on whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
