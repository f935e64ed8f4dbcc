from __future__ import annotations

from datetime import date, datetime

_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_local_datetime(value: str) -> datetime:
    """Parse the value of an HTML ``datetime-local`` input.

    Seconds are optional and a space is accepted in place of the ``T``.
    """
    value = value.strip()
    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    raise ValueError(f"Invalid datetime string: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def age_in_calendar_years(dob: date, today: date) -> int:
    """Age as the difference of calendar years.

    Month and day are ignored: someone born in December counts as a year
    older from January 1st.
    """
    return today.year - dob.year


def format_day(value: datetime) -> str:
    return value.strftime("%Y-%m-%d")


def format_local_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H:%M")
