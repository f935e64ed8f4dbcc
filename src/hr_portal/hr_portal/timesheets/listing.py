from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..common.datetime_utils import format_day
from ..core.enums import TimesheetSortField
from .model import CalendarEvent, TimesheetRow


@dataclass(frozen=True)
class TimesheetQuery:
    search: str = ""
    employee: str = ""
    sort_by: TimesheetSortField = TimesheetSortField.START_TIME


def filter_timesheets(rows: Sequence[TimesheetRow], *, search: str = "", employee: str = "") -> list[TimesheetRow]:
    needle = search.lower()
    return [
        r
        for r in rows
        if needle in r.full_name.lower() and (not employee or r.full_name == employee)
    ]


def sort_timesheets(rows: Sequence[TimesheetRow], sort_by: TimesheetSortField) -> list[TimesheetRow]:
    return sorted(rows, key=lambda r: getattr(r, sort_by.value))


def apply_query(rows: Sequence[TimesheetRow], query: TimesheetQuery) -> list[TimesheetRow]:
    return sort_timesheets(filter_timesheets(rows, search=query.search, employee=query.employee), query.sort_by)


def list_employee_names(rows: Sequence[TimesheetRow]) -> list[str]:
    return list(dict.fromkeys(r.full_name for r in rows))


def to_calendar_events(rows: Sequence[TimesheetRow]) -> list[CalendarEvent]:
    """One all-day event per timesheet.

    Events span start day to end day; the time of day is dropped, so entries
    on the same day differing only by hour render identically.
    """
    return [
        CalendarEvent(
            id=str(r.timesheet_id),
            title=r.full_name,
            start=format_day(r.start_time),
            end=format_day(r.end_time),
        )
        for r in rows
    ]
