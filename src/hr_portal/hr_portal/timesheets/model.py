from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Timesheet:
    """Domain entity: a time-bounded work entry owned by one employee."""

    timesheet_id: int
    employee_id: int
    start_time: datetime
    end_time: datetime
    summary: str


@dataclass(frozen=True)
class TimesheetRow:
    """Read-model: timesheet joined with the employee's name."""

    timesheet_id: int
    employee_id: int
    full_name: str
    start_time: datetime
    end_time: datetime
    summary: str


@dataclass(frozen=True)
class TimesheetInput:
    """Typed timesheet submission, produced by parsing the raw form."""

    start_time: datetime
    end_time: datetime
    summary: str


@dataclass(frozen=True)
class CalendarEvent:
    id: str
    title: str
    start: str
    end: str
