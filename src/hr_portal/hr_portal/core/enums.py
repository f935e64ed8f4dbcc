from __future__ import annotations

from enum import Enum


class SortOrder(str, Enum):
    """Direction for listing sorts."""

    ASC = "asc"
    DESC = "desc"


class EmployeeSortField(str, Enum):
    """Employee columns the directory can be sorted by."""

    FULL_NAME = "full_name"
    DEPARTMENT = "department"
    JOB_TITLE = "job_title"


class TimesheetSortField(str, Enum):
    START_TIME = "start_time"
    END_TIME = "end_time"


class TimesheetView(str, Enum):
    TABLE = "table"
    CALENDAR = "calendar"
