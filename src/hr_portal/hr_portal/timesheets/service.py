from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..common.validators import parse_datetime_field, parse_positive_int, require_all
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.model import EmployeeSummary
from .model import TimesheetInput, TimesheetRow
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "All fields are required."
TIME_ORDER_MESSAGE = "Start time must be before end time."


def parse_timesheet_form(form: Mapping[str, Optional[str]]) -> TimesheetInput:
    require_all(form, ("start_time", "end_time", "summary"), REQUIRED_MESSAGE)
    data = TimesheetInput(
        start_time=parse_datetime_field(form.get("start_time"), "Start time"),
        end_time=parse_datetime_field(form.get("end_time"), "End time"),
        summary=str(form.get("summary")).strip(),
    )
    if data.start_time >= data.end_time:
        raise ValidationError(TIME_ORDER_MESSAGE)
    return data


class TimesheetService:
    def __init__(self, timesheets: TimesheetRepository, employees: EmployeeRepository):
        self._timesheets = timesheets
        self._employees = employees

    def create(self, form: Mapping[str, Optional[str]]) -> int:
        require_all(form, ("employee_id", "start_time", "end_time", "summary"), REQUIRED_MESSAGE)
        employee_id = parse_positive_int(form.get("employee_id"), "Employee")
        data = parse_timesheet_form(form)

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Selected employee does not exist.")

        timesheet_id = self._timesheets.create(employee_id=employee_id, data=data)
        logger.info("Created timesheet %s for employee %s", timesheet_id, employee_id)
        return timesheet_id

    def update(self, timesheet_id: int, form: Mapping[str, Optional[str]]) -> None:
        # Missing ids report NotFound ahead of form errors.
        self.get(timesheet_id)
        data = parse_timesheet_form(form)
        self._timesheets.update(timesheet_id=int(timesheet_id), data=data)
        logger.info("Updated timesheet %s", timesheet_id)

    def get(self, timesheet_id: int) -> TimesheetRow:
        row = self._timesheets.get_row(int(timesheet_id))
        if not row:
            raise NotFoundError("Timesheet Not Found")
        return row

    def list_rows(self) -> Sequence[TimesheetRow]:
        return self._timesheets.list_rows()

    def employee_choices(self) -> Sequence[EmployeeSummary]:
        return self._employees.list_all()
