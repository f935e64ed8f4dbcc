from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import pytest

from src.hr_portal.hr_portal.core.exceptions import NotFoundError, ValidationError
from src.hr_portal.hr_portal.employees.model import Employee, EmployeeSummary
from src.hr_portal.hr_portal.timesheets.model import TimesheetRow
from src.hr_portal.hr_portal.timesheets.service import TimesheetService


class InMemoryEmployees:
    def __init__(self, names: dict[int, str]):
        self._names = names

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        name = self._names.get(int(employee_id))
        if name is None:
            return None
        return Employee(
            employee_id=int(employee_id),
            full_name=name,
            department="Ops",
            job_title="Tech",
            phone="555",
            dob=date(1990, 1, 1),
            salary=40000.0,
            start_date=date(2020, 1, 1),
        )

    def list_all(self):
        return [
            EmployeeSummary(employee_id=i, full_name=n, department="Ops", job_title="Tech", start_date=None)
            for i, n in self._names.items()
        ]


class InMemoryTimesheets:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self._next_id = 1
        self.rows: dict[int, TimesheetRow] = {}

    def create(self, *, employee_id, data):
        tid = self._next_id
        self._next_id += 1
        self.rows[tid] = TimesheetRow(
            timesheet_id=tid,
            employee_id=employee_id,
            full_name=self._employees.get_by_id(employee_id).full_name,
            start_time=data.start_time,
            end_time=data.end_time,
            summary=data.summary,
        )
        return tid

    def update(self, *, timesheet_id, data):
        row = self.rows.get(timesheet_id)
        if not row:
            return False
        self.rows[timesheet_id] = TimesheetRow(
            timesheet_id=row.timesheet_id,
            employee_id=row.employee_id,
            full_name=row.full_name,
            start_time=data.start_time,
            end_time=data.end_time,
            summary=data.summary,
        )
        return True

    def get_row(self, timesheet_id):
        return self.rows.get(timesheet_id)

    def list_rows(self):
        return list(self.rows.values())


def _service():
    employees = InMemoryEmployees({1: "Grace Hopper", 2: "Alan Turing"})
    repo = InMemoryTimesheets(employees)
    return TimesheetService(repo, employees), repo


def _form(**overrides):
    form = {
        "employee_id": "1",
        "start_time": "2024-01-01T09:00",
        "end_time": "2024-01-01T17:00",
        "summary": "Compiler work",
    }
    form.update(overrides)
    return form


def test_create_timesheet_inserts_one_row():
    svc, repo = _service()

    tid = svc.create(_form())

    row = repo.rows[tid]
    assert row.employee_id == 1
    assert row.start_time == datetime(2024, 1, 1, 9, 0)
    assert row.end_time == datetime(2024, 1, 1, 17, 0)
    assert row.summary == "Compiler work"


def test_end_before_start_is_rejected_without_insert():
    svc, repo = _service()

    with pytest.raises(ValidationError, match="Start time must be before end time"):
        svc.create(_form(start_time="2024-01-01T10:00", end_time="2024-01-01T09:00"))

    assert repo.rows == {}


def test_equal_start_and_end_is_rejected():
    svc, repo = _service()

    with pytest.raises(ValidationError, match="Start time must be before end time"):
        svc.create(_form(end_time="2024-01-01T09:00"))

    assert repo.rows == {}


@pytest.mark.parametrize("missing", ["employee_id", "start_time", "end_time", "summary"])
def test_every_field_is_required(missing):
    svc, repo = _service()

    with pytest.raises(ValidationError, match="All fields are required"):
        svc.create(_form(**{missing: ""}))

    assert repo.rows == {}


def test_unknown_employee_is_rejected():
    svc, repo = _service()

    with pytest.raises(ValidationError, match="does not exist"):
        svc.create(_form(employee_id="99"))

    assert repo.rows == {}


def test_malformed_datetime_is_rejected():
    svc, _ = _service()

    with pytest.raises(ValidationError, match="Start time must be a date and time"):
        svc.create(_form(start_time="yesterday"))


def test_update_changes_times_but_never_the_employee():
    svc, repo = _service()
    tid = svc.create(_form())

    svc.update(
        tid,
        {"employee_id": "2", "start_time": "2024-01-02 08:00:00", "end_time": "2024-01-02T12:30", "summary": "Review"},
    )

    row = svc.get(tid)
    assert row.employee_id == 1
    assert row.full_name == "Grace Hopper"
    assert row.start_time == datetime(2024, 1, 2, 8, 0)
    assert row.end_time == datetime(2024, 1, 2, 12, 30)
    assert row.summary == "Review"


def test_update_re_enforces_time_order():
    svc, repo = _service()
    tid = svc.create(_form())

    with pytest.raises(ValidationError, match="Start time must be before end time"):
        svc.update(tid, _form(start_time="2024-01-01T18:00"))

    assert repo.rows[tid].start_time == datetime(2024, 1, 1, 9, 0)


def test_update_missing_timesheet_raises_not_found():
    svc, _ = _service()

    with pytest.raises(NotFoundError):
        svc.update(7, _form())


def test_get_missing_timesheet_raises_not_found():
    svc, _ = _service()

    with pytest.raises(NotFoundError, match="Timesheet Not Found"):
        svc.get(7)


def test_employee_choices_lists_everyone():
    svc, _ = _service()

    assert [e.full_name for e in svc.employee_choices()] == ["Grace Hopper", "Alan Turing"]
