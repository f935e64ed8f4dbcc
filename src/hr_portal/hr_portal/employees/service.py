from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import age_in_calendar_years, now_local
from ..common.validators import parse_date_field, parse_float, require_non_empty
from ..core.constants import MAXIMUM_SALARY, MINIMUM_EMPLOYEE_AGE, MINIMUM_SALARY
from ..core.exceptions import NotFoundError, ValidationError
from ..storage.uploads import UploadedFile, UploadStorage
from .model import EmployeeProfile, EmployeeSummary, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def parse_employee_form(form: Mapping[str, Optional[str]]) -> NewEmployee:
    """Convert raw submitted strings into a typed employee record."""
    return NewEmployee(
        full_name=require_non_empty(form.get("full_name"), "Full name"),
        department=require_non_empty(form.get("department"), "Department"),
        job_title=require_non_empty(form.get("job_title"), "Job title"),
        phone=require_non_empty(form.get("phone"), "Phone number"),
        dob=parse_date_field(form.get("dob"), "Date of birth"),
        salary=parse_float(form.get("salary"), "Salary"),
        start_date=parse_date_field(form.get("start_date"), "Start date"),
    )


class EmployeeService:
    """Use cases: register employees and read the directory/profile."""

    def __init__(self, employees: EmployeeRepository, storage: UploadStorage):
        self._employees = employees
        self._storage = storage

    def validate(self, employee: NewEmployee, documents: Sequence[UploadedFile]) -> None:
        # Calendar-year subtraction: a birthday later this year still counts.
        age = age_in_calendar_years(employee.dob, now_local().date())
        if age < MINIMUM_EMPLOYEE_AGE:
            raise ValidationError(f"Employee must be at least {MINIMUM_EMPLOYEE_AGE} years old.")

        if not MINIMUM_SALARY <= employee.salary <= MAXIMUM_SALARY:
            raise ValidationError(f"Salary must be between ${MINIMUM_SALARY} and ${MAXIMUM_SALARY}.")

        if not documents:
            raise ValidationError("At least one document (CV, ID, etc.) is required.")

    def create(
        self,
        form: Mapping[str, Optional[str]],
        *,
        photo: Optional[UploadedFile] = None,
        documents: Sequence[UploadedFile] = (),
    ) -> int:
        employee = parse_employee_form(form)
        documents = [d for d in documents if not d.is_empty]
        try:
            self.validate(employee, documents)
        except ValidationError as e:
            logger.info("Rejected employee %r: %s", employee.full_name, e)
            raise

        photo_path = None
        if photo is not None and not photo.is_empty:
            photo_path = self._storage.write(photo.filename, photo.data)
        document_paths = [self._storage.write(d.filename, d.data) for d in documents]

        employee_id = self._employees.create(employee, document_path=photo_path)
        for path in document_paths:
            self._employees.add_document(employee_id=employee_id, file_path=path)

        logger.info("Created employee %s with %d document(s)", employee_id, len(document_paths))
        return employee_id

    def list_all(self) -> Sequence[EmployeeSummary]:
        return self._employees.list_all()

    def get_profile(self, employee_id: int) -> EmployeeProfile:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        documents = tuple(self._employees.list_documents(employee.employee_id))
        return EmployeeProfile(employee=employee, documents=documents)
