from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: Plain data object, no DB access code here.
    """

    employee_id: int
    full_name: str
    department: str
    job_title: str
    phone: str
    dob: date
    salary: float
    start_date: date
    document_path: Optional[str] = None


@dataclass(frozen=True)
class EmployeeDocument:
    document_id: int
    employee_id: int
    file_path: str


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model for the directory listing."""

    employee_id: int
    full_name: str
    department: str
    job_title: str
    start_date: Optional[date]


@dataclass(frozen=True)
class NewEmployee:
    """Typed employee submission, produced by parsing the raw form."""

    full_name: str
    department: str
    job_title: str
    phone: str
    dob: date
    salary: float
    start_date: date


@dataclass(frozen=True)
class EmployeeProfile:
    employee: Employee
    documents: tuple[EmployeeDocument, ...]
