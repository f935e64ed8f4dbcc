"""Directory view over the full employee list.

Search, department filter, sort and pagination are pure functions of the
list and the query; nothing here touches the database.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

from ..core.constants import EMPLOYEES_PER_PAGE
from ..core.enums import EmployeeSortField, SortOrder
from .model import EmployeeSummary

T = TypeVar("T")


@dataclass(frozen=True)
class EmployeeQuery:
    search: str = ""
    department: str = ""
    sort_field: Optional[EmployeeSortField] = None
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    page: int
    total_pages: int
    total_items: int


def filter_employees(employees: Sequence[EmployeeSummary], *, search: str = "", department: str = "") -> list[EmployeeSummary]:
    needle = search.lower()
    return [
        e
        for e in employees
        if needle in e.full_name.lower() and (not department or e.department == department)
    ]


def _collation_key(value: object) -> tuple[str, str]:
    text = "" if value is None else str(value)
    return (text.casefold(), text)


def sort_employees(
    employees: Sequence[EmployeeSummary],
    field: Optional[EmployeeSortField],
    order: SortOrder = SortOrder.ASC,
) -> list[EmployeeSummary]:
    if field is None:
        return list(employees)
    return sorted(
        employees,
        key=lambda e: _collation_key(getattr(e, field.value)),
        reverse=order == SortOrder.DESC,
    )


def paginate(items: Sequence[T], page: int, per_page: int = EMPLOYEES_PER_PAGE) -> Page[T]:
    total_pages = math.ceil(len(items) / per_page)
    page = min(max(int(page), 1), max(total_pages, 1))
    start = (page - 1) * per_page
    return Page(items=list(items[start:start + per_page]), page=page, total_pages=total_pages, total_items=len(items))


def list_departments(employees: Sequence[EmployeeSummary]) -> list[str]:
    """Distinct departments in first-seen order."""
    return list(dict.fromkeys(e.department for e in employees))


def build_directory_page(employees: Sequence[EmployeeSummary], query: EmployeeQuery) -> Page[EmployeeSummary]:
    matched = filter_employees(employees, search=query.search, department=query.department)
    ordered = sort_employees(matched, query.sort_field, query.sort_order)
    return paginate(ordered, query.page)
