from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDocument, EmployeeSummary, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for employees and their documents.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def create(self, employee: NewEmployee, *, document_path: Optional[str]) -> int:
        raise NotImplementedError

    def add_document(self, *, employee_id: int, file_path: str) -> int:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_documents(self, employee_id: int) -> Sequence[EmployeeDocument]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeSummary]:
        """All employees in insertion order."""

        raise NotImplementedError
