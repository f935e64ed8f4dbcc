from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimesheetInput, TimesheetRow


class TimesheetRepository(Protocol):
    def create(self, *, employee_id: int, data: TimesheetInput) -> int:
        raise NotImplementedError

    def update(self, *, timesheet_id: int, data: TimesheetInput) -> bool:
        """Overwrite times and summary; the owning employee never changes."""

        raise NotImplementedError

    def get_row(self, timesheet_id: int) -> Optional[TimesheetRow]:
        raise NotImplementedError

    def list_rows(self) -> Sequence[TimesheetRow]:
        """All timesheets joined with employee names, in insertion order."""

        raise NotImplementedError
