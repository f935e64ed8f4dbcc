from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.mysql_base import Database
from .model import TimesheetInput, TimesheetRow
from .repository import TimesheetRepository

_SELECT_ROWS = """
    SELECT t.id, t.employee_id, e.full_name, t.start_time, t.end_time, t.summary
    FROM timesheets t
    JOIN employees e ON e.id = t.employee_id
"""


def _to_row(r: Dict[str, Any]) -> TimesheetRow:
    return TimesheetRow(
        timesheet_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        full_name=r["full_name"],
        start_time=r["start_time"],
        end_time=r["end_time"],
        summary=r.get("summary") or "",
    )


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, db: Database):
        self._db = db

    def create(self, *, employee_id: int, data: TimesheetInput) -> int:
        result = self._db.run(
            "INSERT INTO timesheets(employee_id, start_time, end_time, summary) VALUES(%s,%s,%s,%s)",
            (int(employee_id), data.start_time, data.end_time, data.summary),
        )
        return int(result.last_id or 0)

    def update(self, *, timesheet_id: int, data: TimesheetInput) -> bool:
        result = self._db.run(
            "UPDATE timesheets SET start_time=%s, end_time=%s, summary=%s WHERE id=%s",
            (data.start_time, data.end_time, data.summary, int(timesheet_id)),
        )
        return result.rowcount > 0

    def get_row(self, timesheet_id: int) -> Optional[TimesheetRow]:
        r = self._db.get(_SELECT_ROWS + " WHERE t.id=%s", (int(timesheet_id),))
        return _to_row(r) if r else None

    def list_rows(self) -> Sequence[TimesheetRow]:
        return [_to_row(r) for r in self._db.all(_SELECT_ROWS + " ORDER BY t.id")]
