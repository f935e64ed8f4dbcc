from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_base import Database
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .storage.uploads import LocalUploadStorage, UploadStorage
from .timesheets.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheets.service import TimesheetService


@dataclass(frozen=True)
class Container:
    employee_service: EmployeeService
    timesheet_service: TimesheetService
    storage: UploadStorage
    conn: Optional[DatabaseConnection] = None


def build_container(*, db_config: dict, upload_dir: str | Path) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    db = Database(conn)

    employees_repo = MySQLEmployeeRepository(db)
    timesheets_repo = MySQLTimesheetRepository(db)
    storage = LocalUploadStorage(upload_dir)

    return Container(
        employee_service=EmployeeService(employees_repo, storage),
        timesheet_service=TimesheetService(timesheets_repo, employees_repo),
        storage=storage,
        conn=conn,
    )
