from __future__ import annotations

from typing import Optional, Sequence

from ..database.mysql_base import Database
from .model import Employee, EmployeeDocument, EmployeeSummary, NewEmployee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, db: Database):
        self._db = db

    def create(self, employee: NewEmployee, *, document_path: Optional[str]) -> int:
        result = self._db.run(
            """
            INSERT INTO employees(full_name, department, job_title, start_date, dob, salary, phone, document_path)
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                employee.full_name,
                employee.department,
                employee.job_title,
                employee.start_date,
                employee.dob,
                employee.salary,
                employee.phone,
                document_path,
            ),
        )
        return int(result.last_id or 0)

    def add_document(self, *, employee_id: int, file_path: str) -> int:
        result = self._db.run(
            "INSERT INTO employee_documents(employee_id, file_path) VALUES(%s,%s)",
            (int(employee_id), file_path),
        )
        return int(result.last_id or 0)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        r = self._db.get(
            """
            SELECT id, full_name, department, job_title, phone, dob, salary, start_date, document_path
            FROM employees
            WHERE id=%s
            """,
            (int(employee_id),),
        )
        if not r:
            return None
        return Employee(
            employee_id=int(r["id"]),
            full_name=r["full_name"],
            department=r["department"],
            job_title=r["job_title"],
            phone=r["phone"],
            dob=r["dob"],
            salary=float(r["salary"]),
            start_date=r["start_date"],
            document_path=r.get("document_path"),
        )

    def list_documents(self, employee_id: int) -> Sequence[EmployeeDocument]:
        rows = self._db.all(
            "SELECT id, employee_id, file_path FROM employee_documents WHERE employee_id=%s ORDER BY id",
            (int(employee_id),),
        )
        return [
            EmployeeDocument(document_id=int(r["id"]), employee_id=int(r["employee_id"]), file_path=r["file_path"])
            for r in rows
        ]

    def list_all(self) -> Sequence[EmployeeSummary]:
        rows = self._db.all("SELECT id, full_name, department, job_title, start_date FROM employees ORDER BY id")
        return [
            EmployeeSummary(
                employee_id=int(r["id"]),
                full_name=r["full_name"],
                department=r.get("department") or "",
                job_title=r.get("job_title") or "",
                start_date=r.get("start_date"),
            )
            for r in rows
        ]
