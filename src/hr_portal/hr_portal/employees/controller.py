from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, request, url_for

from ..common.validators import is_ascii_digits
from ..core.enums import EmployeeSortField, SortOrder
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from ..storage.uploads import UploadedFile, public_url
from .listing import EmployeeQuery, build_directory_page, list_departments
from .model import EmployeeProfile, EmployeeSummary

logger = logging.getLogger(__name__)


def _summary_json(e: EmployeeSummary) -> dict:
    return {
        "id": e.employee_id,
        "full_name": e.full_name,
        "department": e.department or "N/A",
        "job_title": e.job_title or "N/A",
        "start_date": e.start_date.isoformat() if e.start_date else "N/A",
    }


def _parse_query(args) -> EmployeeQuery:
    sort_s = args.get("sort") or ""
    order_s = args.get("order") or SortOrder.ASC.value
    page_s = args.get("page") or "1"
    try:
        sort_field = EmployeeSortField(sort_s) if sort_s else None
        sort_order = SortOrder(order_s)
    except ValueError:
        raise ValidationError("Invalid sort option")
    return EmployeeQuery(
        search=args.get("search", ""),
        department=args.get("department", ""),
        sort_field=sort_field,
        sort_order=sort_order,
        page=int(page_s) if is_ascii_digits(page_s) else 1,
    )


def register(app: Flask, container: Container) -> None:
    def _profile_json(profile: EmployeeProfile) -> dict:
        prefix = app.config["UPLOAD_URL_PREFIX"]
        e = profile.employee
        return {
            "id": e.employee_id,
            "full_name": e.full_name,
            "department": e.department,
            "job_title": e.job_title,
            "phone": e.phone,
            "dob": e.dob.isoformat(),
            "salary": e.salary,
            "start_date": e.start_date.isoformat(),
            "photo_url": public_url(e.document_path, prefix) if e.document_path else None,
            "documents": [
                {"id": d.document_id, "file_path": d.file_path, "url": public_url(d.file_path, prefix)}
                for d in profile.documents
            ],
        }

    @app.route("/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        try:
            query = _parse_query(request.args)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        employees = container.employee_service.list_all()
        page = build_directory_page(employees, query)
        return jsonify(
            {
                "employees": [_summary_json(e) for e in page.items],
                "departments": list_departments(employees),
                "page": page.page,
                "total_pages": page.total_pages,
                "total": page.total_items,
            }
        )

    @app.route("/employees", methods=["POST"], endpoint="employees_create")
    def employees_create():
        photo = request.files.get("photo")
        documents = [UploadedFile.from_storage(f) for f in request.files.getlist("documents")]
        try:
            container.employee_service.create(
                request.form.to_dict(),
                photo=UploadedFile.from_storage(photo) if photo else None,
                documents=documents,
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return redirect(url_for("employees_list"))

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="employee_detail")
    def employee_detail(employee_id: str):
        if not is_ascii_digits(employee_id):
            logger.warning("Invalid employee id in URL: %r", employee_id)
            return jsonify({"error": "Invalid Employee ID"}), 400

        try:
            profile = container.employee_service.get_profile(int(employee_id))
        except NotFoundError:
            return jsonify({"error": "Employee Not Found"}), 404
        return jsonify({"employee": _profile_json(profile)})
