from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, redirect, request, url_for

from ..common.datetime_utils import format_local_datetime
from ..core.enums import TimesheetSortField, TimesheetView
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .listing import TimesheetQuery, apply_query, list_employee_names, to_calendar_events
from .model import TimesheetRow


def _row_json(r: TimesheetRow) -> dict:
    return {
        "id": r.timesheet_id,
        "employee_id": r.employee_id,
        "full_name": r.full_name,
        "start_time": format_local_datetime(r.start_time),
        "end_time": format_local_datetime(r.end_time),
        "summary": r.summary,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/timesheets", methods=["GET"], endpoint="timesheets_list")
    def timesheets_list():
        try:
            sort_by = TimesheetSortField(request.args.get("sort_by") or TimesheetSortField.START_TIME.value)
            view = TimesheetView(request.args.get("view") or TimesheetView.TABLE.value)
        except ValueError:
            return jsonify({"error": "Invalid sort or view option"}), 400

        rows = container.timesheet_service.list_rows()
        query = TimesheetQuery(
            search=request.args.get("search", ""),
            employee=request.args.get("employee", ""),
            sort_by=sort_by,
        )
        shown = apply_query(rows, query)

        payload = {
            "view": view.value,
            "timesheets": [_row_json(r) for r in shown],
            "employees": list_employee_names(rows),
        }
        if view == TimesheetView.CALENDAR:
            payload["events"] = [asdict(ev) for ev in to_calendar_events(shown)]
        return jsonify(payload)

    @app.route("/timesheets/new", methods=["GET"], endpoint="timesheets_new")
    def timesheets_new():
        employees = container.timesheet_service.employee_choices()
        return jsonify({"employees": [{"id": e.employee_id, "full_name": e.full_name} for e in employees]})

    @app.route("/timesheets", methods=["POST"], endpoint="timesheets_create")
    def timesheets_create():
        try:
            container.timesheet_service.create(request.form.to_dict())
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return redirect(url_for("timesheets_list"))

    @app.route("/timesheets/<int:timesheet_id>", methods=["GET"], endpoint="timesheet_detail")
    def timesheet_detail(timesheet_id: int):
        try:
            row = container.timesheet_service.get(timesheet_id)
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        return jsonify({"timesheet": _row_json(row)})

    @app.route("/timesheets/<int:timesheet_id>", methods=["POST"], endpoint="timesheet_update")
    def timesheet_update(timesheet_id: int):
        try:
            container.timesheet_service.update(timesheet_id, request.form.to_dict())
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return redirect(url_for("timesheet_detail", timesheet_id=timesheet_id))
