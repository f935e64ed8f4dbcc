from __future__ import annotations

from datetime import datetime

from src.hr_portal.hr_portal.core.enums import TimesheetSortField
from src.hr_portal.hr_portal.timesheets.listing import (
    TimesheetQuery,
    apply_query,
    filter_timesheets,
    list_employee_names,
    to_calendar_events,
)
from src.hr_portal.hr_portal.timesheets.model import CalendarEvent, TimesheetRow


def _row(tid, name, start, end):
    return TimesheetRow(timesheet_id=tid, employee_id=tid, full_name=name, start_time=start, end_time=end, summary="")


ROWS = [
    _row(1, "Grace Hopper", datetime(2024, 1, 2, 9), datetime(2024, 1, 2, 17)),
    _row(2, "Alan Turing", datetime(2024, 1, 3, 8), datetime(2024, 1, 3, 10)),
    _row(3, "Grace Hopper", datetime(2024, 1, 1, 9), datetime(2024, 1, 4, 11)),
]


def test_sorted_ascending_by_start_time():
    result = apply_query(ROWS, TimesheetQuery(employee="Grace Hopper"))

    assert [r.start_time.date().isoformat() for r in result] == ["2024-01-01", "2024-01-02"]


def test_sorted_ascending_by_end_time():
    result = apply_query(ROWS, TimesheetQuery(sort_by=TimesheetSortField.END_TIME))

    assert [r.timesheet_id for r in result] == [1, 2, 3]


def test_search_matches_name_substring_case_insensitively():
    assert [r.timesheet_id for r in filter_timesheets(ROWS, search="TUR")] == [2]


def test_exact_employee_filter_with_no_match_is_empty():
    assert filter_timesheets(ROWS, employee="Grace") == []


def test_employee_names_are_distinct():
    assert list_employee_names(ROWS) == ["Grace Hopper", "Alan Turing"]


def test_calendar_events_use_day_granularity():
    events = to_calendar_events(ROWS[2:])

    assert events == [CalendarEvent(id="3", title="Grace Hopper", start="2024-01-01", end="2024-01-04")]


def test_same_day_entries_differing_by_hour_produce_identical_spans():
    morning = _row(4, "Alan Turing", datetime(2024, 2, 1, 8), datetime(2024, 2, 1, 9))
    evening = _row(5, "Alan Turing", datetime(2024, 2, 1, 18), datetime(2024, 2, 1, 19))

    a, b = to_calendar_events([morning, evening])

    assert (a.start, a.end) == (b.start, b.end) == ("2024-02-01", "2024-02-01")
