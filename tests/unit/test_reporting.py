from __future__ import annotations

from datetime import date

from studyplan.engine import build_day_schedule, generate_plan, parse_subjects
from studyplan.metrics import collect_metrics
from studyplan.reporting import render_timetable
from studyplan.reporting.warnings import build_warnings_and_suggestions

TODAY = date(2024, 1, 1)


def _scenario():
    return generate_plan(parse_subjects("Math: Algebra|Geometry\nPhysics"), 10, hours_per_day=4, today=TODAY)


def test_day_schedule_cursor_starts_at_nine_with_ten_minute_breaks() -> None:
    timed = build_day_schedule(_scenario().study_plan[0])

    assert [(t.slot.subject_name, t.start, t.end) for t in timed] == [
        ("Math", "09:00 AM", "11:21 AM"),
        ("Physics", "11:31 AM", "12:41 PM"),
    ]


def test_day_schedule_honours_custom_start_and_gap() -> None:
    timed = build_day_schedule(_scenario().study_plan[0], start_minutes=8 * 60, gap_minutes=0)

    assert timed[1].start_minutes == 8 * 60 + 141
    assert timed[1].end_minutes == 8 * 60 + 211


def test_render_timetable_lists_study_and_revision_days() -> None:
    text = render_timetable(_scenario())
    lines = text.splitlines()

    assert lines[0] == "Days until exam: 10 • Study days: 7 • Revision days: 3"
    assert lines[1] == "Daily available: 4 hrs • Effective study (after short breaks): 3.52 hrs"
    assert "Tue Jan 02 2024 (Study day)" in lines
    assert "  09:00 AM - 11:21 AM  Math: 141 min - Algebra, Geometry" in lines
    assert "  11:31 AM - 12:41 PM  Physics: 70 min" in lines
    assert "Revision Days" in lines
    assert "Tue Jan 09 2024 (Revision day)" in lines
    assert "  Flexible  Revision / Mock Test: 179 min - focus on summary, mock tests and weak topics" in lines
    assert text.endswith("\n")


def test_render_timetable_without_revision_section() -> None:
    plan = generate_plan(parse_subjects("Math"), 1, today=TODAY)

    assert "Revision Days" not in render_timetable(plan)


def test_collect_metrics_for_scenario() -> None:
    metrics = collect_metrics(_scenario())

    assert metrics["total_study_minutes"] == 7 * 211
    assert metrics["total_revision_minutes"] == 3 * 179
    assert metrics["minutes_by_subject"] == {"Math": 7 * 141, "Physics": 7 * 70}
    assert metrics["share_by_subject"] == {"Math": 0.6682, "Physics": 0.3318}
    assert metrics["daily_utilization"] == 1.0
    assert metrics["overbooked_days"] == 0


def test_collect_metrics_without_subjects() -> None:
    metrics = collect_metrics(generate_plan([], 4, today=TODAY))

    assert metrics["total_study_minutes"] == 0
    assert metrics["share_by_subject"] == {}
    assert metrics["daily_utilization"] == 0.0


def test_warnings_for_overbooked_and_short_plans() -> None:
    crowded = generate_plan(parse_subjects("\n".join(f"S{idx}" for idx in range(15))), 1, hours_per_day=4, today=TODAY)

    warnings, suggestions = build_warnings_and_suggestions(crowded)

    codes = [w["code"] for w in warnings]
    assert codes == ["WARN_NO_REVISION_DAYS", "WARN_DAY_OVERBOOKED"]
    assert warnings[1]["excess_minutes"] == 300 - 211
    assert suggestions[0]["code"] == "SUGGEST_MORE_HOURS_OR_FEWER_SUBJECTS"


def test_warnings_for_empty_plan_and_clean_plan() -> None:
    empty_warnings, _ = build_warnings_and_suggestions(generate_plan([], 5, today=TODAY))
    clean_warnings, clean_suggestions = build_warnings_and_suggestions(_scenario())

    assert [w["code"] for w in empty_warnings] == ["WARN_NO_SUBJECTS"]
    assert clean_warnings == []
    assert clean_suggestions == []
