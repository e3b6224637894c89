from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from studyplan.cli import main, run_plan_command, run_show_command
from studyplan.engine import run_planner
from studyplan.validation import PlanValidationError, ValidationReport

TODAY = date(2024, 1, 1)


def _write(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def _base_files(tmp_path: Path, **overrides: object) -> Path:
    subjects = tmp_path / "subjects.txt"
    subjects.write_text("Math: Algebra|Geometry\n\nPhysics\n", encoding="utf-8")

    request = tmp_path / "plan_request.json"
    payload = {
        "schema_version": "1.0",
        "request_id": "req-1",
        "subjects_path": subjects.name,
        "exam_date": "2024-01-11",
        "hours_per_day": 4,
        "difficulty": 1.25,
    }
    payload.update(overrides)
    _write(request, {key: value for key, value in payload.items() if value is not None})
    return request


def _run(tmp_path: Path, request: Path) -> tuple[int, dict]:
    output = tmp_path / "plan_output.json"
    code = run_plan_command(str(request), str(output), today=TODAY)
    return code, json.loads(output.read_text(encoding="utf-8"))


def test_end_to_end_plan_request_to_plan_output(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path))

    assert code == 0
    assert payload["status"] == "ok"
    plan = payload["plan"]
    assert plan["days_until_exam"] == 10
    assert plan["effective_minutes_per_day"] == 211
    assert len(plan["study_plan"]) == 7
    assert plan["study_plan"][0]["date"] == "2024-01-02"
    assert plan["study_plan"][0]["slots"] == [
        {"subject": "Math", "minutes": 141, "topics": ["Algebra", "Geometry"]},
        {"subject": "Physics", "minutes": 70, "topics": []},
    ]
    assert [day["slots"][0]["minutes"] for day in plan["revision_plan"]] == [179, 179, 179]
    assert payload["metrics"]["total_study_minutes"] == 7 * 211
    assert payload["validation_report"]["errors"] == []
    assert payload["warnings"] == []


def test_inline_subjects_text_and_today_from_request(tmp_path: Path) -> None:
    request = _base_files(tmp_path, subjects_path=None, subjects_text="Art", today="2024-01-08")

    result = run_planner(json.loads(request.read_text(encoding="utf-8")))

    assert result["plan"].days_until_exam == 3
    assert result["plan"].study_plan[0].slots[0].subject_name == "Art"
    assert result["plan"].study_plan[0].date == date(2024, 1, 9)


def test_missing_exam_date_is_rejected(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path, exam_date=None))

    assert code == 2
    assert payload["status"] == "error"
    details = payload["error"]["details"]
    assert ("MISSING_FIELD", "$.exam_date") in {(d["code"], d["path"]) for d in details}


def test_exam_date_today_or_past_is_rejected(tmp_path: Path) -> None:
    for exam_date in ("2024-01-01", "2023-12-25"):
        code, payload = _run(tmp_path, _base_files(tmp_path, exam_date=exam_date))

        assert code == 2
        assert [d["code"] for d in payload["error"]["details"]] == ["EXAM_DATE_NOT_IN_FUTURE"]


def test_empty_subject_name_is_rejected(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path, subjects_path=None, subjects_text="Math\n: Algebra"))

    assert code == 2
    assert [d["code"] for d in payload["error"]["details"]] == ["EMPTY_SUBJECT_NAME"]


def test_invalid_numbers_are_defaulted_not_rejected(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path, hours_per_day="lots", difficulty=0))

    assert code == 0
    assert payload["plan"]["minutes_per_day"] == 180
    assert payload["effective_config"]["difficulty"] == 1.25
    info_codes = [info["code"] for info in payload["validation_report"]["infos"]]
    assert info_codes.count("INFO_DEFAULT_APPLIED") == 2


def test_huge_numbers_are_defaulted_not_rejected(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path, hours_per_day=1e307, difficulty=1e308))

    assert code == 0
    assert payload["plan"]["minutes_per_day"] == 180
    assert payload["effective_config"]["hours_per_day"] == 3
    assert payload["effective_config"]["difficulty"] == 1.25


def test_missing_subjects_file_is_reported(tmp_path: Path) -> None:
    code, payload = _run(tmp_path, _base_files(tmp_path, subjects_path="nope.txt"))

    assert code == 2
    assert payload["error"]["details"][0]["code"] == "file_not_found"


def test_non_utf8_subjects_file_is_reported(tmp_path: Path) -> None:
    request = _base_files(tmp_path)
    (tmp_path / "subjects.txt").write_bytes(b"Math: \xff\xfe Algebra\n")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["status"] == "error"
    assert [(d["code"], d["path"]) for d in payload["error"]["details"]] == [("file_unreadable", "$.subjects_path")]


def test_subjects_path_pointing_to_directory_is_reported(tmp_path: Path) -> None:
    (tmp_path / "notes").mkdir()

    code, payload = _run(tmp_path, _base_files(tmp_path, subjects_path="notes"))

    assert code == 2
    assert payload["error"]["details"][0]["code"] == "file_unreadable"


def test_unreadable_request_is_reported(tmp_path: Path) -> None:
    request = tmp_path / "plan_request.json"
    request.write_text("{not json", encoding="utf-8")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["error"]["code"] == "request_read_error"


def test_run_planner_collects_validation_report(tmp_path: Path) -> None:
    report = ValidationReport()

    with pytest.raises(PlanValidationError) as exc_info:
        run_planner({"subjects_text": "Math", "exam_date": "soon"}, today=TODAY, validation_report=report)

    assert [err.code for err in exc_info.value.errors] == ["INVALID_DATE_FORMAT"]
    assert [issue.code for issue in report.errors] == ["INVALID_DATE_FORMAT"]


def test_show_command_prints_timetable(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = run_show_command(str(_base_files(tmp_path)), today=TODAY)

    out = capsys.readouterr().out
    assert code == 0
    assert out.startswith("Days until exam: 10")
    assert "  09:00 AM - 11:21 AM  Math: 141 min - Algebra, Geometry" in out
    assert "Revision Days" in out


def test_main_plan_command_writes_output(tmp_path: Path) -> None:
    request = _base_files(tmp_path)
    output = tmp_path / "out.json"

    code = main(["plan", "--request", str(request), "--output", str(output), "--today", "2024-01-01"])

    assert code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["plan"]["study_day_count"] == 7
