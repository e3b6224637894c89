"""Planning engine runner."""

from __future__ import annotations

from datetime import date
from typing import Any

from loguru import logger

from studyplan.io import read_text
from studyplan.metrics.collector import collect_metrics
from studyplan.normalization import normalize_request, resolve_effective_config
from studyplan.reporting.warnings import build_warnings_and_suggestions
from studyplan.validation import (
    PlanValidationError,
    ValidationError,
    ValidationReport,
    validate_domain_inputs,
    validate_plan_request,
    validate_request_with_schema,
)

from .allocator import generate_plan
from .calendar import days_between, to_date
from .parser import parse_subjects


def _subjects_text(request: dict[str, Any]) -> str:
    if request.get("subjects_text") is not None:
        return request["subjects_text"]
    try:
        text = read_text(request["subjects_path"])
    except FileNotFoundError as exc:
        raise PlanValidationError(
            [
                ValidationError(
                    code="file_not_found",
                    message=f"Referenced file not found: {request['subjects_path']}",
                    path="$.subjects_path",
                )
            ]
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise PlanValidationError(
            [
                ValidationError(
                    code="file_unreadable",
                    message=f"Cannot read subjects file {request['subjects_path']}: {exc}",
                    path="$.subjects_path",
                )
            ]
        ) from exc
    if not text.strip():
        raise PlanValidationError(
            [ValidationError(code="MISSING_FIELD", message="Subjects file is empty", path="$.subjects_path")]
        )
    return text


def run_planner(
    payload: dict[str, Any],
    *,
    today: date | None = None,
    validation_report: ValidationReport | None = None,
) -> dict[str, Any]:
    """Validate a plan request, allocate it and collect warnings and metrics.

    ``subjects_text`` wins over ``subjects_path``. ``today`` wins over the
    request's ``today`` field, which wins over the current date.

    Raises:
        PlanValidationError: with every collected error when the request is rejected.
    """
    report = validation_report if validation_report is not None else ValidationReport()
    request = normalize_request(payload)

    errors = validate_plan_request(request)
    schema_report = validate_request_with_schema(request)
    report.extend(schema_report)
    errors.extend(schema_report.as_errors())
    if errors:
        raise PlanValidationError(errors)

    config = resolve_effective_config(request, report)
    reference_day = today or (to_date(request["today"]) if request.get("today") else date.today())
    subjects = parse_subjects(_subjects_text(request))
    days_left = days_between(reference_day, request["exam_date"])

    domain_report = validate_domain_inputs(subjects, days_left)
    report.extend(domain_report)
    if domain_report.errors:
        raise PlanValidationError(domain_report.as_errors())

    logger.info(
        "Generating study plan",
        subjects=len(subjects),
        days_until_exam=days_left,
        hours_per_day=config["hours_per_day"],
    )
    plan = generate_plan(
        subjects,
        days_left,
        hours_per_day=config["hours_per_day"],
        difficulty_factor=config["difficulty"],
        today=reference_day,
    )
    warnings, suggestions = build_warnings_and_suggestions(plan)
    for warning in warnings:
        logger.warning(warning["message"], code=warning["code"])

    return {
        "status": "ok",
        "plan": plan,
        "effective_config": config,
        "metrics": collect_metrics(plan),
        "warnings": warnings,
        "suggestions": suggestions,
        "validation_report": report,
    }
