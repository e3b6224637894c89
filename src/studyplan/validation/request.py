"""Validation for plan request payload."""

from __future__ import annotations

from typing import Any

from .errors import ValidationError

_SUBJECT_SOURCE_FIELDS = ("subjects_text", "subjects_path")


def validate_plan_request(payload: dict[str, Any]) -> list[ValidationError]:
    """Check that subjects and exam date are present."""
    errors: list[ValidationError] = []

    sources = [field for field in _SUBJECT_SOURCE_FIELDS if payload.get(field) is not None]
    if not sources:
        errors.append(
            ValidationError(
                code="MISSING_FIELD",
                message="Please fill subjects and exam date: subjects are missing",
                path="$.subjects_text",
            )
        )
    for field in sources:
        value = payload[field]
        if not isinstance(value, str) or not value.strip():
            errors.append(
                ValidationError(
                    code="INVALID_TYPE",
                    message=f"Field must be a non-empty string: {field}",
                    path=f"$.{field}",
                )
            )

    exam_date = payload.get("exam_date")
    if exam_date is None:
        errors.append(
            ValidationError(
                code="MISSING_FIELD",
                message="Please fill subjects and exam date: exam date is missing",
                path="$.exam_date",
            )
        )
    elif not isinstance(exam_date, str):
        errors.append(
            ValidationError(
                code="INVALID_TYPE",
                message="Field must be an ISO date string: exam_date",
                path="$.exam_date",
            )
        )

    return errors
