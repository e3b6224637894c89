"""Domain-level rules on parsed subjects and the exam window."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .errors import ValidationReport

if TYPE_CHECKING:
    from studyplan.engine.types import Subject


def validate_domain_inputs(subjects: Sequence["Subject"], days_until_exam: int) -> ValidationReport:
    """Validate parsed subjects and the day count (no short-circuit)."""
    report = ValidationReport()

    for idx, subject in enumerate(subjects):
        if not subject.name:
            report.add_error(
                code="EMPTY_SUBJECT_NAME",
                message=f"Subject line {idx + 1} has an empty name",
                field_path=f"$.subjects[{idx}].name",
                suggested_fix="Write the subject name before the colon.",
            )

    if days_until_exam <= 0:
        report.add_error(
            code="EXAM_DATE_NOT_IN_FUTURE",
            message="Exam date must be at least tomorrow. Please choose a future date.",
            field_path="$.exam_date",
            extra={"days_until_exam": days_until_exam},
        )

    return report
