"""Build CLI reports."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from studyplan.validation.errors import ValidationError, ValidationReport


def build_error_report(errors: list[ValidationError], code: str = "validation_error") -> dict[str, Any]:
    """Return a JSON-serializable error report."""
    return {
        "status": "error",
        "error": {
            "code": code,
            "count": len(errors),
            "details": [
                {"code": err.code, "message": err.message, "path": err.path}
                for err in errors
            ],
        },
    }


def build_error_report_with_validation(
    errors: list[ValidationError],
    validation_report: ValidationReport,
    code: str = "validation_error",
) -> dict[str, Any]:
    payload = build_error_report(errors, code=code)
    payload["validation_report"] = validation_report.as_dict()
    return payload


def build_success_report(result: dict[str, Any]) -> dict[str, Any]:
    """Return a JSON-serializable success report for a ``run_planner`` result."""
    generated_at = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    plan = result["plan"]
    validation_report = result.get("validation_report")
    return {
        "status": "ok",
        "generated_at": generated_at,
        "plan": plan.as_dict(),
        "effective_config": result.get("effective_config", {}),
        "metrics": result.get("metrics", {}),
        "warnings": result.get("warnings", []),
        "suggestions": result.get("suggestions", []),
        "validation_report": validation_report.as_dict() if validation_report is not None else {"errors": [], "infos": []},
    }
