"""JSON schema validation for plan requests."""

from __future__ import annotations

import json
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any

from .errors import ValidationReport

_SCHEMA_FILE = Path(__file__).resolve().parent / "schemas" / "plan_request.schema.json"

# Fields that fall back to a default instead of rejecting the request.
DEFAULTABLE_FIELDS = frozenset({"hours_per_day", "difficulty", "day_start_minutes", "slot_gap_minutes"})


@lru_cache(maxsize=1)
def load_request_schema() -> dict[str, Any]:
    return json.loads(_SCHEMA_FILE.read_text(encoding="utf-8"))


def validate_request_with_schema(payload: dict[str, Any]) -> ValidationReport:
    """Validate a plan request against the bundled schema.

    Issues on defaultable fields and unknown keys are reported as infos.
    """
    report = ValidationReport()
    _validate_node(value=payload, schema=load_request_schema(), path="$", report=report)
    return report


def _report(report: ValidationReport, *, code: str, message: str, path: str, lenient: bool) -> None:
    if lenient:
        report.add_info(code=code, message=message, field_path=path)
    else:
        report.add_error(code=code, message=message, field_path=path)


def _validate_node(
    *,
    value: Any,
    schema: dict[str, Any],
    path: str,
    report: ValidationReport,
    lenient: bool = False,
) -> None:
    expected_type = schema.get("type")
    if expected_type and not _matches_type(value, expected_type):
        _report(
            report,
            code="INVALID_TYPE",
            message=f"Expected type {expected_type}, got {type(value).__name__}",
            path=path,
            lenient=lenient,
        )
        return

    if isinstance(value, dict):
        properties = schema.get("properties", {})
        if schema.get("additionalProperties") is False:
            for key in value:
                if key not in properties:
                    report.add_info(
                        code="INFO_UNKNOWN_FIELD_IGNORED",
                        message=f"Unknown field: {key}",
                        field_path=f"{path}.{key}",
                    )

        for key, prop_schema in properties.items():
            if key in value and value[key] is not None:
                _validate_node(
                    value=value[key],
                    schema=prop_schema,
                    path=f"{path}.{key}",
                    report=report,
                    lenient=lenient or key in DEFAULTABLE_FIELDS,
                )

    elif isinstance(value, str):
        min_len = schema.get("minLength")
        if min_len is not None and len(value.strip()) < min_len:
            _report(report, code="MISSING_REQUIRED_FIELD", message="String cannot be empty", path=path, lenient=lenient)
        if schema.get("format") == "date" and not _is_date(value):
            _report(report, code="INVALID_DATE_FORMAT", message="Invalid date format", path=path, lenient=lenient)

    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        minimum = schema.get("minimum")
        if minimum is not None and value < minimum:
            _report(report, code="OUT_OF_RANGE", message=f"Value must be >= {minimum}", path=path, lenient=lenient)
        exclusive_min = schema.get("exclusiveMinimum")
        if exclusive_min is not None and value <= exclusive_min:
            _report(report, code="OUT_OF_RANGE", message=f"Value must be > {exclusive_min}", path=path, lenient=lenient)
        maximum = schema.get("maximum")
        if maximum is not None and value > maximum:
            _report(report, code="OUT_OF_RANGE", message=f"Value must be <= {maximum}", path=path, lenient=lenient)


def _matches_type(value: Any, expected_type: str) -> bool:
    return {
        "object": isinstance(value, dict),
        "array": isinstance(value, list),
        "string": isinstance(value, str),
        "integer": isinstance(value, int) and not isinstance(value, bool),
        "number": isinstance(value, (int, float)) and not isinstance(value, bool),
        "boolean": isinstance(value, bool),
    }.get(expected_type, True)


def _is_date(value: str) -> bool:
    try:
        date.fromisoformat(value.strip())
    except ValueError:
        return False
    return True
