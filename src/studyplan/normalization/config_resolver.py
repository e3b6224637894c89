"""Resolve effective plan configuration from request values and defaults."""

from __future__ import annotations

import math
from typing import Any

from studyplan.validation import ValidationReport

DEFAULT_PLAN_CONFIG: dict[str, Any] = {
    "hours_per_day": 3,
    "difficulty": 1.25,
    "day_start_minutes": 9 * 60,
    "slot_gap_minutes": 10,
}

# Upper bounds for positive settings; larger values are treated as invalid.
PLAN_SETTING_MAXIMUMS: dict[str, float] = {
    "hours_per_day": 24,
    "difficulty": 1000,
}

# Keys that must resolve to a strictly positive number.
_POSITIVE_KEYS = ("hours_per_day", "difficulty")
# Keys that must resolve to a non-negative whole number of minutes.
_MINUTE_KEYS = ("day_start_minutes", "slot_gap_minutes")


def coerce_positive_number(value: Any, default: float, maximum: float | None = None) -> float:
    """Return ``value`` as a positive float, or ``default`` when unusable.

    Accepts numbers and numeric strings. Booleans, NaN, infinities, values
    <= 0 and values above ``maximum`` fall back to the default.
    """
    if isinstance(value, bool) or value is None:
        return float(default)
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(number) or number <= 0:
        return float(default)
    if maximum is not None and number > maximum:
        return float(default)
    return number


def coerce_plan_setting(key: str, value: Any) -> float:
    """Coerce ``hours_per_day`` or ``difficulty`` within its bounds."""
    return coerce_positive_number(value, DEFAULT_PLAN_CONFIG[key], PLAN_SETTING_MAXIMUMS[key])


def _coerce_minutes(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int) and value >= 0:
        return value
    if isinstance(value, float) and value.is_integer() and value >= 0:
        return int(value)
    return default


def resolve_effective_config(request: dict[str, Any], validation_report: ValidationReport) -> dict[str, Any]:
    """Build the engine-ready configuration for one plan request.

    Request values override defaults; unusable values are replaced by the
    default and recorded as ``INFO_DEFAULT_APPLIED`` infos.
    """
    config = dict(DEFAULT_PLAN_CONFIG)

    for key in _POSITIVE_KEYS:
        if key not in request or request[key] in (None, ""):
            continue
        raw = request[key]
        resolved = coerce_plan_setting(key, raw)
        if _is_unusable(key, raw):
            validation_report.add_info(
                code="INFO_DEFAULT_APPLIED",
                message=f"{key} must be a positive number up to {PLAN_SETTING_MAXIMUMS[key]}; using default",
                field_path=f"$.{key}",
                extra={"applied_value": DEFAULT_PLAN_CONFIG[key]},
            )
        config[key] = resolved

    for key in _MINUTE_KEYS:
        if key not in request:
            continue
        resolved_minutes = _coerce_minutes(request[key], DEFAULT_PLAN_CONFIG[key])
        if resolved_minutes != request[key]:
            validation_report.add_info(
                code="INFO_DEFAULT_APPLIED",
                message=f"{key} must be a non-negative whole number; using default",
                field_path=f"$.{key}",
                extra={"applied_value": resolved_minutes},
            )
        config[key] = resolved_minutes

    return config


def _is_unusable(key: str, raw: Any) -> bool:
    return coerce_positive_number(raw, -1.0, PLAN_SETTING_MAXIMUMS[key]) == -1.0
