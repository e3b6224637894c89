"""Normalization for incoming request payloads."""

from __future__ import annotations

from typing import Any

_STRIPPED_FIELDS = ("subjects_path", "exam_date", "today")


def normalize_request(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a normalized copy of input request.

    Path and date fields are trimmed; blank values become ``None`` so that
    request validation reports them as missing.
    """
    normalized = dict(payload)
    if "schema_version" not in normalized:
        normalized["schema_version"] = "1.0"

    for key in _STRIPPED_FIELDS:
        value = normalized.get(key)
        if isinstance(value, str):
            normalized[key] = value.strip() or None

    subjects_text = normalized.get("subjects_text")
    if isinstance(subjects_text, str) and not subjects_text.strip():
        normalized["subjects_text"] = None

    return normalized
