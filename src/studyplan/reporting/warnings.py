"""Warning and suggestion generation for planning output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from studyplan.engine.types import PlanResult


def build_warnings_and_suggestions(plan: "PlanResult") -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Flag plans that are empty, lack revision time or overbook study days."""
    warnings: list[dict[str, Any]] = []
    suggestions: list[dict[str, Any]] = []

    # (1) No subjects: study days exist but carry no slots.
    if not plan.subjects:
        warnings.append(
            {
                "code": "WARN_NO_SUBJECTS",
                "severity": "warning",
                "message": "No subjects were given; study days have no slots.",
            }
        )

    # (2) Exam is too close for any revision day.
    if plan.revision_day_count == 0:
        warnings.append(
            {
                "code": "WARN_NO_REVISION_DAYS",
                "severity": "warning",
                "message": "Exam is tomorrow: no days left for revision or mock tests.",
            }
        )

    # (3) Minimum slot length pushes study days over the effective budget.
    overbooked = [day for day in plan.study_plan if day.total_minutes > plan.effective_minutes_per_day]
    if overbooked:
        excess = overbooked[0].total_minutes - plan.effective_minutes_per_day
        warnings.append(
            {
                "code": "WARN_DAY_OVERBOOKED",
                "severity": "warning",
                "message": "Too many subjects for the daily budget: study days exceed the available minutes.",
                "days": len(overbooked),
                "excess_minutes": excess,
            }
        )
        suggestions.append(
            {
                "code": "SUGGEST_MORE_HOURS_OR_FEWER_SUBJECTS",
                "message": "Increase hours per day or merge subjects with few topics.",
            }
        )

    return warnings, suggestions
