"""Plan metrics collector."""

from __future__ import annotations

from collections import defaultdict
from statistics import mean
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from studyplan.engine.types import PlanResult


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def collect_metrics(plan: "PlanResult") -> dict[str, Any]:
    """Summarize minutes per subject and how well days fill the budget.

    ``daily_utilization`` is clamped into [0,1]; days pushed past the budget
    by the per-slot minimum count as ``overbooked_days``.
    """
    effective = plan.effective_minutes_per_day

    minutes_by_subject: dict[str, int] = defaultdict(int)
    day_totals: list[int] = []
    for day in plan.study_plan:
        day_totals.append(day.total_minutes)
        for slot in day.slots:
            minutes_by_subject[slot.subject_name] += slot.minutes

    total_study = sum(day_totals)
    total_revision = sum(day.total_minutes for day in plan.revision_plan)

    share_by_subject = {
        name: round(minutes / total_study, 4) if total_study else 0.0
        for name, minutes in minutes_by_subject.items()
    }
    utilization = mean(_clamp01(total / effective) for total in day_totals) if day_totals and effective else 0.0

    return {
        "total_study_minutes": total_study,
        "total_revision_minutes": total_revision,
        "minutes_by_subject": dict(minutes_by_subject),
        "share_by_subject": share_by_subject,
        "daily_utilization": round(utilization, 4),
        "overbooked_days": sum(1 for total in day_totals if total > effective),
    }
