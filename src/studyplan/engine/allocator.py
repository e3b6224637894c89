"""Deterministic proportional allocation.

Phases:
1) reserve up to three revision days before the exam,
2) split each study day's effective minutes across subjects by weight,
3) hand a day's leftover (when more than 10 minutes) to its largest slot.

Pure function of its inputs: no I/O, no randomness, inputs are never mutated.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Sequence

from loguru import logger

from studyplan.normalization.config_resolver import DEFAULT_PLAN_CONFIG, coerce_plan_setting
from studyplan.validation.errors import PlanValidationError, ValidationError

from .calendar import iter_days
from .types import REVISION_SLOT_NAME, DayPlan, PlanResult, Slot, Subject
from .weights import compute_daily_minutes, round_half_up, weigh_subjects

MAX_REVISION_DAYS = 3
MIN_SLOT_MINUTES = 20
LEFTOVER_THRESHOLD_MINUTES = 10
REVISION_SHARE = 0.85


def split_days(days_until_exam: int) -> tuple[int, int]:
    """Return ``(study_days, revision_days)``; at least one study day."""
    revision_days = min(MAX_REVISION_DAYS, max(0, days_until_exam - 1))
    study_days = max(1, days_until_exam - revision_days)
    return study_days, revision_days


def allocate_day(
    subjects: Sequence[Subject],
    *,
    total_weight: float,
    effective_minutes: int,
) -> tuple[Slot, ...]:
    """Allocate one study day across weighted subjects.

    Every subject gets at least ``MIN_SLOT_MINUTES``. When more than
    ``LEFTOVER_THRESHOLD_MINUTES`` stay unassigned, slots are stably sorted
    largest first and the whole leftover goes to the first one.
    """
    if total_weight <= 0:
        return ()

    slots: list[Slot] = []
    remaining = effective_minutes
    for subject in subjects:
        minutes = max(MIN_SLOT_MINUTES, round_half_up(subject.weight / total_weight * effective_minutes))
        if minutes <= 0:
            continue
        slots.append(Slot(subject_name=subject.name, minutes=minutes, topics=subject.topics))
        remaining -= minutes

    if remaining > LEFTOVER_THRESHOLD_MINUTES and slots:
        slots.sort(key=lambda slot: -slot.minutes)
        largest = slots[0]
        slots[0] = Slot(subject_name=largest.subject_name, minutes=largest.minutes + remaining, topics=largest.topics)

    return tuple(slots)


def generate_plan(
    subjects: Sequence[Subject],
    days_until_exam: int,
    hours_per_day: Any = DEFAULT_PLAN_CONFIG["hours_per_day"],
    difficulty_factor: Any = DEFAULT_PLAN_CONFIG["difficulty"],
    today: date | None = None,
) -> PlanResult:
    """Build study and revision days for the days left before the exam.

    Study days start tomorrow; revision days follow them. Invalid or
    out-of-range ``hours_per_day`` (above 24) and ``difficulty_factor``
    (above 1000) fall back to 3 and 1.25.

    Raises:
        PlanValidationError: when ``days_until_exam`` is not positive.
    """
    if isinstance(days_until_exam, bool) or not isinstance(days_until_exam, int) or days_until_exam <= 0:
        raise PlanValidationError(
            [
                ValidationError(
                    code="EXAM_DATE_NOT_IN_FUTURE",
                    message="Exam date must be at least tomorrow. Please choose a future date.",
                    path="$.exam_date",
                )
            ]
        )

    hours = coerce_plan_setting("hours_per_day", hours_per_day)
    factor = coerce_plan_setting("difficulty", difficulty_factor)
    reference_day = today if today is not None else date.today()

    study_days, revision_days = split_days(days_until_exam)
    weighted, total_weight = weigh_subjects(subjects, factor)
    budget = compute_daily_minutes(hours)
    effective_minutes = budget["effective_minutes_per_day"]

    first_study_day = reference_day + timedelta(days=1)
    study_slots = allocate_day(weighted, total_weight=total_weight, effective_minutes=effective_minutes)
    study_plan = tuple(DayPlan(date=day, slots=study_slots) for day in iter_days(first_study_day, study_days))

    revision_slot = Slot(subject_name=REVISION_SLOT_NAME, minutes=round_half_up(effective_minutes * REVISION_SHARE))
    revision_plan = tuple(
        DayPlan(date=day, slots=(revision_slot,), kind="revision")
        for day in iter_days(first_study_day + timedelta(days=study_days), revision_days)
    )

    logger.debug(
        "Plan allocated",
        subjects=len(weighted),
        study_days=study_days,
        revision_days=revision_days,
        effective_minutes=effective_minutes,
    )

    return PlanResult(
        subjects=weighted,
        days_until_exam=days_until_exam,
        study_day_count=study_days,
        revision_day_count=revision_days,
        minutes_per_day=budget["minutes_per_day"],
        break_minutes_per_day=budget["break_minutes_per_day"],
        effective_minutes_per_day=effective_minutes,
        study_plan=study_plan,
        revision_plan=revision_plan,
    )
