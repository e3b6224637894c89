"""Weight and daily minute budget formulas."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable

from .types import Subject

MAX_BREAK_MINUTES = 30
BREAK_RATIO = 0.12
MIN_EFFECTIVE_MINUTES = 30


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def weigh_subjects(subjects: Iterable[Subject], difficulty_factor: float) -> tuple[tuple[Subject, ...], float]:
    """Derive weighted copies of ``subjects`` and their total weight.

    Formula: ``weight = max(1, topic_count) * difficulty_factor``.
    """
    weighted = tuple(
        replace(subject, weight=max(1, subject.topic_count) * difficulty_factor) for subject in subjects
    )
    total_weight = sum(subject.weight for subject in weighted)
    return weighted, total_weight


def compute_daily_minutes(hours_per_day: float) -> dict[str, int]:
    """Compute the daily budget.

    Formulas:
    - minutes_per_day = round(hours_per_day * 60)
    - break_minutes_per_day = min(30, round(minutes_per_day * 0.12))
    - effective_minutes_per_day = max(30, minutes_per_day - break_minutes_per_day)
    """
    minutes_per_day = round_half_up(hours_per_day * 60)
    break_minutes = min(MAX_BREAK_MINUTES, round_half_up(minutes_per_day * BREAK_RATIO))
    effective_minutes = max(MIN_EFFECTIVE_MINUTES, minutes_per_day - break_minutes)
    return {
        "minutes_per_day": minutes_per_day,
        "break_minutes_per_day": break_minutes,
        "effective_minutes_per_day": effective_minutes,
    }
