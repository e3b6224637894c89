"""Planning engine."""

from .allocator import allocate_day, generate_plan, split_days
from .calendar import days_between
from .parser import parse_subjects
from .runner import run_planner
from .timing import build_day_schedule, format_time
from .types import REVISION_SLOT_NAME, DayPlan, PlanResult, Slot, Subject

__all__ = [
    "REVISION_SLOT_NAME",
    "DayPlan",
    "PlanResult",
    "Slot",
    "Subject",
    "allocate_day",
    "build_day_schedule",
    "days_between",
    "format_time",
    "generate_plan",
    "parse_subjects",
    "run_planner",
    "split_days",
]
