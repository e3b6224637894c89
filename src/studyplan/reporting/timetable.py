"""Plain-text timetable rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from studyplan.engine.timing import DAY_START_MINUTES, SLOT_GAP_MINUTES, build_day_schedule
from studyplan.engine.weights import round_half_up

if TYPE_CHECKING:
    from studyplan.engine.types import DayPlan, PlanResult

REVISION_FOCUS_NOTE = "focus on summary, mock tests and weak topics"


def _hours(minutes: int) -> str:
    return f"{round_half_up(minutes / 60 * 100) / 100:g}"


def render_summary(plan: "PlanResult") -> list[str]:
    return [
        f"Days until exam: {plan.days_until_exam} • Study days: {plan.study_day_count} "
        f"• Revision days: {plan.revision_day_count}",
        f"Daily available: {_hours(plan.minutes_per_day)} hrs • Effective study (after short breaks): "
        f"{_hours(plan.minutes_per_day - plan.break_minutes_per_day)} hrs",
    ]


def _day_heading(day: "DayPlan") -> str:
    label = "Revision day" if day.kind == "revision" else "Study day"
    return f"{day.date.strftime('%a %b %d %Y')} ({label})"


def render_study_day(day: "DayPlan", *, start_minutes: int, gap_minutes: int) -> list[str]:
    lines = [_day_heading(day)]
    for timed in build_day_schedule(day, start_minutes=start_minutes, gap_minutes=gap_minutes):
        topics = f" - {', '.join(timed.slot.topics)}" if timed.slot.topics else ""
        lines.append(f"  {timed.start} - {timed.end}  {timed.slot.subject_name}: {timed.slot.minutes} min{topics}")
    return lines


def render_revision_day(day: "DayPlan") -> list[str]:
    lines = [_day_heading(day)]
    for slot in day.slots:
        lines.append(f"  Flexible  {slot.subject_name}: {slot.minutes} min - {REVISION_FOCUS_NOTE}")
    return lines


def render_timetable(
    plan: "PlanResult",
    *,
    start_minutes: int = DAY_START_MINUTES,
    gap_minutes: int = SLOT_GAP_MINUTES,
) -> str:
    """Render summary, study days and the revision section as text."""
    lines = render_summary(plan)
    for day in plan.study_plan:
        lines.append("")
        lines.extend(render_study_day(day, start_minutes=start_minutes, gap_minutes=gap_minutes))

    if plan.revision_plan:
        lines.extend(["", "Revision Days"])
        for day in plan.revision_plan:
            lines.append("")
            lines.extend(render_revision_day(day))

    return "\n".join(lines) + "\n"
