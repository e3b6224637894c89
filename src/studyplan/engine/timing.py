"""Clock formatting and per-day slot timing."""

from __future__ import annotations

from dataclasses import dataclass

from .types import DayPlan, Slot

DAY_START_MINUTES = 9 * 60
SLOT_GAP_MINUTES = 10


@dataclass(frozen=True, slots=True)
class TimedSlot:
    slot: Slot
    start_minutes: int
    end_minutes: int

    @property
    def start(self) -> str:
        return format_time(self.start_minutes)

    @property
    def end(self) -> str:
        return format_time(self.end_minutes)


def format_time(total_minutes: int) -> str:
    """Format minutes from midnight as ``HH:MM AM|PM``; hour 0 shows as 12."""
    hours, minutes = divmod(total_minutes, 60)
    display_hour = hours % 12 or 12
    suffix = "AM" if hours < 12 else "PM"
    return f"{display_hour:02d}:{minutes:02d} {suffix}"


def build_day_schedule(
    day: DayPlan,
    *,
    start_minutes: int = DAY_START_MINUTES,
    gap_minutes: int = SLOT_GAP_MINUTES,
) -> list[TimedSlot]:
    """Assign start/end times with a cursor that is reset for every day."""
    timed: list[TimedSlot] = []
    cursor = start_minutes
    for slot in day.slots:
        end = cursor + slot.minutes
        timed.append(TimedSlot(slot=slot, start_minutes=cursor, end_minutes=end))
        cursor = end + gap_minutes
    return timed
