"""Plan data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

REVISION_SLOT_NAME = "Revision / Mock Test"


@dataclass(frozen=True, slots=True)
class Subject:
    """A named study area with an optional ordered topic list."""

    name: str
    topics: tuple[str, ...] = ()
    weight: float = 1.0

    @property
    def topic_count(self) -> int:
        return len(self.topics)

    def as_dict(self) -> dict[str, Any]:
        return {"name": self.name, "topics": list(self.topics), "weight": self.weight}


@dataclass(frozen=True, slots=True)
class Slot:
    """Contiguous block of study time for one subject on one day."""

    subject_name: str
    minutes: int
    topics: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"subject": self.subject_name, "minutes": self.minutes, "topics": list(self.topics)}


@dataclass(frozen=True, slots=True)
class DayPlan:
    date: date
    slots: tuple[Slot, ...] = ()
    kind: str = "study"

    @property
    def total_minutes(self) -> int:
        return sum(slot.minutes for slot in self.slots)

    def as_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "kind": self.kind,
            "slots": [slot.as_dict() for slot in self.slots],
        }


@dataclass(frozen=True, slots=True)
class PlanResult:
    """Outcome of one allocation run."""

    subjects: tuple[Subject, ...]
    days_until_exam: int
    study_day_count: int
    revision_day_count: int
    minutes_per_day: int
    break_minutes_per_day: int
    effective_minutes_per_day: int
    study_plan: tuple[DayPlan, ...] = field(default_factory=tuple)
    revision_plan: tuple[DayPlan, ...] = field(default_factory=tuple)

    @property
    def days(self) -> tuple[DayPlan, ...]:
        """Study days followed by revision days."""
        return (*self.study_plan, *self.revision_plan)

    def as_dict(self) -> dict[str, Any]:
        return {
            "subjects": [subject.as_dict() for subject in self.subjects],
            "days_until_exam": self.days_until_exam,
            "study_day_count": self.study_day_count,
            "revision_day_count": self.revision_day_count,
            "minutes_per_day": self.minutes_per_day,
            "break_minutes_per_day": self.break_minutes_per_day,
            "effective_minutes_per_day": self.effective_minutes_per_day,
            "study_plan": [day.as_dict() for day in self.study_plan],
            "revision_plan": [day.as_dict() for day in self.revision_plan],
        }
