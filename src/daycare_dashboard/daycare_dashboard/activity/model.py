from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import ActivityStatus


@dataclass(frozen=True)
class ProblemBehavior:
    self_harm: bool = False
    violence: bool = False
    loud_voice: bool = False
    pica: bool = False
    other: bool = False
    other_detail: str = ""

    def any(self) -> bool:
        return bool(self.self_harm or self.violence or self.loud_voice or self.pica or self.other)


@dataclass(frozen=True)
class SeizureRecord:
    occurred: bool = False
    time: Optional[str] = None
    duration: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class PersonDaily:
    """Domain entity: one case-work (daily support) record for a person."""

    record_id: int
    person_id: str
    person_name: str
    date: Optional[date]
    status: Union[ActivityStatus, str] = ActivityStatus.NOT_CREATED
    meal_amount: Optional[str] = None
    problem_behavior: Optional[ProblemBehavior] = None
    seizure_record: Optional[SeizureRecord] = None
