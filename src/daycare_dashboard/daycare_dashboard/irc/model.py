from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ResourceEvent:
    """Calendar event of the integrated resource calendar.

    ``extended_props`` is the calendar's free-form extension bag; only its
    ``status`` key is read here.
    """

    id: str
    title: str = ""
    extended_props: Optional[Mapping[str, Any]] = None

    @property
    def status(self) -> Optional[str]:
        if not self.extended_props:
            return None
        return self.extended_props.get("status")


@dataclass(frozen=True)
class ResourceWarning:
    """Planned hours for one resource (staff member, room, vehicle) today."""

    total_hours: float
    is_over: bool
