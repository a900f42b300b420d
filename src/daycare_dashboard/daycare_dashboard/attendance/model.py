from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceUser:
    """Domain entity: a day-care user as seen by the attendance module."""

    user_code: str
    full_name: str
    standard_minutes: Optional[int] = None


@dataclass(frozen=True)
class AttendanceVisit:
    """Today's visit of one user (check-in/out, provided service time)."""

    user_code: str
    status: Union[AttendanceStatus, str] = AttendanceStatus.UNCONFIRMED
    provided_minutes: Optional[int] = None
    is_early_leave: bool = False
