from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..common.rates import completion_rate
from ..core.constants import ROUTE_ATTENDANCE
from ..core.enums import AlertModule, AttendanceStatus, Severity
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..dashboard.model import Alert, ModuleSummary, ModuleSummaryResult
from .discrepancy import has_service_discrepancy
from .model import AttendanceUser, AttendanceVisit

logger = logging.getLogger(__name__)

MODULE_LABEL = "Attendance"


def build_attendance_summary(
    users: Sequence[AttendanceUser],
    visits: Mapping[str, AttendanceVisit],
    *,
    settings: Optional[EngineSettings] = None,
) -> ModuleSummaryResult:
    """Summarize today's attendance: checked-out users over registered users."""
    settings = settings or DEFAULT_SETTINGS
    standard_by_code = {u.user_code: u.standard_minutes for u in users}

    total = len(users)
    done = sum(1 for v in visits.values() if v.status == AttendanceStatus.CHECKED_OUT)

    discrepancies = 0
    early_leaves = 0
    for code, visit in visits.items():
        standard = standard_by_code.get(visit.user_code or code)
        if has_service_discrepancy(visit.provided_minutes, standard, ratio=settings.discrepancy_ratio):
            discrepancies += 1
        if visit.is_early_leave:
            early_leaves += 1

    alerts: list[Alert] = []
    if discrepancies > 0:
        severity = (
            Severity.ERROR
            if discrepancies > settings.attendance_discrepancy_error_threshold
            else Severity.WARNING
        )
        alerts.append(
            Alert(
                id="attendance-discrepancies",
                module=AlertModule.ATTENDANCE,
                severity=severity,
                title=f"Service-time discrepancies: {discrepancies}",
                message=f"Provided time is below the billing standard for {discrepancies} user(s)",
                href=ROUTE_ATTENDANCE,
            )
        )

    if early_leaves > 0:
        alerts.append(
            Alert(
                id="attendance-early-leave",
                module=AlertModule.ATTENDANCE,
                severity=Severity.INFO,
                title=f"Early leave: {early_leaves}",
                message=f"{early_leaves} user(s) left early today",
                href=ROUTE_ATTENDANCE,
            )
        )

    logger.debug("attendance summary: done=%s total=%s alerts=%s", done, total, len(alerts))
    return ModuleSummaryResult(
        module=ModuleSummary(
            name=AlertModule.ATTENDANCE.value,
            label=MODULE_LABEL,
            total=total,
            done=done,
            rate=completion_rate(done, total),
        ),
        alerts=tuple(alerts),
    )
