from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.rates import completion_rate, take_first
from ..core.constants import ROUTE_ACTIVITY
from ..core.enums import ActivityStatus, AlertModule, Severity
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..dashboard.model import Alert, ModuleSummary, ModuleSummaryResult
from .model import PersonDaily

logger = logging.getLogger(__name__)

MODULE_LABEL = "Case records"


def build_activity_summary(
    records: Sequence[PersonDaily],
    expected_count: Optional[int] = 0,
    *,
    today: Optional[date] = None,
    settings: Optional[EngineSettings] = None,
) -> ModuleSummaryResult:
    """Summarize today's case-work records.

    Only records dated ``today`` count. ``expected_count`` wins over the number
    of records when it is set, so missing records lower the rate.
    """
    settings = settings or DEFAULT_SETTINGS
    today = today or now_local().date()

    today_records = [r for r in records if r.date == today]
    total = expected_count or len(today_records) or 0
    done = sum(1 for r in today_records if r.status == ActivityStatus.COMPLETED)

    missing = [r for r in today_records if r.status == ActivityStatus.NOT_CREATED]
    in_progress = [r for r in today_records if r.status == ActivityStatus.IN_PROGRESS]

    alerts: list[Alert] = []
    if missing:
        shown, hidden = take_first(missing, settings.activity_missing_name_limit)
        names = ", ".join(f"{r.person_name} ({r.person_id})" for r in shown)
        if hidden:
            names += f" and {hidden} more"
        severity = Severity.ERROR if len(missing) > settings.activity_missing_error_threshold else Severity.WARNING
        alerts.append(
            Alert(
                id="activity-missing",
                module=AlertModule.ACTIVITY,
                severity=severity,
                title=f"Case records not created: {len(missing)}",
                message=f"Not created yet: {names}",
                href=ROUTE_ACTIVITY,
            )
        )

    if in_progress:
        alerts.append(
            Alert(
                id="activity-in-progress",
                module=AlertModule.ACTIVITY,
                severity=Severity.INFO,
                title=f"In progress: {len(in_progress)}",
                message="Some case records are still being written",
                href=ROUTE_ACTIVITY,
            )
        )

    logger.debug(
        "activity summary: today=%s records=%s done=%s total=%s", today, len(today_records), done, total
    )
    return ModuleSummaryResult(
        module=ModuleSummary(
            name=AlertModule.ACTIVITY.value,
            label=MODULE_LABEL,
            total=total,
            done=done,
            rate=completion_rate(done, total),
        ),
        alerts=tuple(alerts),
    )
