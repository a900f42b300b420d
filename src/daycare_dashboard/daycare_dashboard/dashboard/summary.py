from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..activity.summary import build_activity_summary
from ..attendance.summary import build_attendance_summary
from ..common.datetime_utils import isoformat_timestamp
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..cross_module.alerts import build_cross_module_dashboard_alerts
from ..irc.summary import build_irc_summary
from .alerts import dedupe_alerts, sort_alerts_by_severity
from .model import Alert, DashboardSummary, DashboardSummaryParams, ModuleSummary

logger = logging.getLogger(__name__)


def build_dashboard_summary(
    params: Optional[DashboardSummaryParams] = None,
    *,
    settings: Optional[EngineSettings] = None,
    now: Optional[datetime] = None,
) -> DashboardSummary:
    """Merge every module summary and the cross-module alerts.

    Only modules with input are summarized. Alerts are deduplicated by id
    (higher severity wins) and ordered error -> warning -> info.
    """
    params = params or DashboardSummaryParams()
    settings = settings or DEFAULT_SETTINGS

    modules: list[ModuleSummary] = []
    alerts: list[Alert] = []

    if params.attendance is not None:
        result = build_attendance_summary(params.attendance.users, params.attendance.visits, settings=settings)
        modules.append(result.module)
        alerts.extend(result.alerts)

    if params.activity is not None:
        today = params.activity.today or (now.date() if now else None)
        result = build_activity_summary(
            params.activity.records,
            params.activity.expected_count,
            today=today,
            settings=settings,
        )
        modules.append(result.module)
        alerts.extend(result.alerts)

    if params.irc is not None:
        result = build_irc_summary(params.irc.events, params.irc.resource_warnings, settings=settings)
        modules.append(result.module)
        alerts.extend(result.alerts)

    if params.snapshots:
        alerts.extend(build_cross_module_dashboard_alerts(params.snapshots))

    merged = sort_alerts_by_severity(dedupe_alerts(alerts))
    logger.debug("dashboard summary: modules=%s alerts=%s (raw %s)", len(modules), len(merged), len(alerts))
    return DashboardSummary(
        modules=tuple(modules),
        alerts=tuple(merged),
        generated_at=isoformat_timestamp(now),
    )
