"""Turn cross-module issues into dashboard alerts."""

from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import urlencode

from ..common.rates import take_first
from ..core.constants import ROUTE_ACTIVITY, ROUTE_ATTENDANCE, ROUTE_DASHBOARD
from ..core.enums import AlertModule, Severity
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..dashboard.alerts import dedupe_alerts, sort_alerts_by_severity
from ..dashboard.model import Alert
from .model import CrossModuleIssue, DailyUserSnapshot

ISSUE_TITLES = {
    "absence-activity-completed": "Absent but case record completed",
    "completed-attendance-missing-activity": "Checked out but case record missing",
    "service-discrepancy-no-behavior-record": "Short service time without behavior record",
    "attending-no-service-time": "Checked in but no service time",
    "absence-provision-provided": "Absent but service marked provided",
    "attended-no-provision-record": "Attended but no service provision record",
}

ISSUE_ROUTES = {
    "absence-activity-completed": ROUTE_ACTIVITY,
    "completed-attendance-missing-activity": ROUTE_ACTIVITY,
    "service-discrepancy-no-behavior-record": ROUTE_ACTIVITY,
    "attending-no-service-time": ROUTE_ATTENDANCE,
    "absence-provision-provided": ROUTE_ATTENDANCE,
    "attended-no-provision-record": ROUTE_ATTENDANCE,
}


def cross_module_alert_id(snapshot: DailyUserSnapshot, issue: CrossModuleIssue) -> str:
    return f"cm-{snapshot.date.isoformat()}-{snapshot.user_id}-{issue.id}"


def _issue_href(snapshot: DailyUserSnapshot, issue: CrossModuleIssue) -> str:
    route = ISSUE_ROUTES.get(issue.id)
    if route is None:
        return ROUTE_DASHBOARD
    query = urlencode({"userId": snapshot.user_id, "date": snapshot.date.isoformat()})
    return f"{route}?{query}"


def map_issue_to_dashboard_alert(snapshot: DailyUserSnapshot, issue: CrossModuleIssue) -> Alert:
    """One dashboard alert for one issue of one user on one day.

    The id only depends on date, user and issue id, so the same problem seen
    twice collapses under dedup while other users/dates never collide.
    """
    return Alert(
        id=cross_module_alert_id(snapshot, issue),
        module=AlertModule.CROSS,
        severity=issue.severity,
        title=ISSUE_TITLES.get(issue.id, issue.message),
        message=f"{issue.message}: {snapshot.user_name} ({snapshot.date.isoformat()})",
        href=_issue_href(snapshot, issue),
    )


def build_cross_module_dashboard_alerts(snapshots: Sequence[DailyUserSnapshot]) -> list[Alert]:
    alerts = [
        map_issue_to_dashboard_alert(snapshot, issue)
        for snapshot in snapshots
        for issue in snapshot.cross_module_issues
    ]
    return sort_alerts_by_severity(dedupe_alerts(alerts))


def summarize_cross_module_issues(
    snapshots: Sequence[DailyUserSnapshot],
    *,
    settings: Optional[EngineSettings] = None,
) -> list[Alert]:
    """Roll all issues up into at most one error and one warning alert.

    Used by the compact dashboard header where one line per user is too much.
    """
    settings = settings or DEFAULT_SETTINGS
    pairs = [(s, issue) for s in snapshots for issue in s.cross_module_issues]

    def user_names(severity: Severity) -> tuple[int, str]:
        matched = [s.user_name for s, issue in pairs if issue.severity == severity]
        shown, _ = take_first(matched, settings.cross_module_name_limit)
        return len(matched), ", ".join(shown)

    alerts: list[Alert] = []
    error_count, error_names = user_names(Severity.ERROR)
    if error_count:
        alerts.append(
            Alert(
                id="cross-module-error-issues",
                module=AlertModule.CROSS,
                severity=Severity.ERROR,
                title=f"Cross-module inconsistencies: {error_count}",
                message=f"Data consistency errors: {error_names} (may affect billing compliance)",
                href=ROUTE_ACTIVITY,
            )
        )

    warning_count, warning_names = user_names(Severity.WARNING)
    if warning_count:
        alerts.append(
            Alert(
                id="cross-module-warning-issues",
                module=AlertModule.CROSS,
                severity=Severity.WARNING,
                title=f"Incomplete records: {warning_count}",
                message=f"Please finish recording for: {warning_names}",
                href=ROUTE_ACTIVITY,
            )
        )
    return alerts
