from datetime import date

from src.daycare_dashboard.daycare_dashboard.core.enums import (
    ActivityStatus,
    AlertModule,
    AttendanceStatus,
    ProvisionStatus,
    Severity,
)
from src.daycare_dashboard.daycare_dashboard.core.settings import EngineSettings
from src.daycare_dashboard.daycare_dashboard.cross_module.alerts import (
    build_cross_module_dashboard_alerts,
    map_issue_to_dashboard_alert,
    summarize_cross_module_issues,
)
from src.daycare_dashboard.daycare_dashboard.cross_module.model import (
    ActivityFacts,
    AttendanceFacts,
    CrossModuleIssue,
    DailyUserSnapshotInput,
)
from src.daycare_dashboard.daycare_dashboard.cross_module.snapshot import build_daily_user_snapshot
from src.daycare_dashboard.daycare_dashboard.provision.model import ServiceProvisionSummary

DAY = date(2024, 1, 15)
PROVIDED = ServiceProvisionSummary(has_record=True, status=ProvisionStatus.PROVIDED)


def _absent_completed(user_id, name, day=DAY):
    return build_daily_user_snapshot(
        DailyUserSnapshotInput(
            user_id=user_id,
            user_name=name,
            date=day,
            attendance_data=AttendanceFacts(status=AttendanceStatus.ABSENT_TODAY),
            activity_data=ActivityFacts(status=ActivityStatus.COMPLETED),
        )
    )


def _checked_out_missing(user_id, name):
    return build_daily_user_snapshot(
        DailyUserSnapshotInput(
            user_id=user_id,
            user_name=name,
            date=DAY,
            attendance_data=AttendanceFacts(status=AttendanceStatus.CHECKED_OUT, provided_minutes=240, standard_minutes=240),
            activity_data=ActivityFacts(status=ActivityStatus.NOT_CREATED, has_problem_behavior=False),
            service_provision_data=PROVIDED,
        )
    )


def test_issue_becomes_cross_alert_with_deep_link():
    snapshot = _absent_completed("user002", "Hanako Suzuki")

    alert = map_issue_to_dashboard_alert(snapshot, snapshot.cross_module_issues[0])

    assert alert.id == "cm-2024-01-15-user002-absence-activity-completed"
    assert alert.module == AlertModule.CROSS
    assert alert.severity == Severity.ERROR
    assert alert.title == "Absent but case record completed"
    assert alert.message.endswith(": Hanako Suzuki (2024-01-15)")
    assert alert.href == "/daily/activity?userId=user002&date=2024-01-15"


def test_provision_issues_link_to_attendance():
    snapshot = build_daily_user_snapshot(
        DailyUserSnapshotInput(
            user_id="I022",
            user_name="T",
            date=DAY,
            attendance_data=AttendanceFacts(status=AttendanceStatus.ABSENT_TODAY),
            service_provision_data=PROVIDED,
        )
    )

    alerts = build_cross_module_dashboard_alerts([snapshot])

    assert [a.id for a in alerts] == ["cm-2024-01-15-I022-absence-provision-provided"]
    assert alerts[0].href.startswith("/daily/attendance?")


def test_unknown_issue_falls_back_to_dashboard():
    snapshot = _absent_completed("u", "U")
    issue = CrossModuleIssue(
        id="something-new",
        type="data_missing",
        severity=Severity.INFO,
        message="Something new",
        involved_modules=("attendance",),
        suggested_action="",
    )

    alert = map_issue_to_dashboard_alert(snapshot, issue)

    assert alert.title == "Something new"
    assert alert.href == "/dashboard"


def test_alert_ids_are_unique_per_user_and_day():
    snapshots = [
        _absent_completed("a", "A"),
        _absent_completed("b", "B"),
        _absent_completed("a", "A", day=date(2024, 1, 16)),
    ]

    alerts = build_cross_module_dashboard_alerts(snapshots)

    assert len({a.id for a in alerts}) == 3


def test_same_snapshot_twice_collapses_and_errors_come_first():
    missing = _checked_out_missing("b", "B")
    absent = _absent_completed("a", "A")

    alerts = build_cross_module_dashboard_alerts([missing, absent, absent])

    assert [a.severity for a in alerts] == [Severity.ERROR, Severity.WARNING]
    assert [a.id for a in alerts] == [
        "cm-2024-01-15-a-absence-activity-completed",
        "cm-2024-01-15-b-completed-attendance-missing-activity",
    ]


def test_no_issues_no_alerts():
    assert build_cross_module_dashboard_alerts([]) == []
    assert summarize_cross_module_issues([]) == []


def test_summary_rolls_up_by_severity():
    snapshots = [
        _absent_completed("a", "Aoi"),
        _absent_completed("b", "Ben"),
        _absent_completed("c", "Chika"),
        _absent_completed("d", "Daichi"),
        _checked_out_missing("e", "Emi"),
    ]

    alerts = summarize_cross_module_issues(snapshots)

    assert [a.id for a in alerts] == ["cross-module-error-issues", "cross-module-warning-issues"]
    error, warning = alerts
    assert error.severity == Severity.ERROR
    assert error.title == "Cross-module inconsistencies: 4"
    assert "Aoi, Ben, Chika" in error.message
    assert "Daichi" not in error.message
    assert warning.title == "Incomplete records: 1"
    assert "Emi" in warning.message
    assert all(a.href == "/daily/activity" for a in alerts)


def test_summary_name_cap_follows_settings():
    snapshots = [_absent_completed("a", "Aoi"), _absent_completed("b", "Ben")]

    alerts = summarize_cross_module_issues(snapshots, settings=EngineSettings(cross_module_name_limit=1))

    assert "Aoi" in alerts[0].message
    assert "Ben" not in alerts[0].message
