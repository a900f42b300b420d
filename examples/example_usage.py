"""Example: build a dashboard summary with the engine directly (no Flask).

The controller is only a thin JSON layer; everything below is what it calls.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.daycare_dashboard.daycare_dashboard.activity.model import PersonDaily
from src.daycare_dashboard.daycare_dashboard.attendance.model import AttendanceUser, AttendanceVisit
from src.daycare_dashboard.daycare_dashboard.container import build_container
from src.daycare_dashboard.daycare_dashboard.core.enums import ActivityStatus, AttendanceStatus, ProvisionStatus
from src.daycare_dashboard.daycare_dashboard.cross_module.alerts import summarize_cross_module_issues
from src.daycare_dashboard.daycare_dashboard.cross_module.snapshot import build_daily_snapshots_from_existing_data
from src.daycare_dashboard.daycare_dashboard.dashboard.model import (
    ActivitySummaryInput,
    AttendanceSummaryInput,
    DashboardSummaryParams,
)
from src.daycare_dashboard.daycare_dashboard.provision.model import ServiceProvisionRecord, build_provision_summary_map


def main(today=None):
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings_module=settings)
    today = today or date.today()

    users = [
        AttendanceUser(user_code="U001", full_name="Aiko Tanaka", standard_minutes=240),
        AttendanceUser(user_code="U002", full_name="Ken Suzuki", standard_minutes=240),
    ]
    visits = [
        AttendanceVisit(user_code="U001", status=AttendanceStatus.CHECKED_OUT, provided_minutes=150, is_early_leave=True),
        AttendanceVisit(user_code="U002", status=AttendanceStatus.ABSENT_TODAY),
    ]
    records = [
        PersonDaily(record_id=1, person_id="U001", person_name="Aiko Tanaka", date=today, status=ActivityStatus.NOT_CREATED),
        PersonDaily(record_id=2, person_id="U002", person_name="Ken Suzuki", date=today, status=ActivityStatus.COMPLETED),
    ]
    provision_records = [
        ServiceProvisionRecord(
            record_id=10,
            user_code="U002",
            record_date=today,
            status=ProvisionStatus.PROVIDED,
            start_hhmm=930,
            end_hhmm=1530,
            note="Entered from the transport sheet",
        ),
    ]

    snapshots = build_daily_snapshots_from_existing_data(
        today,
        records,
        users,
        visits,
        provision_map=build_provision_summary_map(provision_records, today),
        settings=container.settings,
    )
    report = container.dashboard_service.build_report(
        DashboardSummaryParams(
            attendance=AttendanceSummaryInput(users=users, visits={v.user_code: v for v in visits}),
            activity=ActivitySummaryInput(records=records, expected_count=len(users), today=today),
            snapshots=snapshots,
        )
    )

    for module in report.summary.modules:
        print(f"{module.label}: {module.done}/{module.total} ({module.rate}%)")
    for alert in report.summary.alerts:
        print(f"[{alert.severity.value}] {alert.title} - {alert.message}")

    print("Header:")
    for alert in summarize_cross_module_issues(snapshots, settings=container.settings):
        print(f"[{alert.severity.value}] {alert.title} - {alert.message}")
    return report


if __name__ == "__main__":
    main()
