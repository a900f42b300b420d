from datetime import date, datetime

from src.daycare_dashboard.daycare_dashboard.core.enums import ActivityStatus, AttendanceStatus
from src.daycare_dashboard.daycare_dashboard.cross_module.collection import build_daily_snapshot_collection
from src.daycare_dashboard.daycare_dashboard.cross_module.model import (
    ActivityFacts,
    AttendanceFacts,
    DailyUserSnapshotInput,
)
from src.daycare_dashboard.daycare_dashboard.cross_module.snapshot import build_daily_user_snapshot

DAY = date(2024, 1, 15)
NOW = datetime(2024, 1, 15, 18, 30, 0)


def _snapshot(user_id, attendance=None, activity=None):
    return build_daily_user_snapshot(
        DailyUserSnapshotInput(
            user_id=user_id,
            user_name=user_id.upper(),
            date=DAY,
            attendance_data=AttendanceFacts(status=attendance) if attendance else None,
            activity_data=ActivityFacts(status=activity) if activity else None,
        ),
        now=NOW,
    )


def test_collection_counts_completion_and_issues():
    snapshots = [
        _snapshot("a", AttendanceStatus.CHECKED_OUT, ActivityStatus.COMPLETED),
        _snapshot("b", AttendanceStatus.CHECKED_IN, ActivityStatus.IN_PROGRESS),
        _snapshot("c", AttendanceStatus.ABSENT_TODAY, ActivityStatus.COMPLETED),
        _snapshot("d"),
    ]

    collection = build_daily_snapshot_collection(DAY, snapshots, now=NOW)

    assert collection.date == DAY
    assert collection.generated_at == "2024-01-15T18:30:00"
    assert list(collection.snapshots) == ["a", "b", "c", "d"]
    assert collection.summary.total_users == 4
    assert collection.summary.attendance_complete == 2
    assert collection.summary.activity_complete == 2
    assert collection.summary.cross_module_issues == sum(len(s.cross_module_issues) for s in snapshots)
    assert collection.summary.cross_module_issues > 0


def test_empty_collection():
    collection = build_daily_snapshot_collection(DAY, [], now=NOW)

    assert collection.snapshots == {}
    assert collection.summary.total_users == 0
    assert collection.summary.cross_module_issues == 0
