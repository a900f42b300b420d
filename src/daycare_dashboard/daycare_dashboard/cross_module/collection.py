from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import isoformat_timestamp
from ..core.enums import ActivityStatus, AttendanceStatus
from .model import DailySnapshotCollection, DailyUserSnapshot, SnapshotCollectionSummary

_PRESENT = (AttendanceStatus.CHECKED_IN, AttendanceStatus.CHECKED_OUT)


def build_daily_snapshot_collection(
    collection_date: date,
    snapshots: Sequence[DailyUserSnapshot],
    *,
    now: Optional[datetime] = None,
) -> DailySnapshotCollection:
    """Index one day's snapshots by user and count completion across modules."""
    by_user = {s.user_id: s for s in snapshots}
    return DailySnapshotCollection(
        date=collection_date,
        snapshots=by_user,
        generated_at=isoformat_timestamp(now),
        summary=SnapshotCollectionSummary(
            total_users=len(snapshots),
            attendance_complete=sum(1 for s in snapshots if s.attendance_status in _PRESENT),
            activity_complete=sum(1 for s in snapshots if s.activity_status == ActivityStatus.COMPLETED),
            cross_module_issues=sum(len(s.cross_module_issues) for s in snapshots),
        ),
    )
