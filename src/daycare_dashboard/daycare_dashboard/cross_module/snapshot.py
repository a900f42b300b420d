from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from ..activity.model import PersonDaily
from ..attendance.discrepancy import has_service_discrepancy
from ..attendance.model import AttendanceUser, AttendanceVisit
from ..common.datetime_utils import isoformat_timestamp
from ..core.enums import ActivityStatus, AttendanceStatus
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..provision.model import ServiceProvisionSummary
from .model import (
    ActivityFacts,
    AttendanceFacts,
    CrossModuleIssue,
    DailyUserSnapshot,
    DailyUserSnapshotInput,
)
from .rules import RULES

logger = logging.getLogger(__name__)


def detect_cross_module_issues(snapshot: DailyUserSnapshot) -> list[CrossModuleIssue]:
    """Evaluate every rule against ``snapshot`` in declaration order."""
    return [rule.issue_for(snapshot) for rule in RULES if rule.applies(snapshot)]


def build_daily_user_snapshot(
    data: DailyUserSnapshotInput,
    *,
    settings: Optional[EngineSettings] = None,
    now: Optional[datetime] = None,
) -> DailyUserSnapshot:
    settings = settings or DEFAULT_SETTINGS
    fields: dict = {}

    attendance = data.attendance_data
    if attendance is not None:
        fields.update(
            attendance_status=attendance.status,
            provided_minutes=attendance.provided_minutes,
            standard_minutes=attendance.standard_minutes,
            is_early_leave=attendance.is_early_leave,
            has_service_discrepancy=has_service_discrepancy(
                attendance.provided_minutes,
                attendance.standard_minutes,
                ratio=settings.discrepancy_ratio,
            ),
        )

    activity = data.activity_data
    if activity is not None:
        fields.update(
            activity_status=activity.status,
            has_problem_behavior=activity.has_problem_behavior,
            has_seizure_record=activity.has_seizure_record,
            meal_amount=activity.meal_amount,
        )

    irc = data.irc_data
    if irc is not None:
        fields.update(
            irc_status=irc.status,
            has_individual_support=irc.has_individual_support,
            has_rehabilitation=irc.has_rehabilitation,
        )

    if data.service_provision_data is not None:
        fields["service_provision"] = data.service_provision_data

    snapshot = DailyUserSnapshot(
        user_id=data.user_id,
        user_name=data.user_name,
        date=data.date,
        last_updated=isoformat_timestamp(now),
        **fields,
    )
    issues = detect_cross_module_issues(snapshot)
    if issues:
        logger.debug("snapshot %s/%s: %s issue(s)", data.user_id, data.date, len(issues))
    return replace(snapshot, cross_module_issues=tuple(issues))


_VISIT_STATUSES = (
    AttendanceStatus.CHECKED_IN,
    AttendanceStatus.CHECKED_OUT,
    AttendanceStatus.ABSENT_TODAY,
)


def _attendance_status_from_visit(visit: AttendanceVisit) -> AttendanceStatus:
    for status in _VISIT_STATUSES:
        if visit.status == status:
            return status
    return AttendanceStatus.UNCONFIRMED


def build_daily_user_snapshot_from_existing_data(
    user_id: str,
    user_name: str,
    snapshot_date: date,
    person_daily: Optional[PersonDaily] = None,
    attendance_user: Optional[AttendanceUser] = None,
    attendance_visit: Optional[AttendanceVisit] = None,
    *,
    service_provision: Optional[ServiceProvisionSummary] = None,
    settings: Optional[EngineSettings] = None,
    now: Optional[datetime] = None,
) -> DailyUserSnapshot:
    """Adapt a case-work record and an attendance user/visit pair.

    A case-work record dated on another day is ignored. Attendance facts need
    both the user and the visit; a visit status outside checked-in,
    checked-out and absent-today becomes ``unconfirmed``. Absent visits are
    kept as ``absent-today`` rather than folded into ``unconfirmed`` as the
    case-record screen does, otherwise the absence rules could never fire on
    adapted data.
    """
    activity_data = None
    if person_daily is not None and person_daily.date == snapshot_date:
        behavior = person_daily.problem_behavior
        seizure = person_daily.seizure_record
        activity_data = ActivityFacts(
            status=person_daily.status or ActivityStatus.NOT_CREATED,
            has_problem_behavior=behavior.any() if behavior else False,
            has_seizure_record=bool(seizure and seizure.occurred),
            meal_amount=person_daily.meal_amount,
        )

    attendance_data = None
    if attendance_user is not None and attendance_visit is not None:
        attendance_data = AttendanceFacts(
            status=_attendance_status_from_visit(attendance_visit),
            provided_minutes=attendance_visit.provided_minutes,
            standard_minutes=attendance_user.standard_minutes,
            is_early_leave=attendance_visit.is_early_leave,
        )

    return build_daily_user_snapshot(
        DailyUserSnapshotInput(
            user_id=user_id,
            user_name=user_name,
            date=snapshot_date,
            attendance_data=attendance_data,
            activity_data=activity_data,
            service_provision_data=service_provision,
        ),
        settings=settings,
        now=now,
    )


def build_daily_snapshots_from_existing_data(
    snapshot_date: date,
    person_dailies: Sequence[PersonDaily],
    attendance_users: Sequence[AttendanceUser],
    attendance_visits: Sequence[AttendanceVisit],
    *,
    provision_map: Optional[Mapping[str, ServiceProvisionSummary]] = None,
    settings: Optional[EngineSettings] = None,
    now: Optional[datetime] = None,
) -> list[DailyUserSnapshot]:
    """One snapshot per user code seen in attendance users or case records."""
    users_by_code = {u.user_code: u for u in attendance_users}
    visits_by_code = {v.user_code: v for v in attendance_visits}
    dailies_by_code: dict[str, PersonDaily] = {}
    for p in person_dailies:
        if p.date == snapshot_date:
            dailies_by_code.setdefault(p.person_id, p)

    user_ids = list(users_by_code)
    for p in person_dailies:
        if p.person_id not in user_ids:
            user_ids.append(p.person_id)

    provision_map = provision_map or {}
    snapshots = []
    for user_id in user_ids:
        user = users_by_code.get(user_id)
        daily = dailies_by_code.get(user_id)
        user_name = (user.full_name if user else None) or (daily.person_name if daily else None) or f"User {user_id}"
        snapshots.append(
            build_daily_user_snapshot_from_existing_data(
                user_id,
                user_name,
                snapshot_date,
                daily,
                user,
                visits_by_code.get(user_id),
                service_provision=provision_map.get(user_id),
                settings=settings,
                now=now,
            )
        )
    return snapshots
