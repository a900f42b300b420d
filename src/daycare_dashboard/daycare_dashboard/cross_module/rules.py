"""Cross-module consistency rules.

The rule table is closed: each entry pairs a predicate over a
``DailyUserSnapshot`` with the fixed severity and wording of the issue it
raises. Rules never look at each other's results, so declaration order only
decides emission order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core.enums import (
    ActivityStatus,
    AttendanceStatus,
    InvolvedModule,
    IssueType,
    ProvisionStatus,
    Severity,
)
from .model import CrossModuleIssue, DailyUserSnapshot

_ATTENDED = (AttendanceStatus.CHECKED_IN, AttendanceStatus.CHECKED_OUT)

_ATTENDANCE_LABELS = {
    AttendanceStatus.UNCONFIRMED: "Unconfirmed",
    AttendanceStatus.CHECKED_IN: "Checked in",
    AttendanceStatus.CHECKED_OUT: "Checked out",
    AttendanceStatus.ABSENT_TODAY: "Absent today",
}


@dataclass(frozen=True)
class IssueRule:
    id: str
    type: IssueType
    severity: Severity
    message: str
    involved_modules: tuple[InvolvedModule, ...]
    suggested_action: str
    applies: Callable[[DailyUserSnapshot], bool]

    def issue_for(self, snapshot: DailyUserSnapshot) -> CrossModuleIssue:
        return CrossModuleIssue(
            id=self.id,
            type=self.type,
            severity=self.severity,
            message=self.message.format(attendance_status=attendance_label(snapshot.attendance_status)),
            involved_modules=self.involved_modules,
            suggested_action=self.suggested_action,
        )


def attendance_label(status) -> str:
    if status is None:
        return ""
    try:
        return _ATTENDANCE_LABELS[AttendanceStatus(status)]
    except ValueError:
        return str(status)


def _absent_but_activity_completed(s: DailyUserSnapshot) -> bool:
    return s.attendance_status == AttendanceStatus.ABSENT_TODAY and s.activity_status == ActivityStatus.COMPLETED


def _checked_out_but_activity_missing(s: DailyUserSnapshot) -> bool:
    return s.attendance_status == AttendanceStatus.CHECKED_OUT and s.activity_status == ActivityStatus.NOT_CREATED


def _discrepancy_without_behavior_record(s: DailyUserSnapshot) -> bool:
    # has_problem_behavior is None when no activity facts were supplied
    return bool(s.has_service_discrepancy) and s.has_problem_behavior is False


def _attending_without_service_time(s: DailyUserSnapshot) -> bool:
    return s.attendance_status == AttendanceStatus.CHECKED_IN and not s.provided_minutes


def _absent_but_provision_provided(s: DailyUserSnapshot) -> bool:
    p = s.service_provision
    return (
        s.attendance_status == AttendanceStatus.ABSENT_TODAY
        and p is not None
        and p.has_record is True
        and p.status == ProvisionStatus.PROVIDED
    )


def _attended_without_provision_record(s: DailyUserSnapshot) -> bool:
    if s.attendance_status not in _ATTENDED:
        return False
    p = s.service_provision
    return p is None or p.has_record is False


RULES: tuple[IssueRule, ...] = (
    IssueRule(
        id="absence-activity-completed",
        type=IssueType.ATTENDANCE_ACTIVITY_MISMATCH,
        severity=Severity.ERROR,
        message="Marked absent today but the case record is completed",
        involved_modules=(InvolvedModule.ATTENDANCE, InvolvedModule.ACTIVITY),
        suggested_action="Check the case record and set it back to not created if needed",
        applies=_absent_but_activity_completed,
    ),
    IssueRule(
        id="completed-attendance-missing-activity",
        type=IssueType.ATTENDANCE_ACTIVITY_MISMATCH,
        severity=Severity.WARNING,
        message="Checked out but the case record has not been created",
        involved_modules=(InvolvedModule.ATTENDANCE, InvolvedModule.ACTIVITY),
        suggested_action="Complete the case record",
        applies=_checked_out_but_activity_missing,
    ),
    IssueRule(
        id="service-discrepancy-no-behavior-record",
        type=IssueType.ATTENDANCE_ACTIVITY_MISMATCH,
        severity=Severity.INFO,
        message="Provided service time is short but no problem behavior is recorded",
        involved_modules=(InvolvedModule.ATTENDANCE, InvolvedModule.ACTIVITY),
        suggested_action="Check the service record for a reason such as early leave",
        applies=_discrepancy_without_behavior_record,
    ),
    IssueRule(
        id="attending-no-service-time",
        type=IssueType.DATA_MISSING,
        severity=Severity.WARNING,
        message="Checked in but no provided service time is recorded",
        involved_modules=(InvolvedModule.ATTENDANCE,),
        suggested_action="Enter the provided time on the attendance screen",
        applies=_attending_without_service_time,
    ),
    IssueRule(
        id="absence-provision-provided",
        type=IssueType.ATTENDANCE_PROVISION_MISMATCH,
        severity=Severity.ERROR,
        message="Marked absent today but the service provision record says provided",
        involved_modules=(InvolvedModule.ATTENDANCE, InvolvedModule.PROVISION),
        suggested_action="Change the service provision status to absent",
        applies=_absent_but_provision_provided,
    ),
    IssueRule(
        id="attended-no-provision-record",
        type=IssueType.ATTENDANCE_PROVISION_MISMATCH,
        severity=Severity.WARNING,
        message="{attendance_status} but no service provision record has been entered",
        involved_modules=(InvolvedModule.ATTENDANCE, InvolvedModule.PROVISION),
        suggested_action="Enter the service provision record",
        applies=_attended_without_provision_record,
    ),
)

RULES_BY_ID = {rule.id: rule for rule in RULES}
