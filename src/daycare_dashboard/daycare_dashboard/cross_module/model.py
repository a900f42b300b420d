from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Union

from ..core.enums import ActivityStatus, AttendanceStatus, InvolvedModule, IrcStatus, IssueType, Severity
from ..provision.model import ServiceProvisionSummary


@dataclass(frozen=True)
class AttendanceFacts:
    status: Union[AttendanceStatus, str]
    provided_minutes: Optional[int] = None
    standard_minutes: Optional[int] = None
    is_early_leave: Optional[bool] = None


@dataclass(frozen=True)
class ActivityFacts:
    status: Union[ActivityStatus, str]
    has_problem_behavior: Optional[bool] = None
    has_seizure_record: Optional[bool] = None
    meal_amount: Optional[str] = None


@dataclass(frozen=True)
class IrcFacts:
    status: Union[IrcStatus, str]
    has_individual_support: Optional[bool] = None
    has_rehabilitation: Optional[bool] = None


@dataclass(frozen=True)
class DailyUserSnapshotInput:
    """Per-module facts for one user on one day. Every module is optional."""

    user_id: str
    user_name: str
    date: date
    attendance_data: Optional[AttendanceFacts] = None
    activity_data: Optional[ActivityFacts] = None
    irc_data: Optional[IrcFacts] = None
    service_provision_data: Optional[ServiceProvisionSummary] = None


@dataclass(frozen=True)
class CrossModuleIssue:
    id: str
    type: Union[IssueType, str]
    severity: Union[Severity, str]
    message: str
    involved_modules: tuple[Union[InvolvedModule, str], ...]
    suggested_action: str


@dataclass(frozen=True)
class DailyUserSnapshot:
    """Reconciled facts for one user on one day.

    Built from a ``DailyUserSnapshotInput``; never patched in place.
    """

    user_id: str
    user_name: str
    date: date
    last_updated: Optional[str] = None

    attendance_status: Optional[Union[AttendanceStatus, str]] = None
    provided_minutes: Optional[int] = None
    standard_minutes: Optional[int] = None
    is_early_leave: Optional[bool] = None
    has_service_discrepancy: bool = False

    activity_status: Optional[Union[ActivityStatus, str]] = None
    has_problem_behavior: Optional[bool] = None
    has_seizure_record: Optional[bool] = None
    meal_amount: Optional[str] = None

    irc_status: Optional[Union[IrcStatus, str]] = None
    has_individual_support: Optional[bool] = None
    has_rehabilitation: Optional[bool] = None

    service_provision: Optional[ServiceProvisionSummary] = None

    cross_module_issues: tuple[CrossModuleIssue, ...] = ()


@dataclass(frozen=True)
class SnapshotCollectionSummary:
    total_users: int = 0
    attendance_complete: int = 0
    activity_complete: int = 0
    cross_module_issues: int = 0


@dataclass(frozen=True)
class DailySnapshotCollection:
    date: date
    snapshots: dict[str, DailyUserSnapshot] = field(default_factory=dict)
    generated_at: str = ""
    summary: SnapshotCollectionSummary = field(default_factory=SnapshotCollectionSummary)
