from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Alert/issue urgency. Order matters: ERROR > WARNING > INFO."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class AlertModule(str, Enum):
    """Module vocabulary shared with the dashboard client."""

    ATTENDANCE = "attendance"
    ACTIVITY = "activity"
    IRC = "irc"
    CROSS = "cross"


class AttendanceStatus(str, Enum):
    """Attendance status for one user on one day."""

    UNCONFIRMED = "unconfirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    ABSENT_TODAY = "absent-today"


class ActivityStatus(str, Enum):
    """Case-work record status."""

    NOT_CREATED = "not-created"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class IrcStatus(str, Enum):
    """Resource calendar plan status."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"


class ProvisionStatus(str, Enum):
    """Service-provision (billing) record status."""

    PROVIDED = "provided"
    ABSENT = "absent"
    OTHER = "other"


class InvolvedModule(str, Enum):
    ATTENDANCE = "attendance"
    ACTIVITY = "activity"
    IRC = "irc"
    PROVISION = "provision"


class IssueType(str, Enum):
    ATTENDANCE_ACTIVITY_MISMATCH = "attendance_activity_mismatch"
    DATA_MISSING = "data_missing"
    ATTENDANCE_PROVISION_MISMATCH = "attendance_provision_mismatch"
