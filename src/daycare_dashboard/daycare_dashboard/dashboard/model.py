from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional, Sequence, Union

from ..core.enums import AlertModule, Severity


@dataclass(frozen=True)
class ModuleSummary:
    """Completion metric of one module for today."""

    name: str
    label: str
    total: int
    done: int
    rate: int


@dataclass(frozen=True)
class Alert:
    """UI-facing alert. ``id`` is the dedup key inside one aggregation run."""

    id: str
    module: Union[AlertModule, str]
    severity: Union[Severity, str]
    title: str
    message: str
    href: Optional[str] = None


@dataclass(frozen=True)
class ModuleSummaryResult:
    module: ModuleSummary
    alerts: tuple[Alert, ...] = ()


@dataclass(frozen=True)
class AlertCounts:
    error: int = 0
    warning: int = 0
    info: int = 0
    total: int = 0


@dataclass(frozen=True)
class DashboardSummary:
    modules: tuple[ModuleSummary, ...]
    alerts: tuple[Alert, ...]
    generated_at: str


@dataclass(frozen=True)
class AttendanceSummaryInput:
    users: Sequence = ()
    visits: Mapping = field(default_factory=dict)


@dataclass(frozen=True)
class ActivitySummaryInput:
    records: Sequence = ()
    expected_count: int = 0
    today: Optional[date] = None


@dataclass(frozen=True)
class IrcSummaryInput:
    events: Sequence = ()
    resource_warnings: Mapping = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardSummaryParams:
    """Inputs for one dashboard refresh. Every part is optional."""

    attendance: Optional[AttendanceSummaryInput] = None
    activity: Optional[ActivitySummaryInput] = None
    irc: Optional[IrcSummaryInput] = None
    snapshots: Optional[Sequence] = None
