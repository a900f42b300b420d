from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..cross_module.collection import build_daily_snapshot_collection
from ..cross_module.model import DailySnapshotCollection, DailyUserSnapshot, DailyUserSnapshotInput
from ..cross_module.snapshot import build_daily_user_snapshot
from .alerts import get_alert_counts, get_top_alerts
from .model import Alert, AlertCounts, DashboardSummary, DashboardSummaryParams
from .summary import build_dashboard_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardReport:
    summary: DashboardSummary
    counts: AlertCounts
    top_alerts: tuple[Alert, ...]


class DashboardService:
    """Entry point used by the controller; holds only immutable settings."""

    def __init__(self, *, settings: Optional[EngineSettings] = None):
        self._settings = settings or DEFAULT_SETTINGS

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def build_report(self, params: DashboardSummaryParams, *, now: Optional[datetime] = None) -> DashboardReport:
        summary = build_dashboard_summary(params, settings=self._settings, now=now)
        counts = get_alert_counts(summary.alerts)
        if counts.error:
            logger.info("dashboard refresh: %s error alert(s) of %s", counts.error, counts.total)
        return DashboardReport(
            summary=summary,
            counts=counts,
            top_alerts=tuple(get_top_alerts(summary.alerts, self._settings.top_alerts_limit)),
        )

    def build_snapshots(
        self, inputs: Sequence[DailyUserSnapshotInput], *, now: Optional[datetime] = None
    ) -> list[DailyUserSnapshot]:
        return [build_daily_user_snapshot(i, settings=self._settings, now=now) for i in inputs]

    def build_snapshot_collection(
        self,
        collection_date: date,
        inputs: Sequence[DailyUserSnapshotInput],
        *,
        now: Optional[datetime] = None,
    ) -> DailySnapshotCollection:
        snapshots = self.build_snapshots(inputs, now=now)
        return build_daily_snapshot_collection(collection_date, snapshots, now=now)
