from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..common.rates import completion_rate, take_first
from ..core.constants import ROUTE_IRC
from ..core.enums import AlertModule, IrcStatus, Severity
from ..core.settings import DEFAULT_SETTINGS, EngineSettings
from ..dashboard.model import Alert, ModuleSummary, ModuleSummaryResult
from .model import ResourceEvent, ResourceWarning

logger = logging.getLogger(__name__)

MODULE_LABEL = "Integrated resources"


def _format_hours(hours: float) -> str:
    return f"{hours:g}h"


def build_irc_summary(
    events: Sequence[ResourceEvent],
    resource_warnings: Mapping[str, ResourceWarning],
    *,
    settings: Optional[EngineSettings] = None,
) -> ModuleSummaryResult:
    """Summarize today's resource calendar: completed events and overloads."""
    settings = settings or DEFAULT_SETTINGS

    total = len(events)
    done = sum(1 for e in events if e.status == IrcStatus.COMPLETED)
    rate = completion_rate(done, total)

    over = [
        (resource_id, w)
        for resource_id, w in resource_warnings.items()
        if w.is_over and w.total_hours > settings.irc_over_capacity_hours
    ]

    alerts: list[Alert] = []
    if over:
        shown, _ = take_first(over, settings.irc_resource_name_limit)
        names = ", ".join(f"{resource_id}({_format_hours(w.total_hours)})" for resource_id, w in shown)
        severity = Severity.ERROR if len(over) > settings.irc_over_capacity_error_threshold else Severity.WARNING
        alerts.append(
            Alert(
                id="irc-over-capacity",
                module=AlertModule.IRC,
                severity=severity,
                title=f"Resources over {settings.irc_over_capacity_hours:g} hours: {len(over)}",
                message=f"Over capacity: {names}",
                href=ROUTE_IRC,
            )
        )

    if total > 0 and rate < settings.irc_low_completion_rate:
        alerts.append(
            Alert(
                id="irc-low-completion",
                module=AlertModule.IRC,
                severity=Severity.WARNING,
                title=f"Event completion {rate}%",
                message="Event completion rate is low",
                href=ROUTE_IRC,
            )
        )

    logger.debug("irc summary: done=%s total=%s over=%s", done, total, len(over))
    return ModuleSummaryResult(
        module=ModuleSummary(
            name=AlertModule.IRC.value,
            label=MODULE_LABEL,
            total=total,
            done=done,
            rate=rate,
        ),
        alerts=tuple(alerts),
    )
