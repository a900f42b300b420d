from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_TOP_ALERTS_LIMIT
from ..core.enums import Severity
from .model import Alert, AlertCounts

logger = logging.getLogger(__name__)

SEVERITY_RANK = {
    Severity.ERROR: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}


def severity_rank(severity) -> int:
    """Unknown severities rank below info."""
    try:
        return SEVERITY_RANK[Severity(severity)]
    except ValueError:
        return 0


def _tie_key(alert: Alert) -> tuple[str, str, str]:
    # colliding alerts share their id, so the id cannot order them
    return (alert.title, alert.message, alert.href or "")


def _wins(candidate: Alert, current: Alert) -> bool:
    cand_rank, cur_rank = severity_rank(candidate.severity), severity_rank(current.severity)
    if cand_rank != cur_rank:
        return cand_rank > cur_rank
    return _tie_key(candidate) < _tie_key(current)


def dedupe_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Keep one alert per id: the higher severity wins.

    Equal severities fall back to comparing title/message/href so the result
    does not depend on the order the alerts arrived in. Position in the
    output is the first time the id was seen.
    """
    by_id: dict[str, Alert] = {}
    for alert in alerts:
        current = by_id.get(alert.id)
        if current is None:
            by_id[alert.id] = alert
            continue
        logger.debug("alert id collision: %s (%s vs %s)", alert.id, current.severity, alert.severity)
        if _wins(alert, current):
            by_id[alert.id] = alert
    return list(by_id.values())


def sort_alerts_by_severity(alerts: Iterable[Alert]) -> list[Alert]:
    """error -> warning -> info; stable inside one severity."""
    return sorted(alerts, key=lambda a: severity_rank(a.severity), reverse=True)


def get_alert_counts(alerts: Iterable[Alert]) -> AlertCounts:
    counts = {Severity.ERROR: 0, Severity.WARNING: 0, Severity.INFO: 0}
    total = 0
    for alert in alerts:
        total += 1
        try:
            counts[Severity(alert.severity)] += 1
        except ValueError:
            continue
    return AlertCounts(
        error=counts[Severity.ERROR],
        warning=counts[Severity.WARNING],
        info=counts[Severity.INFO],
        total=total,
    )


def get_top_alerts(alerts: Sequence[Alert], limit: Optional[int] = DEFAULT_TOP_ALERTS_LIMIT) -> list[Alert]:
    """First ``limit`` alerts of an already sorted list."""
    if limit is None:
        limit = DEFAULT_TOP_ALERTS_LIMIT
    return list(alerts[: max(int(limit), 0)])
