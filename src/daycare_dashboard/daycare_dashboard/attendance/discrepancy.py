from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_DISCREPANCY_RATIO


def has_service_discrepancy(
    provided_minutes: Optional[int],
    standard_minutes: Optional[int],
    *,
    ratio: float = DEFAULT_DISCREPANCY_RATIO,
) -> bool:
    """Provided service time fell below ``ratio`` of the billing standard.

    Unknown or zero minutes on either side never count as a discrepancy.
    """
    if not provided_minutes or not standard_minutes:
        return False
    if provided_minutes <= 0:
        return False
    return provided_minutes < standard_minutes * ratio
