from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (``round`` would bank)."""
    return int(math.floor(value + 0.5))


def completion_rate(done: int, total: int) -> int:
    """Percentage of ``done`` over ``total``; 0 when there is nothing to do."""
    if total == 0:
        return 0
    return round_half_up(done / total * 100)


def take_first(items: list, limit: int) -> tuple[list, int]:
    """Split ``items`` into the displayed head and the hidden remainder count."""
    limit = max(int(limit), 0)
    return items[:limit], max(len(items) - limit, 0)
