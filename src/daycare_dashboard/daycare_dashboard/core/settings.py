from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from . import constants
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class EngineSettings:
    """Thresholds and display caps passed explicitly into the engine.

    The engine never reads environment or module state on its own; callers
    build one of these (usually from a settings module) and hand it down.
    """

    discrepancy_ratio: float = constants.DEFAULT_DISCREPANCY_RATIO
    attendance_discrepancy_error_threshold: int = constants.DEFAULT_ATTENDANCE_DISCREPANCY_ERROR_THRESHOLD
    activity_missing_error_threshold: int = constants.DEFAULT_ACTIVITY_MISSING_ERROR_THRESHOLD
    activity_missing_name_limit: int = constants.DEFAULT_ACTIVITY_MISSING_NAME_LIMIT
    irc_over_capacity_hours: float = constants.DEFAULT_IRC_OVER_CAPACITY_HOURS
    irc_over_capacity_error_threshold: int = constants.DEFAULT_IRC_OVER_CAPACITY_ERROR_THRESHOLD
    irc_resource_name_limit: int = constants.DEFAULT_IRC_RESOURCE_NAME_LIMIT
    irc_low_completion_rate: int = constants.DEFAULT_IRC_LOW_COMPLETION_RATE
    cross_module_name_limit: int = constants.DEFAULT_CROSS_MODULE_NAME_LIMIT
    top_alerts_limit: int = constants.DEFAULT_TOP_ALERTS_LIMIT


DEFAULT_SETTINGS = EngineSettings()

_FLOAT_KEYS = {
    "DISCREPANCY_RATIO": "discrepancy_ratio",
    "IRC_OVER_CAPACITY_HOURS": "irc_over_capacity_hours",
}

_INT_KEYS = {
    "ATTENDANCE_DISCREPANCY_ERROR_THRESHOLD": "attendance_discrepancy_error_threshold",
    "ACTIVITY_MISSING_ERROR_THRESHOLD": "activity_missing_error_threshold",
    "ACTIVITY_MISSING_NAME_LIMIT": "activity_missing_name_limit",
    "IRC_OVER_CAPACITY_ERROR_THRESHOLD": "irc_over_capacity_error_threshold",
    "IRC_RESOURCE_NAME_LIMIT": "irc_resource_name_limit",
    "IRC_LOW_COMPLETION_RATE": "irc_low_completion_rate",
    "CROSS_MODULE_NAME_LIMIT": "cross_module_name_limit",
    "TOP_ALERTS_LIMIT": "top_alerts_limit",
}


def engine_settings_from(settings: ModuleType | object) -> EngineSettings:
    """Read engine knobs from a settings module; missing names keep defaults."""
    values: dict = {}

    for name, field_name in _FLOAT_KEYS.items():
        raw = getattr(settings, name, None)
        if raw is None:
            continue
        try:
            values[field_name] = float(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{name} must be a number, got {raw!r}")

    for name, field_name in _INT_KEYS.items():
        raw = getattr(settings, name, None)
        if raw is None:
            continue
        try:
            values[field_name] = int(raw)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
        if values[field_name] < 0:
            raise ConfigurationError(f"{name} must not be negative")

    ratio = values.get("discrepancy_ratio", DEFAULT_SETTINGS.discrepancy_ratio)
    if not 0 < ratio <= 1:
        raise ConfigurationError("DISCREPANCY_RATIO must be in (0, 1]")

    return EngineSettings(**values)
