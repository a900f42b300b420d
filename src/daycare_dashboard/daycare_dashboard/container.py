from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .core.settings import EngineSettings, engine_settings_from
from .dashboard.service import DashboardService


@dataclass(frozen=True)
class Container:
    settings: EngineSettings
    dashboard_service: DashboardService


def build_container(*, settings_module: ModuleType | object) -> Container:
    settings = engine_settings_from(settings_module)
    return Container(
        settings=settings,
        dashboard_service=DashboardService(settings=settings),
    )
