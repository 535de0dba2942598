"""Config module exports."""

from cmakeplane.config.loader import CmakePlaneSettings, load_config
from cmakeplane.config.models import (
    CmakePlaneConfig,
    LoggingConfig,
    LogOutputConfig,
    ProjectConfig,
    ServerConfig,
)

__all__ = [
    "load_config",
    "CmakePlaneConfig",
    "CmakePlaneSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "ProjectConfig",
    "ServerConfig",
]
