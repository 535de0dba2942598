"""Core module exports."""

from cmakeplane.core.errors import (
    CmakePlaneError,
    ConfigError,
    ErrorCode,
    InternalError,
    ProjectError,
)
from cmakeplane.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)
from cmakeplane.core.progress import spinner, status

__all__ = [
    # Errors
    "CmakePlaneError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "ProjectError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
    # Console
    "spinner",
    "status",
]
