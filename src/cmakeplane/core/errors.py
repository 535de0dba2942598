"""CMakePlane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Project (snapshot preconditions)
- 9xxx: Internal

Data-quality problems (unparseable cache lines, unknown names, files no
target claims) are never errors; they surface as explicit result values.
Only a missing precondition (no source tree, no cache, no code model)
raises.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Project (3xxx)
    SOURCE_DIR_NOT_FOUND = 3001
    CACHE_NOT_FOUND = 3002
    CODE_MODEL_UNAVAILABLE = 3003
    CODE_MODEL_INVALID = 3004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class CmakePlaneError(Exception):
    """Base error with structured context for MCP responses."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CACHE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/MCP responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CmakePlaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ProjectError(CmakePlaneError):
    """A project snapshot could not be acquired at all.

    Distinct from "acquired but empty": a cache with zero variables or a
    code model with zero targets is a normal result, not a ProjectError.
    Configuring the project usually fixes these, so they are retryable.
    """

    @classmethod
    def source_dir_not_found(cls, path: str) -> "ProjectError":
        return cls(
            code=ErrorCode.SOURCE_DIR_NOT_FOUND,
            message=f"Project source directory not found: {path}",
            details={"path": path},
        )

    @classmethod
    def cache_not_found(cls, path: str) -> "ProjectError":
        return cls(
            code=ErrorCode.CACHE_NOT_FOUND,
            message=f"CMake cache not found at {path}. Perhaps the project is not configured yet.",
            retryable=True,
            details={"path": path},
        )

    @classmethod
    def code_model_unavailable(cls, build_dir: str, reason: str) -> "ProjectError":
        return cls(
            code=ErrorCode.CODE_MODEL_UNAVAILABLE,
            message=f"CMake code model not available in {build_dir}: {reason}",
            retryable=True,
            details={"build_dir": build_dir, "reason": reason},
        )

    @classmethod
    def code_model_invalid(cls, path: str, reason: str) -> "ProjectError":
        return cls(
            code=ErrorCode.CODE_MODEL_INVALID,
            message=f"Failed to read code model file {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class InternalError(CmakePlaneError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
