"""Structured error system for MCP tools.

Provides typed exceptions with error codes and remediation hints so an
agent can tell "fix your input" from "configure the project first".
Lookups that find nothing are results, not errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from fastmcp.exceptions import ToolError

from cmakeplane.core.errors import ErrorCode, ProjectError


class MCPErrorCode(StrEnum):
    """Machine-readable error codes for MCP tool failures."""

    # Validation errors - agent should fix input
    INVALID_PARAMS = "INVALID_PARAMS"

    # Precondition errors - project must be configured first
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    CACHE_NOT_FOUND = "CACHE_NOT_FOUND"
    CODE_MODEL_UNAVAILABLE = "CODE_MODEL_UNAVAILABLE"
    CODE_MODEL_INVALID = "CODE_MODEL_INVALID"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorResponse:
    """Structured error response for MCP tools."""

    code: MCPErrorCode
    message: str
    remediation: str
    path: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code.value,
            "message": self.message,
            "remediation": self.remediation,
            "path": self.path,
            "context": self.context,
        }


class MCPError(ToolError):
    """Base exception for MCP tool errors with structured response.

    Extends FastMCP's ToolError so FastMCP passes it through unchanged
    instead of wrapping it in a generic ToolError.
    """

    def __init__(
        self,
        code: MCPErrorCode,
        message: str,
        remediation: str,
        path: str | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.remediation = remediation
        self.path = path
        self.context = context

    def to_response(self) -> ErrorResponse:
        """Convert to ErrorResponse."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            remediation=self.remediation,
            path=self.path,
            context=self.context,
        )


_PROJECT_ERRORS: dict[ErrorCode, tuple[MCPErrorCode, str]] = {
    ErrorCode.SOURCE_DIR_NOT_FOUND: (
        MCPErrorCode.PROJECT_NOT_FOUND,
        "Start the server from (or pass) a directory containing CMakeLists.txt.",
    ),
    ErrorCode.CACHE_NOT_FOUND: (
        MCPErrorCode.CACHE_NOT_FOUND,
        "Configure the project (cmake -S <src> -B <build>) and retry.",
    ),
    ErrorCode.CODE_MODEL_UNAVAILABLE: (
        MCPErrorCode.CODE_MODEL_UNAVAILABLE,
        "Run 'cmakeplane init' to request the code model, then configure the project and retry.",
    ),
    ErrorCode.CODE_MODEL_INVALID: (
        MCPErrorCode.CODE_MODEL_INVALID,
        "Reconfigure the project to regenerate the File API reply.",
    ),
}


def from_project_error(error: ProjectError) -> MCPError:
    """Translate a snapshot precondition failure into a tool error."""
    code, remediation = _PROJECT_ERRORS.get(
        error.code,
        (MCPErrorCode.INTERNAL_ERROR, "Check the server log for details."),
    )
    return MCPError(
        code=code,
        message=error.message,
        remediation=remediation,
        path=error.details.get("path"),
        retryable=error.retryable,
    )


class InvalidParamsError(MCPError):
    """Raised when a required tool parameter is missing or blank."""

    def __init__(self, param: str, tool: str) -> None:
        super().__init__(
            code=MCPErrorCode.INVALID_PARAMS,
            message=f"{param} parameter is required for {tool}",
            remediation=f"Call {tool} again with a non-empty '{param}'.",
            param=param,
        )
