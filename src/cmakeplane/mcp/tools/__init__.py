"""MCP tool handlers."""

from cmakeplane.mcp.tools import cache, ownership, project

__all__ = [
    "cache",
    "ownership",
    "project",
]
