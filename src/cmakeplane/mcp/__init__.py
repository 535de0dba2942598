"""MCP server exposing CMake project queries as tools."""

from cmakeplane.mcp.server import create_mcp_server, run_server

__all__ = ["create_mcp_server", "run_server"]
