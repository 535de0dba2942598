"""Shared fixtures for MCP tests."""

from __future__ import annotations

import pytest

from cmakeplane.mcp.context import AppContext
from cmakeplane.mcp.registry import ToolRegistry
from tests.conftest import CMakeProject


@pytest.fixture
def clean_registry() -> ToolRegistry:
    """An empty registry, separate from the one the server reads."""
    return ToolRegistry()


@pytest.fixture
def app_context(configured_project: CMakeProject) -> AppContext:
    """Context for the configured two-target project."""
    return AppContext.create(configured_project.source_dir)


@pytest.fixture
def unconfigured_context(cmake_project: CMakeProject) -> AppContext:
    """Context for a project that has never been configured."""
    return AppContext.create(cmake_project.source_dir)
