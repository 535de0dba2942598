"""CLI utilities."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from cmakeplane.config.constants import PROJECT_MARKER
from cmakeplane.config.loader import load_config
from cmakeplane.core.errors import ConfigError

if TYPE_CHECKING:
    from cmakeplane.config.models import CmakePlaneConfig
    from cmakeplane.mcp.context import AppContext


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the CMake project root from the given path.

    Walks up the directory tree looking for the nearest CMakeLists.txt.
    If start_path is None, uses the current working directory.

    Args:
        start_path: Starting directory to search from

    Returns:
        Path to the project source directory

    Raises:
        click.ClickException: If no CMakeLists.txt is found
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        if (current / PROJECT_MARKER).is_file():
            return current
        current = current.parent

    # Check root as well
    if (current / PROJECT_MARKER).is_file():
        return current

    raise click.ClickException(
        f"Not inside a CMake project: {start_path}\n"
        f"CMakePlane commands must be run from a directory with a {PROJECT_MARKER}, "
        "or be given its path."
    )


def load_project_config(project_root: Path, **overrides: Any) -> CmakePlaneConfig:
    """Load config for a project, reporting config errors as CLI errors."""
    try:
        return load_config(project_root, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e


def run_tool(name: str, context: AppContext, **params: Any) -> dict[str, Any]:
    """Run a registered MCP tool handler in-process and return its result.

    Raises:
        click.ClickException: If the tool reports an error.
    """
    from cmakeplane.mcp.errors import MCPError
    from cmakeplane.mcp.registry import registry

    # Import tools to trigger registration
    from cmakeplane.mcp.tools import cache, ownership, project  # noqa: F401

    spec = registry.get(name)
    if spec is None:
        known = ", ".join(registry.names())
        raise click.ClickException(f"Unknown tool: {name} (known: {known})")

    try:
        return asyncio.run(spec.handler(context, spec.params_model(**params)))
    except MCPError as e:
        raise click.ClickException(f"{e.message}\n{e.remediation}") from e


def echo_result(result: dict[str, Any], *, as_json: bool) -> None:
    """Print a tool result as JSON (without prose) or as its display text."""
    if as_json:
        payload = {k: v for k, v in result.items() if k != "display_to_user"}
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(result["display_to_user"].rstrip("\n"))
