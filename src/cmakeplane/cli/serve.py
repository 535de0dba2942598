"""cmakeplane serve command - run the MCP server."""

from pathlib import Path
from typing import Any

import click

from cmakeplane.cli.utils import find_project_root, load_project_config


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "http"]),
    default=None,
    help="MCP transport (default from config: stdio)",
)
@click.option("--host", default=None, help="Bind address for the http transport")
@click.option("--port", "-p", type=int, default=None, help="Port for the http transport")
def serve_command(
    path: Path | None, transport: str | None, host: str | None, port: int | None
) -> None:
    """Run the CMakePlane MCP server for a CMake project.

    PATH is the project source directory. If not specified, auto-detects by
    walking up from the current directory to the nearest CMakeLists.txt.
    """
    from cmakeplane.cmake.fileapi import has_codemodel_query, write_codemodel_query
    from cmakeplane.cmake.ops import ProjectOps
    from cmakeplane.core.progress import status
    from cmakeplane.mcp.server import run_server

    source_dir = find_project_root(path)

    server: dict[str, Any] = {}
    if transport is not None:
        server["transport"] = transport
    if host is not None:
        server["host"] = host
    if port is not None:
        server["port"] = port
    config = load_project_config(source_dir, **({"server": server} if server else {}))

    build_dir = ProjectOps(source_dir, config.project).build_dir
    if not has_codemodel_query(build_dir):
        write_codemodel_query(build_dir)
        status(
            "Code model query written; reconfigure the project to generate the code model.",
            style="warning",
        )

    run_server(source_dir, config)
