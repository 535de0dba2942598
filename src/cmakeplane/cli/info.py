"""cmakeplane info command - describe the project."""

from pathlib import Path

import click

from cmakeplane.cli.utils import echo_result, find_project_root, load_project_config, run_tool


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def info_command(path: Path | None, as_json: bool) -> None:
    """Show the project's source and build directories and its targets.

    PATH is the project source directory (default: nearest CMakeLists.txt).
    """
    from cmakeplane.mcp.context import AppContext

    source_dir = find_project_root(path)
    context = AppContext.create(source_dir, load_project_config(source_dir))
    echo_result(run_tool("get_cmake_project_info", context), as_json=as_json)
