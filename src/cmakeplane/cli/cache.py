"""cmakeplane cache command - look up cache variables."""

from pathlib import Path

import click

from cmakeplane.cli.utils import echo_result, find_project_root, load_project_config, run_tool


@click.command()
@click.argument("name", default=None, required=False)
@click.option(
    "--path",
    "project_path",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project source directory (default: nearest CMakeLists.txt)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def cache_command(name: str | None, project_path: Path | None, as_json: bool) -> None:
    """Show a CMake cache variable.

    NAME may contain '*' wildcards (quote it in the shell). Without NAME,
    lists every variable in the cache.
    """
    from cmakeplane.mcp.context import AppContext

    source_dir = find_project_root(project_path)
    context = AppContext.create(source_dir, load_project_config(source_dir))
    result = run_tool("get_cmake_cache_variable", context, variable_name=name)
    echo_result(result, as_json=as_json)
