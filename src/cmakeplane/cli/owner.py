"""cmakeplane owner command - find the target that owns a file."""

from pathlib import Path

import click

from cmakeplane.cli.utils import echo_result, find_project_root, load_project_config, run_tool


@click.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--path",
    "project_path",
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project source directory (default: nearest CMakeLists.txt)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def owner_command(file: Path, project_path: Path | None, as_json: bool) -> None:
    """Find the build target that contains FILE.

    FILE is taken relative to the current directory.
    """
    from cmakeplane.mcp.context import AppContext

    source_dir = find_project_root(project_path)
    context = AppContext.create(source_dir, load_project_config(source_dir))
    result = run_tool(
        "find_cmake_build_target_containing_file", context, file_path=str(file.absolute())
    )
    echo_result(result, as_json=as_json)
