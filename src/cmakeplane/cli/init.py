"""cmakeplane init command - prepare a CMake project for CMakePlane."""

from pathlib import Path

import click

from cmakeplane.cmake.fileapi import write_codemodel_query
from cmakeplane.config.constants import CONFIG_DIRNAME
from cmakeplane.config.user_config import UserConfig, write_user_config
from cmakeplane.core.progress import get_console, status


def initialize_project(
    source_dir: Path, *, build_dir: str | None = None, force: bool = False
) -> bool:
    """Initialize a project for CMakePlane, returning True on success.

    Writes the user config and asks CMake to produce the code model on the
    next configure by placing a File API query in the build directory.

    Args:
        source_dir: Path to the CMake source directory
        build_dir: Build directory to record (default from UserConfig)
        force: Overwrite an existing config
    """
    config_dir = source_dir / CONFIG_DIRNAME
    config_path = config_dir / "config.yaml"
    console = get_console()

    if config_path.exists() and not force:
        status(f"Already initialized: {config_dir}", style="info")
        status("Use --force to reinitialize", style="info")
        return False

    console.print()
    status(f"Initializing CMakePlane in {source_dir}", style="none")
    console.print()

    user_config = UserConfig(build_dir=build_dir) if build_dir else UserConfig()
    write_user_config(config_path, user_config)

    gitignore_path = config_dir / ".gitignore"
    if not gitignore_path.exists() or force:
        gitignore_path.write_text(
            "# Ignore everything except user config files\n*\n!.gitignore\n!config.yaml\n"
        )

    resolved_build = Path(user_config.build_dir).expanduser()
    if not resolved_build.is_absolute():
        resolved_build = source_dir / resolved_build
    query_path = write_codemodel_query(resolved_build)

    status(f"Config created at {config_path.relative_to(source_dir)}", style="success")
    status(f"Code model query written to {query_path}", style="success")
    console.print()
    status(
        f"Configure the project (cmake -S {source_dir} -B {resolved_build}) "
        "to generate the code model.",
        style="none",
    )
    return True


@click.command()
@click.argument(
    "path",
    default=None,
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--build-dir", "-B", default=None, help="Build directory (default: build)")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing .cmakeplane config")
def init_command(path: Path | None, build_dir: str | None, force: bool) -> None:
    """Initialize a CMake project for CMakePlane.

    Creates .cmakeplane/config.yaml and the CMake File API query that makes
    the next configure produce a code model.

    PATH is the project source directory. If not specified, auto-detects by
    walking up from the current directory to the nearest CMakeLists.txt.
    """
    from cmakeplane.cli.utils import find_project_root

    source_dir = find_project_root(path)
    initialize_project(source_dir, build_dir=build_dir, force=force)
