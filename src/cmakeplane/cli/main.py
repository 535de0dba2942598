"""CMakePlane CLI - cmakeplane command."""

import click

from cmakeplane.cli.cache import cache_command
from cmakeplane.cli.info import info_command
from cmakeplane.cli.init import init_command
from cmakeplane.cli.owner import owner_command
from cmakeplane.cli.serve import serve_command
from cmakeplane.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="cmakeplane")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """CMakePlane - CMake project queries for AI coding agents."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(init_command, name="init")
cli.add_command(serve_command, name="serve")
cli.add_command(info_command, name="info")
cli.add_command(cache_command, name="cache")
cli.add_command(owner_command, name="owner")


if __name__ == "__main__":
    cli()
