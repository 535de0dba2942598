"""Project MCP tools - describe the active CMake project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cmakeplane.core.errors import ProjectError
from cmakeplane.core.formatting import pluralize
from cmakeplane.mcp.errors import from_project_error
from cmakeplane.mcp.registry import registry
from cmakeplane.mcp.render import project_info_text, target_summary
from cmakeplane.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from cmakeplane.mcp.context import AppContext


class ProjectInfoParams(BaseParams):
    """Parameters for get_cmake_project_info (none)."""


@registry.register(
    "get_cmake_project_info",
    "Get information about the active CMake project: source directory, build "
    "directory and the list of build targets with their types.",
    ProjectInfoParams,
)
async def get_cmake_project_info(ctx: AppContext, params: ProjectInfoParams) -> dict[str, Any]:  # noqa: ARG001
    try:
        info = ctx.project_ops.info()
    except ProjectError as e:
        raise from_project_error(e) from e

    targets = sorted(info.targets, key=lambda t: t.name)
    return {
        "source_dir": str(info.source_dir),
        "build_dir": str(info.build_dir) if info.configured else None,
        "configured": info.configured,
        "targets": [target_summary(t, info.source_dir) for t in targets],
        "count": len(targets),
        "summary": pluralize(len(targets), "target"),
        "display_to_user": project_info_text(info),
    }
