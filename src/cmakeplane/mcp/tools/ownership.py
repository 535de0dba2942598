"""Ownership MCP tool - find the build target containing a file."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from cmakeplane.cmake.ownership import (
    Direct,
    DirectMultiple,
    DirectoryContained,
    IncludeReachable,
    OwnershipResult,
)
from cmakeplane.core.errors import ProjectError
from cmakeplane.mcp.errors import InvalidParamsError, from_project_error
from cmakeplane.mcp.registry import registry
from cmakeplane.mcp.render import ownership_text, target_summary
from cmakeplane.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from pathlib import Path

    from cmakeplane.mcp.context import AppContext

TOOL_NAME = "find_cmake_build_target_containing_file"


class FindTargetParams(BaseParams):
    """Parameters for find_cmake_build_target_containing_file."""

    file_path: str = Field(
        description="Path of the file to look up; relative paths are taken from the project source directory.",
    )


def _summarize(result: OwnershipResult) -> str:
    match result:
        case Direct(target=target):
            return f"direct: {target.name}"
        case DirectMultiple(targets=targets):
            return f"direct: {len(targets)} targets"
        case IncludeReachable(likely=likely, candidates=candidates):
            if likely is not None:
                return f"likely {likely.name} (+{len(candidates)} via includes)"
            return f"{len(candidates)} targets via includes"
        case DirectoryContained(target=target):
            return f"directory: {target.name}"
        case _:
            return "inconclusive"


def ownership_payload(result: OwnershipResult, root: Path) -> dict[str, Any]:
    """Structured fields for one ownership result."""
    payload: dict[str, Any] = {"match": result.kind, "owner": None, "candidates": []}
    match result:
        case Direct(target=target) | DirectoryContained(target=target):
            payload["owner"] = target_summary(target, root)
        case DirectMultiple(targets=targets):
            payload["candidates"] = [target_summary(t, root) for t in targets]
        case IncludeReachable(likely=likely, candidates=candidates):
            if likely is not None:
                payload["owner"] = target_summary(likely, root)
            payload["candidates"] = [target_summary(t, root) for t in candidates]
    return payload


@registry.register(
    TOOL_NAME,
    "Find the CMake build target(s) that contain a given source or header file, "
    "using the target sources, include directories and source directories.",
    FindTargetParams,
)
async def find_cmake_build_target_containing_file(
    ctx: AppContext, params: FindTargetParams
) -> dict[str, Any]:
    file_path = params.file_path.strip()
    if not file_path:
        raise InvalidParamsError("file_path", TOOL_NAME)

    try:
        result = ctx.project_ops.find_owner(file_path)
    except ProjectError as e:
        raise from_project_error(e) from e

    return {
        "file_path": file_path,
        **ownership_payload(result, ctx.source_dir),
        "summary": _summarize(result),
        "display_to_user": ownership_text(file_path, result, ctx.source_dir),
    }
