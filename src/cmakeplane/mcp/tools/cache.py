"""Cache MCP tools - look up variables in CMakeCache.txt.

Lookup order for ``variable_name``:
1. omitted or blank: list every variable name
2. contains ``*``: wildcard expansion; no match falls through to 4
3. exact name: the variable
4. miss: not found, with the closest name as a suggestion
"""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from pydantic import Field

from cmakeplane.cmake.names import expand_wildcard, find_closest_name, is_wildcard
from cmakeplane.core.errors import ProjectError
from cmakeplane.core.formatting import pluralize
from cmakeplane.mcp.errors import from_project_error
from cmakeplane.mcp.registry import registry
from cmakeplane.mcp.render import (
    cache_empty_text,
    cache_listing_text,
    cache_variable_to_string,
    variable_not_found_text,
    wildcard_matches_text,
)
from cmakeplane.mcp.tools.base import BaseParams

if TYPE_CHECKING:
    from cmakeplane.mcp.context import AppContext


class CacheVariableParams(BaseParams):
    """Parameters for get_cmake_cache_variable."""

    variable_name: str | None = Field(
        default=None,
        description="Variable name, or a pattern with '*' wildcards (e.g. 'CMAKE_CXX_*'). "
        "Omit to list all variable names.",
    )


@registry.register(
    "get_cmake_cache_variable",
    "Get the value, type and documentation of a CMake cache variable. Supports "
    "'*' wildcards, suggests the closest name when the variable does not exist, "
    "and lists all variable names when no name is given.",
    CacheVariableParams,
)
async def get_cmake_cache_variable(ctx: AppContext, params: CacheVariableParams) -> dict[str, Any]:
    try:
        snapshot = ctx.project_ops.cache_snapshot()
    except ProjectError as e:
        raise from_project_error(e) from e

    requested = (params.variable_name or "").strip()
    provided = bool(requested)

    if provided:
        if is_wildcard(requested):
            matching = expand_wildcard(requested, snapshot)
            if matching:
                variables = [snapshot[name] for name in matching]
                return {
                    "found": True,
                    "pattern": requested,
                    "variables": [asdict(v) for v in variables],
                    "count": len(variables),
                    "summary": f"{pluralize(len(variables), 'variable')} matching {requested}",
                    "display_to_user": wildcard_matches_text(requested, variables),
                }
        elif requested in snapshot:
            variable = snapshot[requested]
            return {
                "found": True,
                "variable": asdict(variable),
                "summary": f"{variable.name}={variable.value}",
                "display_to_user": cache_variable_to_string(variable),
            }

    if not snapshot:
        return {
            "found": False,
            "variables": [],
            "count": 0,
            "summary": "cache is empty",
            "display_to_user": cache_empty_text(ctx.project_ops.cache_path),
        }

    names = snapshot.sorted_names()
    if not provided:
        return {
            "found": True,
            "names": names,
            "count": len(names),
            "summary": pluralize(len(names), "variable"),
            "display_to_user": cache_listing_text(names),
        }

    closest = find_closest_name(requested, names)
    suggestion = snapshot[closest] if closest is not None else None
    others = [name for name in names if name != closest]
    return {
        "found": False,
        "requested": requested,
        "suggestion": asdict(suggestion) if suggestion is not None else None,
        "other_names": others,
        "summary": f"{requested} not found" + (f", did you mean {closest}?" if closest else ""),
        "display_to_user": variable_not_found_text(requested, suggestion, others),
    }
