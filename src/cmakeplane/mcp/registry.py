"""Tool registry for MCP server.

Provides decorator-based tool registration with Pydantic param validation.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from cmakeplane.mcp.context import AppContext

# Handler signature: (ctx, validated_params) -> dict
HandlerFn = Callable[["AppContext", Any], Awaitable[dict[str, Any]]]


@dataclass
class ToolSpec:
    """Specification for a registered tool."""

    name: str
    handler: HandlerFn
    description: str
    params_model: type[BaseModel]


class ToolRegistry:
    """Registry for MCP tools with decorator-based registration.

    The server and the CLI both read the module-level ``registry``; tool
    names are unique within a registry.
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(
        self,
        name: str,
        description: str,
        params_model: type[BaseModel],
    ) -> Callable[[HandlerFn], HandlerFn]:
        """Decorator to register a tool handler.

        Usage:
            @registry.register("get_cmake_project_info", "Describe the project", ProjectInfoParams)
            async def get_cmake_project_info(ctx: AppContext, params: ProjectInfoParams) -> dict:
                ...
        """

        def decorator(fn: HandlerFn) -> HandlerFn:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = ToolSpec(
                name=name,
                handler=fn,
                description=description,
                params_model=params_model,
            )
            return fn

        return decorator

    def get_all(self) -> list[ToolSpec]:
        """All tool specs in registration order."""
        return list(self._tools.values())

    def get(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return sorted(self._tools)


# Global registry instance
registry = ToolRegistry()
