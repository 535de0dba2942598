"""FastMCP server creation and wiring.

Each tool call is logged in two phases: tool_start with params, then
tool_complete with a summary. Expected errors are logged as warnings
without a traceback; unexpected ones go to the console as a one-line
summary and to the log file with the full traceback.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from fastmcp.utilities.json_schema import dereference_refs
from pydantic import BaseModel, Field

from cmakeplane.config.constants import CONFIG_DIRNAME

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from cmakeplane.config.models import CmakePlaneConfig
    from cmakeplane.mcp.context import AppContext
    from cmakeplane.mcp.registry import ToolSpec

log = structlog.get_logger(__name__)

SERVER_INSTRUCTIONS = (
    "CMakePlane answers questions about a configured CMake project: its targets, "
    "its cache variables and which target owns a given file. Configure the project "
    "with CMake before asking; every call reads the current build directory."
)

LOG_FILENAME = "mcp-server.log"


class ToolResponse(BaseModel):
    """Standardized tool response envelope."""

    result: Any = None
    meta: dict[str, Any] = Field(default_factory=dict)

    success: bool
    error: str | None = None


def _extract_log_params(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Key params for the tool_start log, with long values shortened."""
    params: dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, str) and len(value) > 50:
            params[key] = value[:50] + "..."
        elif isinstance(value, list) and len(value) > 3:
            params[key] = f"[{len(value)} items]"
        elif value is not None:
            params[key] = value
    return params


def _extract_result_summary(result: dict[str, Any]) -> dict[str, Any]:
    """Summary metrics from a tool result for logging."""
    summary: dict[str, Any] = {}

    if "count" in result:
        summary["count"] = result["count"]
    if "found" in result:
        summary["found"] = result["found"]
    if "match" in result:
        summary["match"] = result["match"]
    if "configured" in result:
        summary["configured"] = result["configured"]

    return summary


def _format_tool_summary(result: dict[str, Any]) -> str:
    """Brief summary for the console after a tool completes."""
    if result.get("summary"):
        return str(result["summary"])
    return ""


def create_mcp_server(context: AppContext) -> FastMCP:
    """Create FastMCP server with all tools wired to context.

    Args:
        context: AppContext for the active project

    Returns:
        Configured FastMCP server ready to run
    """
    import fastmcp
    from fastmcp import FastMCP

    from cmakeplane.mcp.registry import registry

    # Import tools to trigger registration
    from cmakeplane.mcp.tools import cache, ownership, project  # noqa: F401

    log.info("mcp_server_creating", source_dir=str(context.source_dir))

    # Only consulted by the http transport
    fastmcp.settings.stateless_http = True
    fastmcp.settings.json_response = True

    mcp = FastMCP(context.config.server.name, instructions=SERVER_INSTRUCTIONS)

    tool_count = 0
    for spec in registry.get_all():
        _wire_tool(mcp, spec, context)
        tool_count += 1

    log.info("mcp_server_created", tool_count=tool_count)

    return mcp


def _wire_tool(mcp: FastMCP, spec: ToolSpec, context: AppContext) -> None:
    """Wire a single tool spec to FastMCP.

    The params model's fields become direct parameters of the tool so
    FastMCP publishes a flat schema that every MCP client accepts.
    """
    from fastmcp.tools.tool import FunctionTool
    from pydantic import ValidationError

    from cmakeplane.core.errors import InternalError
    from cmakeplane.core.logging import clear_request_id, set_request_id
    from cmakeplane.mcp.errors import MCPError

    params_model = spec.params_model
    spec_handler = spec.handler

    # dereference_refs inlines all $refs and removes $defs
    flat_schema = dereference_refs(params_model.model_json_schema())

    async def handler(**kwargs: Any) -> dict[str, Any]:
        from cmakeplane.core.progress import is_console_suppressed, spinner, status

        tool_name = spec.name
        request_id = set_request_id()
        start_time = time.perf_counter()

        log.info("tool_start", tool=tool_name, **_extract_log_params(kwargs))

        try:
            try:
                params = params_model(**kwargs)
            except ValidationError as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                message = e.errors()[0]["msg"] if e.errors() else str(e)
                log.warning(
                    "tool_validation_error",
                    tool=tool_name,
                    error=message,
                    elapsed_ms=elapsed_ms,
                )
                return ToolResponse(
                    success=False,
                    result=None,
                    error=f"Validation error: {message}",
                    meta={
                        "request_id": request_id,
                        "error_type": "validation",
                        "validation_errors": [
                            {"field": ".".join(str(x) for x in err["loc"]), "message": err["msg"]}
                            for err in e.errors()[:5]
                        ],
                    },
                ).model_dump()

            show_ui = not is_console_suppressed()

            try:
                if show_ui:
                    with spinner(tool_name):
                        result_data: dict[str, Any] = await spec_handler(context, params)
                else:
                    result_data = await spec_handler(context, params)

                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                summary = _extract_result_summary(result_data)
                log.info("tool_complete", tool=tool_name, elapsed_ms=elapsed_ms, **summary)

                if show_ui:
                    summary_text = _format_tool_summary(result_data)
                    if summary_text:
                        status(f"{tool_name} -> {summary_text}", style="none")

                return ToolResponse(
                    success=True,
                    result=result_data,
                    meta={
                        "request_id": request_id,
                        "timestamp": int(time.time() * 1000),
                    },
                ).model_dump()

            except MCPError as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log.warning(
                    "tool_error",
                    tool=tool_name,
                    error_code=e.code.value,
                    error=e.message,
                    path=e.path,
                    elapsed_ms=elapsed_ms,
                )
                return ToolResponse(
                    success=False,
                    result=None,
                    error=e.message,
                    meta={
                        "request_id": request_id,
                        "error": e.to_response().to_dict(),
                    },
                ).model_dump()

            except Exception as e:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                internal = InternalError.unexpected(
                    str(e), tool=tool_name, exception_type=type(e).__name__
                )
                log.error(
                    "tool_internal_error",
                    tool=tool_name,
                    error=str(e),
                    elapsed_ms=elapsed_ms,
                )
                # Full traceback at DEBUG level goes to the file output only
                log.debug("tool_internal_error_traceback", tool=tool_name, exc_info=True)
                return ToolResponse(
                    success=False,
                    result=None,
                    error=internal.message,
                    meta={
                        "request_id": request_id,
                        "error": internal.to_dict(),
                    },
                ).model_dump()
        finally:
            clear_request_id()

    tool = FunctionTool(
        name=spec.name,
        description=spec.description,
        parameters=flat_schema,
        fn=handler,
    )

    mcp.add_tool(tool)


def run_server(source_dir: Path, config: CmakePlaneConfig) -> None:
    """Create and run the MCP server."""
    from cmakeplane.config.models import LoggingConfig, LogOutputConfig
    from cmakeplane.core.logging import bind_project, configure_logging, get_log_file_path
    from cmakeplane.mcp.context import AppContext

    # Configured outputs keep their level; the file output gets DEBUG with tracebacks
    log_file = source_dir / CONFIG_DIRNAME / LOG_FILENAME
    outputs = [
        output.model_copy(update={"level": output.level or config.logging.level})
        for output in config.logging.outputs
    ]
    outputs.append(LogOutputConfig(destination=str(log_file), format="json", level="DEBUG"))
    configure_logging(config=LoggingConfig(level="DEBUG", outputs=outputs))

    context = AppContext.create(source_dir, config)
    bind_project(context.source_dir, context.project_ops.build_dir)

    log.info(
        "mcp_server_starting",
        transport=config.server.transport,
        log_file=str(get_log_file_path()),
    )

    mcp = create_mcp_server(context)

    log.info("mcp_server_running")
    if config.server.transport == "http":
        mcp.run(transport="http", host=config.server.host, port=config.server.port)
    else:
        mcp.run()
