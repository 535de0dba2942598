"""Structured logging with request correlation and multi-output support.

Supports:
- Console suppression during Rich live displays (spinners)
- Separate console vs file log levels
- Request correlation IDs
- Project context (source and build directory) on every record

stdout is never a log destination by default: the MCP stdio transport
owns it.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from cmakeplane.config.models import LoggingConfig

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)

_log_file_path: Path | None = None


def get_request_id() -> str | None:
    return _request_id.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set or generate request correlation ID."""
    rid = request_id or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def clear_request_id() -> None:
    _request_id.set(None)


def get_log_file_path() -> Path | None:
    """Get the first file destination configured, if any."""
    return _log_file_path


def _set_log_file_path(path: Path | None) -> None:
    global _log_file_path
    _log_file_path = path

def bind_project(source_dir: Path, build_dir: Path) -> None:
    """Attach the served project to every subsequent log record."""
    structlog.contextvars.bind_contextvars(
        source_dir=str(source_dir),
        build_dir=str(build_dir),
    )


def unbind_project() -> None:
    structlog.contextvars.unbind_contextvars("source_dir", "build_dir")


def _add_request_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_request_id():
        event_dict["request_id"] = rid
    return event_dict


_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Third-party loggers that report every request; kept at WARNING so tool
# events stay readable in the server log.
QUIET_LOGGERS = (
    "mcp.server.lowlevel.server",
    "mcp.server.streamable_http",
    "fastmcp.server.context.to_client",
    "uvicorn.access",
)


class ConsoleSuppressingFilter(logging.Filter):
    """Drops console records while a Rich live display is active."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from cmakeplane.core.progress import is_console_suppressed

        return not is_console_suppressed()


def configure_logging(*, config: LoggingConfig | None = None, level: str = "INFO") -> None:
    """Configure structlog over stdlib logging.

    Without config, logs go to stderr in console format at ``level``.
    With config, each output gets its own handler, format and level.
    """
    from cmakeplane.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(level=level, outputs=[LogOutputConfig()])  # type: ignore[arg-type]

    default_level = _LEVEL_MAP.get(config.level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_request_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Don't cache - allows reconfiguration and respects level changes
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(default_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _set_log_file_path(None)

    for output in config.outputs:
        is_console = output.destination in ("stderr", "stdout")
        if not is_console and _log_file_path is None:
            _set_log_file_path(Path(output.destination))

        handler = _create_handler(output.destination, is_console=is_console)
        handler.setLevel(_LEVEL_MAP.get((output.level or config.level).upper(), default_level))
        handler.setFormatter(_create_formatter(output.format, shared_processors, is_console))
        root_logger.addHandler(handler)


def _create_handler(destination: str, *, is_console: bool) -> logging.Handler:
    """Create handler for stderr, stdout, or file path."""
    handler: logging.Handler
    if destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    if is_console:
        handler.addFilter(ConsoleSuppressingFilter())

    return handler


def _create_formatter(
    output_format: str,
    shared_processors: list[structlog.types.Processor],
    is_console: bool,
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=is_console and sys.stderr.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
