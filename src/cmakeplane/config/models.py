"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CMAKEPLANE__SECTION__KEY)
3. Project YAML (.cmakeplane/config.yaml)
4. Global YAML (~/.config/cmakeplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CMAKEPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    CMAKEPLANE__LOGGING__LEVEL=DEBUG
    CMAKEPLANE__PROJECT__BUILD_DIR=out/debug
    CMAKEPLANE__SERVER__TRANSPORT=http
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from cmakeplane.config.constants import CACHE_FILENAME, PORT_MAX, PORT_MIN

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CMAKEPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every tool parameter.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ServerConfig(BaseModel):
    """MCP server configuration.

    Env vars:
        CMAKEPLANE__SERVER__TRANSPORT: stdio (default) or http
        CMAKEPLANE__SERVER__HOST: Bind address for http (default: 127.0.0.1)
        CMAKEPLANE__SERVER__PORT: Port for http (default: 7655)
    """

    name: str = Field(
        default="cmakeplane",
        description="Server name announced to MCP clients.",
    )
    transport: Literal["stdio", "http"] = Field(
        default="stdio",
        description="MCP transport. stdio is what editor integrations spawn.",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Bind address for the http transport.",
    )
    port: int = Field(
        default=7655,
        description="Port for the http transport.",
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not (PORT_MIN <= v <= PORT_MAX):
            raise ValueError(f"Port must be {PORT_MIN}-{PORT_MAX}, got {v}")
        return v


class ProjectConfig(BaseModel):
    """Where the configured CMake project keeps its build metadata.

    Env vars:
        CMAKEPLANE__PROJECT__BUILD_DIR: Build directory (relative to the source dir)
        CMAKEPLANE__PROJECT__CACHE_FILE: Cache file name inside the build dir
    """

    build_dir: str = Field(
        default="build",
        description="Build directory. Relative paths are anchored at the project source directory.",
    )
    cache_file: str = Field(
        default=CACHE_FILENAME,
        description="Name of the cache file inside the build directory.",
    )

    @field_validator("build_dir", "cache_file")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class CmakePlaneConfig(BaseModel):
    """Root configuration for CMakePlane.

    All settings can be configured via:
    1. Environment variables: CMAKEPLANE__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)
