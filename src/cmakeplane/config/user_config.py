"""Minimal user-facing configuration.

This module defines only the config fields that users should care about.
Everything else uses opinionated defaults.

User config is stored in .cmakeplane/config.yaml next to CMakeLists.txt.
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_BUILD_DIR = "build"
DEFAULT_LOG_LEVEL: LogLevel = "INFO"


class UserConfig(BaseModel):
    """User-facing configuration options."""

    build_dir: str = Field(
        default=DEFAULT_BUILD_DIR,
        description="Build directory, relative to the project source directory.",
    )
    log_level: LogLevel = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level. DEBUG is very verbose.",
    )


def write_user_config(path: Path, config: UserConfig | None = None) -> None:
    """Write user config file with helpful comments.

    Args:
        path: Path to write config.yaml
        config: Config values (uses defaults if None)
    """
    cfg = config or UserConfig()

    lines = [
        "# CMakePlane Configuration",
        "",
        "# Build directory holding CMakeCache.txt and the File API reply.",
        "# Relative paths are resolved against the project source directory.",
        f"build_dir: {cfg.build_dir}",
        "",
        "# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    ]
    if cfg.log_level != DEFAULT_LOG_LEVEL:
        lines.append(f"log_level: {cfg.log_level}")
    else:
        lines.append(f"# log_level: {cfg.log_level}")
    lines.append("")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def load_user_config(path: Path) -> UserConfig:
    """Load user config from YAML file, falling back to defaults."""
    if not path.exists():
        return UserConfig()
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
        return UserConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError):
        return UserConfig()
