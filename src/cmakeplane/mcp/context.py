"""Application context for MCP handlers.

Single object passed to all tool handlers. It holds no project data:
handlers ask ``project_ops`` for a fresh snapshot on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cmakeplane.cmake.ops import ProjectOps
from cmakeplane.config.models import CmakePlaneConfig


@dataclass
class AppContext:
    """Context object passed to all MCP tool handlers."""

    source_dir: Path
    config: CmakePlaneConfig
    project_ops: ProjectOps

    @classmethod
    def create(cls, source_dir: Path, config: CmakePlaneConfig | None = None) -> AppContext:
        """Factory to create context with ops wired to the project config."""
        config = config or CmakePlaneConfig()
        project_ops = ProjectOps(source_dir, config.project)
        return cls(
            source_dir=project_ops.source_dir,
            config=config,
            project_ops=project_ops,
        )
