"""Project snapshot acquisition.

ProjectOps is the only place that touches the disk for a query: it reads
the cache text and the File API reply of one configured project and hands
plain values to the pure functions in ``cache``, ``names``, ``targets``
and ``ownership``. Nothing is cached between calls; every call sees the
build directory as it is now.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from cmakeplane.cmake.cache import CacheSnapshot, parse_cache
from cmakeplane.cmake.fileapi import load_code_model
from cmakeplane.cmake.models import BuildTarget, CodeModel
from cmakeplane.cmake.ownership import OwnershipResult, resolve_owner
from cmakeplane.cmake.targets import flatten_targets
from cmakeplane.config.models import ProjectConfig
from cmakeplane.core.errors import ErrorCode, ProjectError

log = structlog.get_logger(__name__)


@dataclass
class ProjectInfo:
    """Summary of the active project."""

    source_dir: Path
    build_dir: Path
    configured: bool
    targets: list[BuildTarget] = field(default_factory=list)


class ProjectOps:
    """Read-only access to one configured CMake project."""

    def __init__(self, source_dir: Path, config: ProjectConfig | None = None) -> None:
        self._config = config or ProjectConfig()
        self.source_dir = source_dir.expanduser().resolve()
        build_dir = Path(self._config.build_dir).expanduser()
        self.build_dir = build_dir if build_dir.is_absolute() else self.source_dir / build_dir

    @property
    def cache_path(self) -> Path:
        return self.build_dir / self._config.cache_file

    def _require_source_dir(self) -> None:
        if not self.source_dir.is_dir():
            raise ProjectError.source_dir_not_found(str(self.source_dir))

    def read_cache_text(self) -> str:
        """Raw cache text.

        Raises:
            ProjectError: The cache file does not exist (not configured yet).
        """
        self._require_source_dir()
        try:
            text = self.cache_path.read_text(encoding="utf-8", errors="replace")
        except (FileNotFoundError, IsADirectoryError) as e:
            raise ProjectError.cache_not_found(str(self.cache_path)) from e
        log.debug("cache_read", path=str(self.cache_path), chars=len(text))
        return text

    def cache_snapshot(self) -> CacheSnapshot:
        snapshot = parse_cache(self.read_cache_text())
        log.debug("cache_parsed", variables=len(snapshot))
        return snapshot

    def code_model(self) -> CodeModel:
        self._require_source_dir()
        return load_code_model(self.build_dir)

    def targets(self) -> list[BuildTarget]:
        return flatten_targets(self.code_model())

    def find_owner(self, file_path: str) -> OwnershipResult:
        """Resolve ``file_path`` (relative paths are from the source dir)."""
        result = resolve_owner(file_path, self.targets(), self.source_dir)
        log.debug("owner_resolved", file_path=file_path, result=result.kind)
        return result

    def info(self) -> ProjectInfo:
        """Project summary. An unconfigured build dir is reported, not raised."""
        self._require_source_dir()
        try:
            targets = self.targets()
        except ProjectError as e:
            if e.code is not ErrorCode.CODE_MODEL_UNAVAILABLE:
                raise
            log.debug("code_model_unavailable", error=e.message)
            return ProjectInfo(
                source_dir=self.source_dir,
                build_dir=self.build_dir,
                configured=self.cache_path.exists(),
            )
        return ProjectInfo(
            source_dir=self.source_dir,
            build_dir=self.build_dir,
            configured=True,
            targets=targets,
        )
