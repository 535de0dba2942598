"""Read the code model from a CMake File API reply.

CMake writes the reply during configure when a query exists::

    <build>/.cmake/api/v1/query/codemodel-v2            (empty marker file)
    <build>/.cmake/api/v1/reply/index-<timestamp>.json  (newest wins)
    <build>/.cmake/api/v1/reply/codemodel-v2-<hash>.json
    <build>/.cmake/api/v1/reply/target-<name>-<config>-<hash>.json

This module only reads files and creates the query marker; it never runs
cmake. The reply is converted into :class:`CodeModel` with every path
made absolute against the top-level source directory: one file group per
compile group, plus one group without language or include paths for
sources that are not compiled (headers listed in ``add_executable`` and
the like).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog

from cmakeplane.cmake.models import (
    BuildTarget,
    CodeModel,
    CodeModelConfiguration,
    CodeModelProject,
    FileGroup,
)
from cmakeplane.cmake.paths import canonicalize
from cmakeplane.config.constants import CODEMODEL_QUERY, FILE_API_DIR
from cmakeplane.core.errors import ProjectError

log = structlog.get_logger(__name__)


def query_dir(build_dir: Path) -> Path:
    return build_dir / FILE_API_DIR / "query"


def reply_dir(build_dir: Path) -> Path:
    return build_dir / FILE_API_DIR / "reply"


def write_codemodel_query(build_dir: Path) -> Path:
    """Create the shared stateless codemodel query so the next configure replies.

    Returns:
        Path of the (possibly pre-existing) query file.
    """
    path = query_dir(build_dir) / CODEMODEL_QUERY
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch(exist_ok=True)
    log.info("codemodel_query_written", path=str(path))
    return path


def has_codemodel_query(build_dir: Path) -> bool:
    return (query_dir(build_dir) / CODEMODEL_QUERY).exists()


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ProjectError.code_model_invalid(str(path), "file referenced by the reply is missing") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ProjectError.code_model_invalid(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ProjectError.code_model_invalid(str(path), "expected a JSON object")
    return data


def find_reply_index(build_dir: Path) -> Path | None:
    """Newest ``index-*.json`` in the reply directory (lexicographic order)."""
    directory = reply_dir(build_dir)
    if not directory.is_dir():
        return None
    indexes = sorted(directory.glob("index-*.json"))
    return indexes[-1] if indexes else None


def _codemodel_file(index: dict[str, Any]) -> str | None:
    for entry in index.get("objects") or []:
        if not isinstance(entry, dict) or entry.get("kind") != "codemodel":
            continue
        if (entry.get("version") or {}).get("major") == 2 and entry.get("jsonFile"):
            return str(entry["jsonFile"])
    return None


def load_code_model(build_dir: Path) -> CodeModel:
    """Load the code model from ``build_dir``'s File API reply.

    Raises:
        ProjectError: No reply / no codemodel object (code_model_unavailable),
            or unreadable reply files (code_model_invalid).
    """
    index_path = find_reply_index(build_dir)
    if index_path is None:
        reason = (
            "no File API reply; configure the project"
            if has_codemodel_query(build_dir)
            else "no File API query; run 'cmakeplane init' and configure the project"
        )
        raise ProjectError.code_model_unavailable(str(build_dir), reason)

    index = _read_json(index_path)
    codemodel_name = _codemodel_file(index)
    if codemodel_name is None:
        raise ProjectError.code_model_unavailable(
            str(build_dir), f"{index_path.name} has no codemodel-v2 object"
        )

    directory = index_path.parent
    codemodel = _read_json(directory / codemodel_name)
    paths = codemodel.get("paths") or {}
    source_root = str(paths.get("source") or build_dir)
    build_root = str(paths.get("build") or build_dir)

    try:
        configurations = [
            _convert_configuration(raw, directory, source_root, build_root)
            for raw in codemodel.get("configurations") or []
            if isinstance(raw, dict)
        ]
    except (AttributeError, TypeError, ValueError) as e:
        raise ProjectError.code_model_invalid(str(directory / codemodel_name), str(e)) from e
    model = CodeModel(configurations=configurations)
    log.debug(
        "code_model_loaded",
        index=index_path.name,
        configurations=len(configurations),
        targets=sum(len(p.targets) for c in configurations for p in c.projects),
    )
    return model


def _convert_configuration(
    raw: dict[str, Any], directory: Path, source_root: str, build_root: str
) -> CodeModelConfiguration:
    directories = raw.get("directories") or []
    raw_targets = raw.get("targets") or []

    targets: list[BuildTarget] = []
    for entry in raw_targets:
        entry = entry if isinstance(entry, dict) else {}
        json_file = entry.get("jsonFile")
        if not json_file:
            targets.append(BuildTarget(name=str(entry.get("name", ""))))
            continue
        targets.append(_convert_target(_read_json(directory / json_file), source_root, build_root))

    projects: list[CodeModelProject] = []
    for project in raw.get("projects") or []:
        dir_indexes = project.get("directoryIndexes") or []
        source_dir: str | None = None
        if dir_indexes and 0 <= dir_indexes[0] < len(directories):
            source_dir = canonicalize(directories[dir_indexes[0]].get("source"), source_root)
        projects.append(
            CodeModelProject(
                name=str(project.get("name", "")),
                source_directory=source_dir,
                targets=[
                    targets[i]
                    for i in project.get("targetIndexes") or []
                    if 0 <= i < len(targets)
                ],
            )
        )

    return CodeModelConfiguration(name=str(raw.get("name", "")), projects=projects)


def _convert_target(raw: dict[str, Any], source_root: str, build_root: str) -> BuildTarget:
    sources = raw.get("sources") or []
    paths = raw.get("paths") or {}

    groups: list[FileGroup] = []
    for compile_group in raw.get("compileGroups") or []:
        groups.append(
            FileGroup(
                language=compile_group.get("language"),
                sources=[
                    canonicalize(sources[i].get("path"), source_root)
                    for i in compile_group.get("sourceIndexes") or []
                    if 0 <= i < len(sources) and sources[i].get("path")
                ],
                include_paths=[
                    canonicalize(include.get("path"), source_root)
                    for include in compile_group.get("includes") or []
                    if include.get("path")
                ],
            )
        )

    uncompiled = [
        canonicalize(source.get("path"), source_root)
        for source in sources
        if source.get("path") and "compileGroupIndex" not in source
    ]
    if uncompiled:
        groups.append(FileGroup(sources=uncompiled))

    source_dir = paths.get("source")
    return BuildTarget(
        name=str(raw.get("name", "")),
        kind=raw.get("type", "UNKNOWN"),
        source_directory=canonicalize(source_dir, source_root) if source_dir is not None else None,
        file_groups=groups,
        artifacts=[
            canonicalize(artifact.get("path"), build_root)
            for artifact in raw.get("artifacts") or []
            if artifact.get("path")
        ],
    )
