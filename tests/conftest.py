"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides an on-disk configured CMake project for boundary tests.
"""

import json
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local cmakeplane package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

SAMPLE_CACHE = """\
# This is the CMakeCache file.
# For build in directory: /work/proj/build

########################
# EXTERNAL cache entries
########################

//Choose the type of build, options are: None Debug Release
CMAKE_BUILD_TYPE:STRING=Debug

//CXX compiler
CMAKE_CXX_COMPILER:FILEPATH=/usr/bin/c++

//Flags used by the CXX compiler during all build types.
CMAKE_CXX_FLAGS:STRING=-Wall

//Enable the custom feature
MY_CUSTOM_BOOLEAN:BOOL=ON

########################
# INTERNAL cache entries
########################

//ADVANCED property for variable: CMAKE_CXX_COMPILER
CMAKE_CXX_COMPILER-ADVANCED:INTERNAL=1
"""


@dataclass
class TargetSpec:
    """Target description used to generate a File API reply."""

    name: str
    type: str = "EXECUTABLE"
    source_dir: str = "."
    sources: list[str] = field(default_factory=list)
    headers: list[str] = field(default_factory=list)
    includes: list[str] = field(default_factory=list)
    language: str = "CXX"


class CMakeProject:
    """A configured CMake project laid out under a temp directory."""

    def __init__(self, root: Path) -> None:
        self.source_dir = root.resolve() / "proj"
        self.build_dir = self.source_dir / "build"
        self.source_dir.mkdir(parents=True, exist_ok=True)
        (self.source_dir / "CMakeLists.txt").write_text(
            "cmake_minimum_required(VERSION 3.20)\nproject(proj CXX)\n"
        )

    @property
    def reply_dir(self) -> Path:
        return self.build_dir / ".cmake" / "api" / "v1" / "reply"

    def write_cache(self, text: str = SAMPLE_CACHE) -> Path:
        self.build_dir.mkdir(parents=True, exist_ok=True)
        path = self.build_dir / "CMakeCache.txt"
        path.write_text(text)
        return path

    def write_reply(
        self,
        targets: Iterable[TargetSpec],
        *,
        configurations: Iterable[str] = ("Debug",),
        index_name: str = "index-2024-01-01T00-00-00-0000.json",
    ) -> Path:
        """Write index, codemodel and per-target JSON files; return the index path."""
        targets = list(targets)
        self.reply_dir.mkdir(parents=True, exist_ok=True)

        raw_configurations: list[dict[str, Any]] = []
        for config in configurations:
            raw_targets = []
            for target in targets:
                json_file = f"target-{target.name}-{config}-0000.json"
                self._write_json(json_file, self._target_json(target))
                raw_targets.append(
                    {"name": target.name, "directoryIndex": 0, "projectIndex": 0, "jsonFile": json_file}
                )
            raw_configurations.append(
                {
                    "name": config,
                    "directories": [{"source": ".", "build": "."}],
                    "projects": [
                        {
                            "name": "proj",
                            "directoryIndexes": [0],
                            "targetIndexes": list(range(len(targets))),
                        }
                    ],
                    "targets": raw_targets,
                }
            )

        self._write_json(
            "codemodel-v2-0000.json",
            {
                "kind": "codemodel",
                "version": {"major": 2, "minor": 6},
                "paths": {"source": str(self.source_dir), "build": str(self.build_dir)},
                "configurations": raw_configurations,
            },
        )
        self._write_json(
            index_name,
            {
                "cmake": {"version": {"string": "3.28.1"}},
                "objects": [
                    {
                        "kind": "codemodel",
                        "version": {"major": 2, "minor": 6},
                        "jsonFile": "codemodel-v2-0000.json",
                    }
                ],
            },
        )
        return self.reply_dir / index_name

    def _target_json(self, target: TargetSpec) -> dict[str, Any]:
        sources: list[dict[str, Any]] = [
            {"path": path, "compileGroupIndex": 0} for path in target.sources
        ]
        sources.extend({"path": path} for path in target.headers)
        data: dict[str, Any] = {
            "name": target.name,
            "type": target.type,
            "paths": {"source": target.source_dir, "build": target.source_dir},
            "sources": sources,
            "compileGroups": [],
        }
        if target.sources:
            data["compileGroups"].append(
                {
                    "language": target.language,
                    "sourceIndexes": list(range(len(target.sources))),
                    "includes": [
                        {"path": str(self.source_dir / include)} for include in target.includes
                    ],
                }
            )
        if target.type == "EXECUTABLE":
            data["artifacts"] = [{"path": f"bin/{target.name}"}]
        return data

    def _write_json(self, name: str, data: dict[str, Any]) -> None:
        (self.reply_dir / name).write_text(json.dumps(data))


@pytest.fixture
def cmake_project(tmp_path: Path) -> CMakeProject:
    """Unconfigured project with a CMakeLists.txt; tests write cache/reply as needed."""
    return CMakeProject(tmp_path)


@pytest.fixture
def configured_project(cmake_project: CMakeProject) -> CMakeProject:
    """Project with the sample cache and a two-target code model."""
    cmake_project.write_cache()
    cmake_project.write_reply(
        [
            TargetSpec(
                name="app",
                source_dir="app",
                sources=["app/main.cpp"],
                headers=["app/app.h"],
                includes=["app"],
            ),
            TargetSpec(
                name="core",
                type="STATIC_LIBRARY",
                source_dir="lib/core",
                sources=["lib/core/core.cpp"],
                includes=["lib/core/include"],
            ),
        ]
    )
    return cmake_project


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config at an empty temp location for every test."""
    path = tmp_path / "global-config" / "config.yaml"
    monkeypatch.setattr("cmakeplane.config.loader.GLOBAL_CONFIG_PATH", path)
    for name in list(os.environ):
        if name.upper().startswith("CMAKEPLANE__"):
            monkeypatch.delenv(name)
    return path
