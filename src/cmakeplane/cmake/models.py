"""Project model: configurations -> projects -> targets -> file groups.

Field aliases follow the camelCase wire names used by CMake tooling
(``sourceDirectory``, ``fileGroups``, ``includePath``) so a JSON code
model snapshot validates directly; Python code uses the snake_case names.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TargetKind(StrEnum):
    """Coarse categorical tag for a build target."""

    EXECUTABLE = "EXECUTABLE"
    STATIC_LIBRARY = "STATIC_LIBRARY"
    SHARED_LIBRARY = "SHARED_LIBRARY"
    MODULE_LIBRARY = "MODULE_LIBRARY"
    OBJECT_LIBRARY = "OBJECT_LIBRARY"
    UTILITY = "UTILITY"
    INTERFACE_LIBRARY = "INTERFACE_LIBRARY"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> TargetKind:
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return cls.UNKNOWN


class _ModelBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class FileGroup(_ModelBase):
    """Sources within one target sharing a language and include paths."""

    language: str | None = None
    sources: list[str] = Field(default_factory=list)
    include_paths: list[str] = Field(default_factory=list, alias="includePath")

    @field_validator("include_paths", mode="before")
    @classmethod
    def _flatten_include_paths(cls, v: Any) -> Any:
        # Accept both ["dir"] and [{"path": "dir"}]; entries without a path are dropped
        if v is None:
            return []
        if isinstance(v, list):
            paths = [item.get("path") if isinstance(item, dict) else item for item in v]
            return [path for path in paths if path]
        return v


class BuildTarget(_ModelBase):
    """One target in one configuration."""

    name: str
    kind: TargetKind = Field(default=TargetKind.UNKNOWN, alias="type")
    source_directory: str | None = Field(default=None, alias="sourceDirectory")
    file_groups: list[FileGroup] = Field(default_factory=list, alias="fileGroups")
    artifacts: list[str] = Field(default_factory=list)

    @field_validator("file_groups", "artifacts", mode="before")
    @classmethod
    def _none_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class CodeModelProject(_ModelBase):
    name: str = ""
    source_directory: str | None = Field(default=None, alias="sourceDirectory")
    targets: list[BuildTarget] = Field(default_factory=list)


class CodeModelConfiguration(_ModelBase):
    name: str = ""
    projects: list[CodeModelProject] = Field(default_factory=list)


class CodeModel(_ModelBase):
    """The full hierarchy for one configured build directory."""

    configurations: list[CodeModelConfiguration] = Field(default_factory=list)
