"""Human-readable messages for tool results.

The core returns structured values; this module is the only place that
turns them into prose for the agent (the ``display_to_user`` field).
"""

from __future__ import annotations

from pathlib import Path

from cmakeplane.cmake.cache import CacheVariable
from cmakeplane.cmake.models import BuildTarget
from cmakeplane.cmake.ops import ProjectInfo
from cmakeplane.cmake.ownership import (
    Direct,
    DirectMultiple,
    DirectoryContained,
    IncludeReachable,
    OwnershipResult,
)
from cmakeplane.cmake.paths import relative_or_absolute
from cmakeplane.core.formatting import bullet_list, format_target_type, pluralize


def cache_variable_to_string(variable: CacheVariable) -> str:
    result = (
        f"Variable `{variable.name}` has type `{variable.type}` "
        f"and is set to value `{variable.value}` in the CMake cache."
    )
    if variable.documentation:
        result += (
            "\nThe following documentation is provided for the variable:"
            f"\n```\n{variable.documentation}\n```"
        )
    return result


def target_summary(target: BuildTarget, root: Path) -> dict[str, str]:
    """Structured per-target fields shared by every tool response."""
    return {
        "name": target.name,
        "type": target.kind.value,
        "type_display": format_target_type(target.kind.value),
        "source_dir": relative_or_absolute(target.source_directory, root),
    }


def _target_line(target: BuildTarget, root: Path) -> str:
    source_dir = relative_or_absolute(target.source_directory, root)
    return f"{target.name} ({format_target_type(target.kind.value)}) [{source_dir}]"


# =============================================================================
# Project info
# =============================================================================


def project_info_text(info: ProjectInfo) -> str:
    lines = ["CMake Project Information:", "", f"Source Directory: {info.source_dir}"]
    if info.configured:
        lines.append(f"Build Directory: {info.build_dir}")
    else:
        lines.append("Build Directory: Not configured")

    targets = sorted(info.targets, key=lambda t: t.name)
    lines.append("")
    lines.append(f"Targets ({len(targets)} found):")
    if not targets:
        lines.append("  No targets found")
    for target in targets:
        source_dir = relative_or_absolute(target.source_directory, info.source_dir)
        lines.append(
            f"  - {target.name} ({format_target_type(target.kind.value)} defined in `{source_dir}`)"
        )
    return "\n".join(lines) + "\n"


# =============================================================================
# Cache variables
# =============================================================================


def cache_listing_text(names: list[str]) -> str:
    body = "\n".join(f"- `{name}`" for name in names)
    return f"CMake cache contains {pluralize(len(names), 'variable')}:\n\n{body}"


def cache_empty_text(cache_path: Path) -> str:
    return f"The CMake cache at `{cache_path}` was read but contains no variables."


def wildcard_matches_text(pattern: str, variables: list[CacheVariable]) -> str:
    body = "\n\n".join(cache_variable_to_string(v) for v in variables)
    return f"Found {pluralize(len(variables), 'variable')} matching `{pattern}`:\n\n{body}"


def variable_not_found_text(
    requested: str, suggestion: CacheVariable | None, other_names: list[str]
) -> str:
    result = f"Variable `{requested}` was not found in CMake cache."
    if suggestion is not None:
        result += f"\n\nDid you mean `{suggestion.name}`?\n\n"
        result += cache_variable_to_string(suggestion)
    if other_names:
        result += "\n\nOther variables available in CMake cache:\n"
        result += "\n".join(f"- `{name}`" for name in other_names)
    return result


# =============================================================================
# Ownership
# =============================================================================


def ownership_text(file_path: str, result: OwnershipResult, root: Path) -> str:
    """Prose for each ownership outcome."""
    match result:
        case Direct(target=target):
            source_dir = relative_or_absolute(target.source_directory, root)
            return (
                f"The file `{file_path}` is directly included in the `{target.name}` target, "
                f"which has type {format_target_type(target.kind.value)}. "
                f"The target's source directory is at `{source_dir}`."
            )

        case DirectMultiple(targets=targets):
            lines = [_target_line(t, root) for t in targets]
            return f"Multiple targets seem to directly include `{file_path}`:\n\n{bullet_list(lines)}\n"

        case IncludeReachable(likely=likely, candidates=candidates):
            total = len(candidates) + (1 if likely is not None else 0)
            text = (
                f"Found {pluralize(total, 'target')} that can potentially include "
                f"file `{file_path}`.\n"
            )
            if likely is not None:
                source_dir = relative_or_absolute(likely.source_directory, root)
                text += (
                    f"It is likely part of the `{likely.name}` target, which has type "
                    f"{format_target_type(likely.kind.value)}, as it was found within its "
                    f"source directory at `{source_dir}`.\n\n"
                )
            if candidates:
                heading = "Other targets" if likely is not None else "Targets"
                text += f"{heading} that can access this file via include paths:\n"
                text += bullet_list([_target_line(t, root) for t in candidates]) + "\n\n"
            return text

        case DirectoryContained(target=target):
            source_dir = relative_or_absolute(target.source_directory, root)
            return (
                f"The file `{file_path}` is located within the source directory of the "
                f"`{target.name}` target, which has type {format_target_type(target.kind.value)} "
                f"at `{source_dir}`. This seems the most likely target to own this file."
            )

        case _:
            return (
                f"Unable to find any targets that include the file `{file_path}`.\n"
                "This does not mean that the file is not included by any target, "
                "it just means that this tool is unable to find the relation."
            )
