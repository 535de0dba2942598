"""Which build target owns a file?

Three tiers are tried in order; the first tier that matches anything
decides the answer and later tiers are never consulted:

1. Direct membership: the file is listed as a source of a target.
2. Include-path reachability: the file's directory is at or below an
   include path of a target. A target whose include path lies inside
   its own source directory is the likely owner.
3. Directory containment: the file is at or below a target's source
   directory; the deepest such directory wins.

If none matches, the answer is ``Inconclusive``: the metadata does not
say, which is not the same as "no target uses this file".

Every comparison is between canonical paths (see ``paths.canonicalize``).
Targets lacking file groups, include paths or a source directory are
skipped by the tiers that need that data.
"""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import ClassVar

from cmakeplane.cmake.models import BuildTarget
from cmakeplane.cmake.paths import PathInput, canonicalize, is_within

# =============================================================================
# Result variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class Direct:
    """The file is a listed source of exactly one target."""

    kind: ClassVar[str] = "direct"
    target: BuildTarget


@dataclass(frozen=True, slots=True)
class DirectMultiple:
    """The file is a listed source of several targets, in discovery order."""

    kind: ClassVar[str] = "direct_multiple"
    targets: tuple[BuildTarget, ...]


@dataclass(frozen=True, slots=True)
class IncludeReachable:
    """The file is reachable through include paths.

    ``likely`` is set when some reachable target's include path lies within
    its own source directory; ``candidates`` are the remaining reachable
    targets sorted by name.
    """

    kind: ClassVar[str] = "include_reachable"
    likely: BuildTarget | None
    candidates: tuple[BuildTarget, ...]


@dataclass(frozen=True, slots=True)
class DirectoryContained:
    """The file lies under this target's source directory (the deepest one)."""

    kind: ClassVar[str] = "directory"
    target: BuildTarget


@dataclass(frozen=True, slots=True)
class Inconclusive:
    """No tier matched. Ownership cannot be determined from the metadata."""

    kind: ClassVar[str] = "inconclusive"


OwnershipResult = Direct | DirectMultiple | IncludeReachable | DirectoryContained | Inconclusive


@dataclass(frozen=True, slots=True)
class IncludeMatch:
    """A target that reaches the query through one of its include paths."""

    target: BuildTarget
    include_path: str
    within_own_source_dir: bool


# =============================================================================
# Candidate finders (one per tier)
# =============================================================================


def _source_dir(target: BuildTarget, root: PathInput) -> str | None:
    if not target.source_directory:
        return None
    return canonicalize(target.source_directory, root)


def find_direct_matches(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> list[BuildTarget]:
    """Targets listing ``query`` (canonical) as a source, each once, in order."""
    matches: list[BuildTarget] = []
    for target in targets:
        if any(
            canonicalize(source, root) == query
            for group in target.file_groups
            for source in group.sources
        ):
            matches.append(target)
    return matches


def find_include_matches(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> list[IncludeMatch]:
    """Targets with an include path at or above the directory of ``query``.

    One match per target, in discovery order. A target counts as within its
    own source directory if any of its reaching include paths does.
    """
    query_dir = posixpath.dirname(query)
    matches: list[IncludeMatch] = []
    for target in targets:
        source_dir = _source_dir(target, root)
        reached: IncludeMatch | None = None
        for group in target.file_groups:
            for include in group.include_paths:
                include_path = canonicalize(include, root)
                if not is_within(query_dir, include_path):
                    continue
                within = source_dir is not None and is_within(include_path, source_dir)
                if reached is None or (within and not reached.within_own_source_dir):
                    reached = IncludeMatch(target, include_path, within)
        if reached is not None:
            matches.append(reached)
    return matches


def find_directory_matches(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> list[tuple[BuildTarget, str]]:
    """(target, canonical source dir) pairs whose source dir contains ``query``."""
    matches: list[tuple[BuildTarget, str]] = []
    for target in targets:
        source_dir = _source_dir(target, root)
        if source_dir is not None and is_within(query, source_dir):
            matches.append((target, source_dir))
    return matches


# =============================================================================
# Tiers
# =============================================================================

Tier = Callable[[str, Sequence[BuildTarget], PathInput], OwnershipResult | None]


def direct_tier(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> OwnershipResult | None:
    matches = find_direct_matches(query, targets, root)
    if not matches:
        return None
    if len(matches) == 1:
        return Direct(matches[0])
    return DirectMultiple(tuple(matches))


def include_tier(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> OwnershipResult | None:
    matches = find_include_matches(query, targets, root)
    if not matches:
        return None

    likely: BuildTarget | None = None
    best_length = -1
    for match in matches:
        if not match.within_own_source_dir:
            continue
        length = len(_source_dir(match.target, root) or "")
        if length > best_length:
            likely = match.target
            best_length = length

    # The same logical target may appear once per configuration
    candidates = [
        match.target
        for match in matches
        if likely is None or match.target.name != likely.name
    ]
    candidates.sort(key=lambda target: target.name)
    return IncludeReachable(likely=likely, candidates=tuple(candidates))


def directory_tier(
    query: str, targets: Sequence[BuildTarget], root: PathInput
) -> OwnershipResult | None:
    matches = find_directory_matches(query, targets, root)
    if not matches:
        return None
    matches.sort(key=lambda pair: (-len(pair[1]), pair[0].name))
    return DirectoryContained(matches[0][0])


TIERS: tuple[Tier, ...] = (direct_tier, include_tier, directory_tier)


def resolve_owner(
    path: PathInput, targets: Sequence[BuildTarget], root: PathInput
) -> OwnershipResult:
    """Find the target(s) that most plausibly own ``path``.

    Args:
        path: File path in any spelling; relative paths are taken from ``root``.
        targets: Flattened targets (see ``targets.flatten_targets``).
        root: Project source directory anchoring every relative path.
    """
    query = canonicalize(path, root)
    for tier in TIERS:
        result = tier(query, targets, root)
        if result is not None:
            return result
    return Inconclusive()
