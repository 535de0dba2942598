"""CMake project metadata: cache parsing, name matching, target ownership."""

from cmakeplane.cmake.cache import CacheSnapshot, CacheVariable, parse_cache
from cmakeplane.cmake.models import BuildTarget, CodeModel, FileGroup, TargetKind
from cmakeplane.cmake.names import expand_wildcard, find_closest_name, string_distance
from cmakeplane.cmake.ops import ProjectInfo, ProjectOps
from cmakeplane.cmake.ownership import (
    Direct,
    DirectMultiple,
    DirectoryContained,
    IncludeReachable,
    Inconclusive,
    OwnershipResult,
    resolve_owner,
)
from cmakeplane.cmake.paths import canonicalize
from cmakeplane.cmake.targets import flatten_targets

__all__ = [
    # Cache
    "CacheSnapshot",
    "CacheVariable",
    "parse_cache",
    # Names
    "expand_wildcard",
    "find_closest_name",
    "string_distance",
    # Model
    "BuildTarget",
    "CodeModel",
    "FileGroup",
    "TargetKind",
    "flatten_targets",
    # Ownership
    "Direct",
    "DirectMultiple",
    "DirectoryContained",
    "IncludeReachable",
    "Inconclusive",
    "OwnershipResult",
    "canonicalize",
    "resolve_owner",
    # Ops
    "ProjectInfo",
    "ProjectOps",
]
