"""CMakeCache.txt parsing.

The cache is line oriented::

    # This is the CMakeCache file.
    //Choose the type of build
    CMAKE_BUILD_TYPE:STRING=Debug
    CMAKE_BUILD_TYPE-ADVANCED:INTERNAL=1

``//`` lines document the variable that immediately follows them; only the
most recent one is kept. ``NAME-ADVANCED`` entries are metadata and never
appear in a snapshot. Anything else (probe output, garbage) is skipped:
parsing never fails.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

# CMP0053 variable names: a letter or underscore, then letters, digits and _-./+
_VARIABLE_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_\-./+]*):([^=]+)=(.*)")

ADVANCED_SUFFIX = "-ADVANCED"


@dataclass(frozen=True, slots=True)
class CacheVariable:
    """One cache entry. ``type`` and ``value`` are kept verbatim."""

    name: str
    type: str
    value: str
    documentation: str | None = None


class CacheSnapshot(Mapping[str, CacheVariable]):
    """Read-only name -> variable mapping parsed from one cache file."""

    __slots__ = ("_variables",)

    def __init__(self, variables: dict[str, CacheVariable] | None = None) -> None:
        self._variables: dict[str, CacheVariable] = dict(variables or {})

    def __getitem__(self, name: str) -> CacheVariable:
        return self._variables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"CacheSnapshot({len(self._variables)} variables)"

    def sorted_names(self) -> list[str]:
        """Variable names in code-point order, for reproducible suggestions."""
        return sorted(self._variables)


def parse_cache(text: str) -> CacheSnapshot:
    """Parse raw cache text into a snapshot.

    Later definitions of the same name overwrite earlier ones.
    """
    variables: dict[str, CacheVariable] = {}
    documentation: str | None = None

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        if not line or line.startswith("#"):
            documentation = None
            continue

        if line.startswith("//"):
            documentation = line[2:].strip() or None
            continue

        match = _VARIABLE_RE.fullmatch(line)
        if match is None:
            documentation = None
            continue

        name, var_type, value = match.groups()
        if not name.endswith(ADVANCED_SUFFIX):
            variables[name] = CacheVariable(
                name=name,
                type=var_type,
                value=value,
                documentation=documentation,
            )
        documentation = None

    return CacheSnapshot(variables)
