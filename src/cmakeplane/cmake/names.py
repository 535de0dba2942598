"""Fuzzy name resolution over a known set of cache variable names.

Two independent lookups:

- nearest name by edit distance (case-insensitive, no cutoff), used to
  suggest "did you mean ...?" on a miss
- ``*`` wildcard expansion (case-sensitive, full-string anchored)
"""

from __future__ import annotations

import re
from collections.abc import Iterable

WILDCARD = "*"


def string_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance between upper-cased, trimmed strings."""
    a = a.upper().strip()
    b = b.upper().strip()

    if not a:
        return len(b)
    if not b:
        return len(a)

    # Two-row dynamic programming over b
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    1
                    + min(
                        previous[j],  # deletion
                        current[j - 1],  # insertion
                        previous[j - 1],  # substitution
                    )
                )
        previous = current
    return previous[-1]


def find_closest_name(requested: str, known: Iterable[str]) -> str | None:
    """Return the known name nearest to ``requested``.

    Ties go to the first name in iteration order, so callers that need
    reproducible answers should pass a sorted sequence. Returns None only
    when ``known`` is empty.
    """
    closest: str | None = None
    best = -1
    for name in known:
        distance = string_distance(requested, name)
        if closest is None or distance < best:
            closest = name
            best = distance
            if best == 0:
                break
    return closest


def is_wildcard(pattern: str) -> bool:
    return WILDCARD in pattern


def compile_wildcard(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` so each ``*`` matches any run, including empty."""
    return re.compile(".*".join(re.escape(segment) for segment in pattern.split(WILDCARD)), re.DOTALL)


def expand_wildcard(pattern: str, known: Iterable[str]) -> list[str]:
    """Every known name that fully matches ``pattern``, in iteration order."""
    compiled = compile_wildcard(pattern)
    return [name for name in known if compiled.fullmatch(name)]
