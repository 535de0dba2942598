"""Path canonicalization shared by every component that compares paths.

A canonical path is absolute, normalized (no ``.``/``..`` segments, no
duplicate separators) and uses ``/`` separators. Relative inputs are
anchored at a caller-supplied root. Symlinks are not resolved: two
spellings of the same *lexical* location compare equal, nothing more.
"""

from __future__ import annotations

import os
import posixpath
from os import PathLike

PathInput = str | PathLike[str]


def _to_posix(path: str) -> str:
    return path.replace(os.sep, "/").replace("\\", "/")


def _canonical_root(root: PathInput | None) -> str:
    try:
        raw = os.fspath(root) if root is not None else ""
        return _to_posix(os.path.abspath(raw or os.curdir))
    except (TypeError, ValueError, OSError):
        return "/"


def canonicalize(path: PathInput | None, root: PathInput | None) -> str:
    """Return the canonical absolute form of ``path`` anchored at ``root``.

    Empty or unresolvable input falls back to the canonical root. Never
    raises.

    Examples (root="/work/proj"):
        "src/../src/main.cpp" -> "/work/proj/src/main.cpp"
        "/tmp//x/./y"         -> "/tmp/x/y"
        ""                    -> "/work/proj"
    """
    base = _canonical_root(root)
    try:
        raw = os.fspath(path) if path is not None else ""
    except TypeError:
        return base
    if not raw or not raw.strip():
        return base

    try:
        joined = os.path.join(base, _to_posix(raw))
        absolute = os.path.abspath(joined)
    except (TypeError, ValueError, OSError):
        return base
    normalized = posixpath.normpath(_to_posix(absolute))
    # normpath keeps a leading "//" per POSIX; collapse it for comparisons
    if normalized.startswith("//") and not normalized.startswith("///"):
        normalized = normalized[1:]
    return normalized


def is_within(path: str, directory: str) -> bool:
    """True if canonical ``path`` equals or is nested beneath canonical ``directory``.

    Compares whole segments: ``/a/bc`` is not within ``/a/b``.
    """
    if path == directory:
        return True
    prefix = directory.rstrip("/") + "/"
    return path.startswith(prefix)


def relative_or_absolute(path: PathInput | None, root: PathInput | None) -> str:
    """Display form: relative to ``root`` when strictly inside it, absolute otherwise.

    A missing path displays as the root itself.
    """
    canonical_root = _canonical_root(root)
    if path is None:
        return canonical_root
    canonical = canonicalize(path, canonical_root)
    if canonical != canonical_root and is_within(canonical, canonical_root):
        return posixpath.relpath(canonical, canonical_root)
    return canonical
