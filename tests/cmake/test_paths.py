"""Tests for path canonicalization."""

from pathlib import Path

import pytest

from cmakeplane.cmake.paths import canonicalize, is_within, relative_or_absolute

ROOT = "/work/proj"


class TestCanonicalize:
    """canonicalize() tests."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("src/main.cpp", "/work/proj/src/main.cpp"),
            ("src/../src/main.cpp", "/work/proj/src/main.cpp"),
            ("./src//main.cpp", "/work/proj/src/main.cpp"),
            ("/tmp//x/./y", "/tmp/x/y"),
            ("//tmp/x", "/tmp/x"),
            ("src/", "/work/proj/src"),
            ("..", "/work"),
        ],
    )
    def test_spellings(self, path: str, expected: str) -> None:
        assert canonicalize(path, ROOT) == expected

    @pytest.mark.parametrize("path", ["", "   ", None])
    def test_empty_input_is_root(self, path: str | None) -> None:
        assert canonicalize(path, ROOT) == ROOT

    def test_backslashes_become_slashes(self) -> None:
        assert canonicalize("src\\sub\\a.cpp", ROOT) == "/work/proj/src/sub/a.cpp"

    def test_accepts_path_objects(self) -> None:
        assert canonicalize(Path("src/a.cpp"), Path(ROOT)) == "/work/proj/src/a.cpp"

    def test_root_itself_is_normalized(self) -> None:
        assert canonicalize("a", "/work/./proj/../proj/") == "/work/proj/a"

    def test_never_raises_on_bad_input(self) -> None:
        assert canonicalize(123, ROOT) == ROOT  # type: ignore[arg-type]

    def test_idempotent(self) -> None:
        once = canonicalize("src/../include/x.h", ROOT)
        assert canonicalize(once, "/elsewhere") == once


class TestIsWithin:
    """Segment-wise containment."""

    def test_equal_paths(self) -> None:
        assert is_within("/a/b", "/a/b")

    def test_nested(self) -> None:
        assert is_within("/a/b/c.h", "/a/b")

    def test_sibling_with_shared_prefix_is_not_within(self) -> None:
        assert not is_within("/a/bc/x.h", "/a/b")

    def test_filesystem_root_contains_everything(self) -> None:
        assert is_within("/a", "/")


class TestRelativeOrAbsolute:
    """Display form of paths."""

    def test_inside_root_is_relative(self) -> None:
        assert relative_or_absolute("/work/proj/lib/core", ROOT) == "lib/core"

    def test_outside_root_is_absolute(self) -> None:
        assert relative_or_absolute("/usr/include", ROOT) == "/usr/include"

    def test_root_itself_is_absolute(self) -> None:
        assert relative_or_absolute(ROOT, ROOT) == ROOT

    def test_none_is_root(self) -> None:
        assert relative_or_absolute(None, ROOT) == ROOT
