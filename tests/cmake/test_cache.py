"""Tests for CMakeCache.txt parsing."""

import random

import pytest

from cmakeplane.cmake.cache import CacheSnapshot, CacheVariable, parse_cache
from tests.conftest import SAMPLE_CACHE

MIXED_CACHE = """\
//Doc for A
A:STRING=1
A-ADVANCED:INTERNAL=1
not a cache line
//orphaned doc

# comment
B:BOOL=ON
9BAD:STRING=x
A:STRING=2
"""


def _generate_cache(rng: random.Random) -> tuple[str, int]:
    """Random mix of cache lines; returns the text and its variable count."""
    lines: list[str] = []
    expected = 0
    for index in range(rng.randint(0, 40)):
        kind = rng.choice(["variable", "advanced", "doc", "comment", "blank", "garbage"])
        name = f"VAR_{index}"
        if kind == "variable":
            lines.append(f"{name}:STRING=value {index}")
            expected += 1
        elif kind == "advanced":
            lines.append(f"{name}-ADVANCED:INTERNAL=1")
        elif kind == "doc":
            lines.append(f"//Docs for {name}")
        elif kind == "comment":
            lines.append("# comment")
        elif kind == "blank":
            lines.append("")
        else:
            lines.append(f"{index}garbage = line")
    return "\n".join(lines) + "\n", expected


class TestParseCache:
    """parse_cache line handling."""

    def test_given_variable_and_advanced_marker_when_parse_then_marker_excluded(self) -> None:
        """-ADVANCED entries never appear in the snapshot."""
        # Given
        text = "MY_VAR:STRING=Hello\nMY_VAR-ADVANCED:BOOL=ON\n"

        # When
        snapshot = parse_cache(text)

        # Then
        assert len(snapshot) == 1
        assert snapshot["MY_VAR"].value == "Hello"
        assert "MY_VAR-ADVANCED" not in snapshot

    def test_documentation_attaches_to_next_variable(self) -> None:
        snapshot = parse_cache("//Choose the type of build\nCMAKE_BUILD_TYPE:STRING=Debug\n")

        assert snapshot["CMAKE_BUILD_TYPE"] == CacheVariable(
            name="CMAKE_BUILD_TYPE",
            type="STRING",
            value="Debug",
            documentation="Choose the type of build",
        )

    def test_last_documentation_line_wins(self) -> None:
        snapshot = parse_cache("//first\n//second\nA:STRING=1\n")

        assert snapshot["A"].documentation == "second"

    def test_documentation_is_consumed_by_one_variable(self) -> None:
        snapshot = parse_cache("//doc for A\nA:STRING=1\nB:STRING=2\n")

        assert snapshot["A"].documentation == "doc for A"
        assert snapshot["B"].documentation is None

    @pytest.mark.parametrize(
        "separator",
        ["", "# comment", "not a cache line"],
        ids=["blank", "comment", "garbage"],
    )
    def test_documentation_reset_by_non_variable_line(self, separator: str) -> None:
        snapshot = parse_cache(f"//orphaned\n{separator}\nA:STRING=1\n")

        assert snapshot["A"].documentation is None

    def test_documentation_consumed_by_advanced_entry(self) -> None:
        snapshot = parse_cache("//ADVANCED property\nA-ADVANCED:INTERNAL=1\nA:STRING=1\n")

        assert snapshot["A"].documentation is None

    def test_empty_documentation_is_none(self) -> None:
        snapshot = parse_cache("//\nA:STRING=1\n")

        assert snapshot["A"].documentation is None

    def test_value_keeps_equals_signs_and_may_be_empty(self) -> None:
        snapshot = parse_cache("FLAGS:STRING=-DX=1 -DY=2\nEMPTY:STRING=\n")

        assert snapshot["FLAGS"].value == "-DX=1 -DY=2"
        assert snapshot["EMPTY"].value == ""

    def test_type_kept_verbatim(self) -> None:
        snapshot = parse_cache("A:UNINITIALIZED=x\nB:FILEPATH=/usr/bin/cc\n")

        assert snapshot["A"].type == "UNINITIALIZED"
        assert snapshot["B"].type == "FILEPATH"

    def test_names_may_contain_dots_dashes_slashes_and_plus(self) -> None:
        snapshot = parse_cache("Foo_DIR/sub.x-y+z:PATH=/opt\n")

        assert "Foo_DIR/sub.x-y+z" in snapshot

    @pytest.mark.parametrize(
        "line",
        ["1BAD:STRING=x", "NOTYPE=x", "NAME:=x", "-- Detecting CXX compiler ABI info"],
    )
    def test_malformed_lines_are_skipped(self, line: str) -> None:
        snapshot = parse_cache(f"{line}\nGOOD:BOOL=ON\n")

        assert list(snapshot) == ["GOOD"]

    def test_surrounding_whitespace_and_crlf_ignored(self) -> None:
        snapshot = parse_cache("  //doc  \r\n  A:STRING=1  \r\n")

        assert snapshot["A"].value == "1"
        assert snapshot["A"].documentation == "doc"

    def test_later_definition_overwrites_earlier(self) -> None:
        snapshot = parse_cache("A:STRING=1\nA:STRING=2\n")

        assert snapshot["A"].value == "2"

    def test_empty_text_yields_empty_snapshot(self) -> None:
        assert len(parse_cache("")) == 0

    def test_sample_cache(self) -> None:
        snapshot = parse_cache(SAMPLE_CACHE)

        assert snapshot.sorted_names() == [
            "CMAKE_BUILD_TYPE",
            "CMAKE_CXX_COMPILER",
            "CMAKE_CXX_FLAGS",
            "MY_CUSTOM_BOOLEAN",
        ]
        assert snapshot["CMAKE_CXX_COMPILER"].documentation == "CXX compiler"

    @pytest.mark.parametrize("text", [SAMPLE_CACHE, MIXED_CACHE], ids=["sample", "mixed"])
    def test_parsing_same_text_twice_gives_equal_snapshots(self, text: str) -> None:
        assert parse_cache(text) == parse_cache(text)

    @pytest.mark.parametrize("seed", range(20))
    def test_size_counts_non_advanced_variable_lines(self, seed: int) -> None:
        text, expected = _generate_cache(random.Random(seed))

        snapshot = parse_cache(text)

        assert len(snapshot) == expected
        assert not any(name.endswith("-ADVANCED") for name in snapshot)


class TestCacheSnapshot:
    """CacheSnapshot mapping behavior."""

    def test_is_read_only_mapping(self) -> None:
        snapshot = CacheSnapshot({"A": CacheVariable("A", "STRING", "1")})

        with pytest.raises(TypeError):
            snapshot["B"] = CacheVariable("B", "STRING", "2")  # type: ignore[index]

    def test_sorted_names_uses_code_point_order(self) -> None:
        snapshot = parse_cache("b:STRING=1\nB:STRING=2\na:STRING=3\n")

        assert snapshot.sorted_names() == ["B", "a", "b"]

    def test_repr_shows_count(self) -> None:
        assert repr(parse_cache("A:STRING=1\n")) == "CacheSnapshot(1 variables)"
