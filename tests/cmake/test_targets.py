"""Tests for code model flattening."""

from cmakeplane.cmake.models import (
    BuildTarget,
    CodeModel,
    CodeModelConfiguration,
    CodeModelProject,
)
from cmakeplane.cmake.targets import flatten_targets


def _model() -> CodeModel:
    return CodeModel(
        configurations=[
            CodeModelConfiguration(
                name="Debug",
                projects=[
                    CodeModelProject(name="root", targets=[BuildTarget(name="a"), BuildTarget(name="b")]),
                    CodeModelProject(name="sub", targets=[BuildTarget(name="c")]),
                ],
            ),
            CodeModelConfiguration(
                name="Release",
                projects=[CodeModelProject(name="root", targets=[BuildTarget(name="a")])],
            ),
        ]
    )


class TestFlattenTargets:
    """flatten_targets() tests."""

    def test_preserves_model_order_without_dedup(self) -> None:
        assert [t.name for t in flatten_targets(_model())] == ["a", "b", "c", "a"]

    def test_missing_model_is_empty(self) -> None:
        assert flatten_targets(None) == []

    def test_empty_hierarchy_is_empty(self) -> None:
        assert flatten_targets(CodeModel()) == []
        assert flatten_targets(CodeModel(configurations=[CodeModelConfiguration()])) == []

    def test_target_fields_preserved(self) -> None:
        target = BuildTarget(name="lib", type="STATIC_LIBRARY", sourceDirectory="/p/lib")
        model = CodeModel(
            configurations=[CodeModelConfiguration(projects=[CodeModelProject(targets=[target])])]
        )

        assert flatten_targets(model) == [target]
