"""Tests for the project model."""

from cmakeplane.cmake.models import BuildTarget, CodeModel, FileGroup, TargetKind


class TestFileGroup:
    def test_include_path_objects_flattened(self) -> None:
        group = FileGroup.model_validate({"includePath": [{"path": "/inc"}, "/other"]})

        assert group.include_paths == ["/inc", "/other"]

    def test_include_path_entries_without_path_dropped(self) -> None:
        group = FileGroup.model_validate({"includePath": [{}, {"path": ""}, {"path": "/inc"}]})

        assert group.include_paths == ["/inc"]

    def test_null_include_path_is_empty(self) -> None:
        assert FileGroup.model_validate({"includePath": None}).include_paths == []


class TestCodeModelFromJson:
    def test_camel_case_snapshot_validates(self) -> None:
        model = CodeModel.model_validate(
            {
                "configurations": [
                    {
                        "name": "Debug",
                        "projects": [
                            {
                                "name": "proj",
                                "targets": [
                                    {
                                        "name": "core",
                                        "type": "static_library",
                                        "sourceDirectory": "/src/core",
                                        "fileGroups": [
                                            {"sources": ["/src/core/a.cpp"], "includePath": [{}]}
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            }
        )

        target = model.configurations[0].projects[0].targets[0]
        assert target.kind is TargetKind.STATIC_LIBRARY
        assert target.source_directory == "/src/core"
        assert target.file_groups[0].include_paths == []

    def test_null_lists_are_empty(self) -> None:
        target = BuildTarget.model_validate({"name": "t", "fileGroups": None, "artifacts": None})

        assert target.file_groups == []
        assert target.artifacts == []
