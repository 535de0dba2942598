"""Flatten a code model into one ordered sequence of targets."""

from __future__ import annotations

from cmakeplane.cmake.models import BuildTarget, CodeModel


def flatten_targets(code_model: CodeModel | None) -> list[BuildTarget]:
    """All targets across configurations and projects, in model order.

    No deduplication: a target built in Debug and Release appears twice.
    """
    if code_model is None:
        return []
    return [
        target
        for configuration in code_model.configurations
        for project in configuration.projects
        for target in project.targets
    ]
