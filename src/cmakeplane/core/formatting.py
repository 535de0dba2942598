"""Summary formatting utilities for consistent terminal and tool output.

Design principles:
- Summaries fit on one line
- Grammatically correct (1 target vs 2 targets)
- Upper-snake-case tags read as titles ("STATIC_LIBRARY" -> "Static Library")
"""

from __future__ import annotations


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Examples:
        pluralize(1, "target") -> "1 target"
        pluralize(3, "variable") -> "3 variables"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_target_type(kind: str) -> str:
    """Convert an UPPER_SNAKE_CASE tag to space-separated title case.

    Examples:
        "STATIC_LIBRARY" -> "Static Library"
        "EXECUTABLE" -> "Executable"
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in kind.split("_")).strip()


def bullet_list(items: list[str], *, indent: str = "  ") -> str:
    """Render items as a markdown bullet list, one per line."""
    return "\n".join(f"{indent}- {item}" for item in items)
