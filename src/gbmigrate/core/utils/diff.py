"""Unified diffs for mismatch diagnostics"""

import difflib


def _lines(text: str) -> list[str]:
    """Split into lines that all end with a newline, so diff output stays line-aligned."""
    return [line + "\n" for line in text.splitlines()] or ["\n"]


def unified_diff(
    old: str,
    new: str,
    from_label: str = "expected",
    to_label: str = "actual",
    context: int = 3,
    ) -> list[str]:
    """Return unified diff lines comparing old to new. Empty list if identical.

    Lines already include newlines; join with '' for display.
    """
    return list(
        difflib.unified_diff(_lines(old), _lines(new), fromfile=from_label, tofile=to_label, n=context)
    )
