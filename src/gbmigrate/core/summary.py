"""SUMMARY.md indexing: per-directory page order from the table of contents"""

import posixpath
from pathlib import Path

from gbmigrate.core.errors import SummaryReadError
from gbmigrate.core.models import SummaryItem
from gbmigrate.core.patterns import PatternCache


LINK_RE = r'\[([^\]]*)\]\(([^)]*)\)'
INDEX_NAME = "README.md"


def order_dir(content_path: str) -> str:
    """Directory whose listing orders content_path; a README belongs to its parent's listing."""
    d = posixpath.dirname(content_path)
    if posixpath.basename(content_path) == INDEX_NAME:
        d = posixpath.dirname(d)
    return d or "."


def build_order(text: str, patterns: PatternCache = None) -> dict[str, list[SummaryItem]]:
    """Group every link in text by owning directory, keeping file order."""
    if patterns is None:
        patterns = PatternCache()
    order: dict[str, list[SummaryItem]] = {}
    for m in patterns.compile(LINK_RE).finditer(text):
        title, content_path = m.group(1), m.group(2)
        order.setdefault(order_dir(content_path), []).append(
            SummaryItem(title=title, content_path=content_path)
        )
    return order


def load_order(path: Path, patterns: PatternCache = None) -> dict[str, list[SummaryItem]]:
    """Read and index a summary file. Raises SummaryReadError if it can't be read."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SummaryReadError(f"failed to read summary: {e}") from e
    return build_order(text, patterns)
