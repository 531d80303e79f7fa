"""Front matter splitting, weight assignment and title lifting"""

import yaml

from gbmigrate.core.errors import OrderMissingError
from gbmigrate.core.models import Page, SummaryItem
from gbmigrate.core.patterns import PatternCache
from gbmigrate.core.summary import order_dir


DELIMITER = "---\n"
TITLE_KEY_RE = r'(?m)^title\s*:'
WEIGHT_LINE_RE = r'(?m)^weight\s*:[^\n]*\n'
DRAFT_KEY_RE = r'(?m)^draft\s*:'
HEADING_RE = r'(?m)^#[ \t]+([^\n]*?)[ \t]*$'


def parse_page(content_path: str, text: str) -> Page:
    """Split text into front matter and body.

    Front matter only exists when text opens with a delimiter line and a second
    delimiter follows; otherwise the whole text is body.
    """
    tokens = text.split(DELIMITER, 2)
    if len(tokens) < 3 or tokens[0] != "":
        return Page(content_path=content_path, content=text)
    return Page(content_path=content_path, front_matter=tokens[1], content=tokens[2])


def assign_weight(
    page: Page,
    order: dict[str, list[SummaryItem]],
    summary_file: str = "SUMMARY.md",
    base: int = -100,
    step: int = 10,
    patterns: PatternCache = None,
    ) -> None:
    """Prepend `weight: base + i*step` from the page's position in its directory listing.

    The summary file itself is marked `draft: true` instead. Raises
    OrderMissingError when the page is not listed.
    """
    if patterns is None:
        patterns = PatternCache()
    if page.content_path == summary_file:
        if not patterns.match(DRAFT_KEY_RE, page.front_matter).matched:
            page.front_matter = "draft: true\n" + page.front_matter
        return

    for i, item in enumerate(order.get(order_dir(page.content_path), [])):
        if item.content_path == page.content_path:
            line = f"weight: {base + i * step}\n"
            if patterns.match(WEIGHT_LINE_RE, page.front_matter).matched:
                page.front_matter = patterns.replace_first(WEIGHT_LINE_RE, page.front_matter, line)
            else:
                page.front_matter = line + page.front_matter
            return
    raise OrderMissingError(page.content_path)


def yaml_quote(text: str) -> str:
    """Double-quoted YAML scalar that fits on one front matter line."""
    return yaml.safe_dump(text, default_style='"', allow_unicode=True, width=float("inf")).rstrip("\n")


def lift_title(page: Page, patterns: PatternCache = None) -> None:
    """Copy the first `# Heading` into a `title:` key unless one exists; the heading stays."""
    if patterns is None:
        patterns = PatternCache()
    if patterns.match(TITLE_KEY_RE, page.front_matter).matched:
        return
    matched, groups = patterns.match(HEADING_RE, page.content)
    if not matched or not groups[0]:
        return
    title = groups[0]
    page.front_matter = f"title: {yaml_quote(title)}\n" + page.front_matter
