"""Rewriting of GitBook `{% ... %}` directives into hugo-book shortcodes

Every tag form found in the corpus is listed here explicitly. A tag that is not
raises DirectiveError so new markup gets triaged instead of silently dropped.
"""

import posixpath
import re

from gbmigrate.core.errors import ContentRefMismatchError, DirectiveError
from gbmigrate.core.links import LinkRewriter
from gbmigrate.core.models import Page
from gbmigrate.core.patterns import PatternCache
from gbmigrate.core.tables import HINT_STYLES, LINK_TITLES, TAB_TITLES, VIDEO_EMBEDS


CONTENT_REF_RE = (
    r'\{%\s+content-ref url="([^"]+)"\s+%\}\n'
    r'\[([^\]]+)\]\(([^)]+)\)\n'
    r'\{%\s+endcontent-ref\s+%\}'
)
TAG_RE = r'\{%\s*([a-zA-Z0-9-]+)\s(.*?)\s*%\}'
ATTR_RE = r'^{}="(.*)"$'
MATH_RE = r'\$\$\n(.*)\n\$\$'

BROKEN_REFERENCE = "broken-reference"
INDEX_FILE = "_index.md"


class DirectiveRewriter:
    """Rewrites content-ref blocks, tags, math blocks and `****` artifacts of a page."""

    def __init__(
        self,
        links: LinkRewriter,
        link_titles: dict[str, str] = None,
        patterns: PatternCache = None,
        ):
        self.links = links
        self.link_titles = LINK_TITLES if link_titles is None else link_titles
        self.patterns = links.patterns if patterns is None else patterns

    def _attr(self, name: str, attrs: str) -> str | None:
        matched, groups = self.patterns.match(ATTR_RE.format(name), attrs.strip())
        return groups[0].strip() if matched else None

    def replace_content_refs(self, page: Page) -> None:
        """Replace three-line content-ref blocks with a biglink to the referenced page.

            {% content-ref url="before-you-begin/auth-token.md" %}
            [auth-token.md](before-you-begin/auth-token.md)
            {% endcontent-ref %}
        """
        def _ref(m: re.Match) -> str:
            url, title, link = m.group(1), m.group(2), m.group(3)
            if url == BROKEN_REFERENCE:
                return "{{< biglink >}}Broken Reference{{< /biglink >}}"

            ref = url.strip()
            expected_title = posixpath.basename(link)
            if url.endswith("/"):
                expected_title = posixpath.basename(posixpath.dirname(link))
                ref += INDEX_FILE
            elif posixpath.basename(ref) == "README.md":
                ref = ref[:-len("README.md")] + INDEX_FILE

            if url != link:
                raise ContentRefMismatchError("link", link, url, m.group(0))
            if title != expected_title:
                raise ContentRefMismatchError("title", title, expected_title, m.group(0))

            ref = self.links.near_ref(page, ref)
            return f'{{{{< biglink relref="{ref}" />}}}}'

        page.content = self.patterns.replace_func(CONTENT_REF_RE, page.content, _ref)

    def _tag(self, m: re.Match, tabs: list[int]) -> str:
        name, attrs = m.group(1), m.group(2)
        if name == "tabs":
            tabs[0] += 1
            return f"{{{{< tabs id{tabs[0]} >}}}}"
        if name == "endtabs":
            return "{{< /tabs >}}"
        if name == "tab":
            title = self._attr("title", attrs)
            if title is not None:
                title = TAB_TITLES.get(title.lower(), title)
                return f'{{{{< tab "{title}" >}}}}'
        elif name == "endtab":
            return "{{< /tab >}}"
        elif name == "hint":
            style = self._attr("style", attrs)
            if style in HINT_STYLES:
                return f"{{{{< hint {style} >}}}}"
        elif name == "endhint":
            return "{{< /hint >}}"
        elif name == "embed":
            url = self._attr("url", attrs)
            if url is not None and url in self.link_titles:
                return f'{{{{< biglink href="{url}" >}}}}{self.link_titles[url]}{{{{< /biglink >}}}}'
        raise DirectiveError(m.group(0))

    def replace_tags(self, page: Page) -> None:
        """Map each `{% name attrs %}` tag onto its shortcode; tab groups are numbered per page."""
        for block, shortcode in VIDEO_EMBEDS.items():
            page.content = page.content.replace(block, shortcode)

        tabs = [0]
        page.content = self.patterns.replace_func(
            TAG_RE, page.content, lambda m: self._tag(m, tabs)
        )

    def replace_math(self, page: Page) -> None:
        """`$$\\n...\\n$$` -> katex display shortcode."""
        page.content = self.patterns.replace_all(
            MATH_RE, page.content, "{{< katex display >}}\n\\1\n{{< /katex >}}"
        )

    def replace_starry_night(self, page: Page) -> None:
        """Remove `****` runs left behind by GitBook's editor."""
        page.content = self.patterns.replace_all(r'( *\*\*\*\* +|( +\*\*\*\* *))', page.content, " ")
        page.content = self.patterns.replace_all(r'\*\*\*\*', page.content, "")
