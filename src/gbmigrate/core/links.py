"""Link and image target rewriting for the Hugo content tree"""

import posixpath
import re

from gbmigrate.core.models import Page
from gbmigrate.core.patterns import PatternCache
from gbmigrate.core.tables import LEGACY_ASSETS


GITBOOK_ASSETS = ".gitbook/assets"
IMAGE_RE = r'!\[([^\]]*)\]\((<[^>]*>|[^)]*)\)'
LINK_RE = r'(?<!!)\[([^\]]*)\]\((<[^>]*>|[^)]*)\)'
EXTERNAL_RE = r'^[a-zA-Z][a-zA-Z0-9+.-]*:'


class LinkRewriter:
    """Rewrites link and image targets of pages converted into one Hugo section."""

    def __init__(self, section: str, assets_dir: str = "_assets", patterns: PatternCache = None):
        self.section = section
        self.assets_dir = assets_dir
        self.patterns = PatternCache() if patterns is None else patterns

    def is_external(self, ref: str) -> bool:
        return ref.startswith(("/", "#")) or self.patterns.match(EXTERNAL_RE, ref).matched

    def abs_ref(self, page: Page, rel: str) -> str:
        """Site-rooted path of rel resolved against the page's directory.

        Traversal above the source root is clamped to the section root.
        """
        if self.is_external(rel):
            return rel
        joined = posixpath.join("/", posixpath.dirname(page.content_path), rel)
        return "/" + posixpath.join(self.section, posixpath.normpath(joined).lstrip("/"))

    def near_ref(self, page: Page, rel: str) -> str:
        """Make parent-traversing refs site-rooted; leave everything else alone."""
        if rel.startswith("../"):
            return self.abs_ref(page, rel)
        return rel

    def fix_trailing_space(self, page: Page) -> None:
        page.content = self.patterns.replace_all(r' ?&#x20;', page.content, "")
        page.content = self.patterns.replace_all(r'(?m)[ \t]+$', page.content, "")

    def fix_links_to_readme(self, page: Page) -> None:
        page.content = self.patterns.replace_all(r'README\.md\)', page.content, "_index.md)")

    def asset_url(self, url: str) -> str:
        """Map a `.gitbook/assets` target onto the section's flat asset directory."""
        p = url.find(GITBOOK_ASSETS)
        if p < 0:
            return url
        rest = url[p + len(GITBOOK_ASSETS):].lstrip("/")
        if rest in LEGACY_ASSETS:
            rest += "-fix.png"
        return f"/{self.section}/{self.assets_dir}/{rest}"

    def fix_image_links(self, page: Page) -> None:
        """`![x](<../.gitbook/assets/a b.png>)` -> `![x](</dcs/_assets/a b.png>)`."""
        def _image(m: re.Match) -> str:
            title, url = m.group(1), m.group(2).replace("\\_", "_")
            angled = url.startswith("<") and url.endswith(">")
            if angled:
                url = url[1:-1]
            url = self.asset_url(url)
            if angled:
                url = f"<{url}>"
            return f"![{title}]({url})"

        page.content = self.patterns.replace_func(IMAGE_RE, page.content, _image)

    def fix_regular_links(self, page: Page) -> None:
        """`[x](../b/c.md)` -> `[x](/<section>/b/c.md)`."""
        def _link(m: re.Match) -> str:
            title, url = m.group(1), m.group(2)
            angled = url.startswith("<") and url.endswith(">")
            target = url[1:-1] if angled else url
            if self.is_external(target):
                return m.group(0)
            target = self.near_ref(page, target)
            if angled:
                target = f"<{target}>"
            return f"[{title}]({target})"

        page.content = self.patterns.replace_func(LINK_RE, page.content, _link)
