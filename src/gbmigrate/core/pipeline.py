"""Conversion pipeline: per-document stages and the source-tree orchestrator"""

import logging
import posixpath
from pathlib import Path

from gbmigrate.config import Conversion, Settings
from gbmigrate.core.directives import DirectiveRewriter
from gbmigrate.core.errors import MigrateError, SectionMappingError, UnknownFileTypeError
from gbmigrate.core.links import GITBOOK_ASSETS, LinkRewriter
from gbmigrate.core.models import Failure, Page, SectionInfo, SummaryItem
from gbmigrate.core.page import assign_weight, lift_title, parse_page, yaml_quote
from gbmigrate.core.patterns import PatternCache
from gbmigrate.core.summary import load_order
from gbmigrate.core.tables import LEGACY_ASSETS, LINK_TITLES, SECTIONS
from gbmigrate.util.fs import copy_file, iter_files, write_file


logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {'.png', '.jpg', '.svg', '.gif'}
MARKDOWN = "markdown"
ASSET = "asset"


def classify(content_path: str, assets_dir: str = "_assets") -> tuple[str, str]:
    """Return (kind, output path relative to the section) for a source file.

    Raises UnknownFileTypeError for anything that is neither markdown nor a
    known asset location.
    """
    ext = posixpath.splitext(content_path)[1]
    if ext == ".md":
        target = content_path
        if posixpath.basename(target).lower() == "readme.md":
            target = posixpath.join(posixpath.dirname(target), "_index.md")
        return MARKDOWN, target

    prefix = GITBOOK_ASSETS + "/"
    if ext in IMAGE_EXTENSIONS:
        if not content_path.startswith(prefix):
            raise UnknownFileTypeError(f"don't know where to move {content_path!r}")
        return ASSET, posixpath.join(assets_dir, content_path[len(prefix):])

    rest = content_path[len(prefix):] if content_path.startswith(prefix) else None
    if rest in LEGACY_ASSETS:
        return ASSET, posixpath.join(assets_dir, rest + "-fix.png")
    raise UnknownFileTypeError(f"don't know how to handle {content_path!r}")


def section_index(info: SectionInfo | None) -> str:
    """Front-matter-only _index.md for a top-level section."""
    content = "---\n"
    if info is not None and info.title:
        content += f"title: {yaml_quote(info.title)}\n"
        content += f"weight: {info.weight}\n"
    content += "bookFlatSection: true\n"
    content += "---\n"
    return content


class DocumentPipeline:
    """Runs every rewrite stage over one markdown document of a section."""

    def __init__(
        self,
        target: str,
        order: dict[str, list[SummaryItem]],
        settings: Settings = None,
        link_titles: dict[str, str] = None,
        patterns: PatternCache = None,
        ):
        self.settings = settings or Settings()
        self.order = order
        self.patterns = PatternCache() if patterns is None else patterns
        self.links = LinkRewriter(target, self.settings.assets_dir, self.patterns)
        self.directives = DirectiveRewriter(self.links, link_titles, self.patterns)

    def convert_page(self, page: Page) -> Page:
        s = self.settings
        assign_weight(page, self.order, s.summary_file, s.weight_base, s.weight_step, self.patterns)
        lift_title(page, self.patterns)
        self.directives.replace_content_refs(page)
        self.directives.replace_tags(page)
        self.links.fix_trailing_space(page)
        self.links.fix_links_to_readme(page)
        self.links.fix_image_links(page)
        self.links.fix_regular_links(page)
        self.directives.replace_math(page)
        self.directives.replace_starry_night(page)
        return page

    def convert(self, content_path: str, text: str) -> str:
        return self.convert_page(parse_page(content_path, text)).render()


class Converter:
    """Converts one GitBook source tree into `<content_dir>/<target>`.

    Failures are collected in `failures`; output already written is kept.
    """

    def __init__(
        self,
        source_dir: Path,
        content_dir: Path,
        target: str,
        extra_dir: Path = None,
        settings: Settings = None,
        sections: dict[str, SectionInfo] = None,
        link_titles: dict[str, str] = None,
        ):
        self.source_dir = Path(source_dir)
        self.content_dir = Path(content_dir)
        self.target = target
        self.extra_dir = Path(extra_dir) if extra_dir is not None else None
        self.settings = settings or Settings()
        self.sections = SECTIONS if sections is None else sections
        self.link_titles = LINK_TITLES if link_titles is None else link_titles
        self.patterns = PatternCache()
        self.order: dict[str, list[SummaryItem]] = {}
        self.failures: list[Failure] = []

    @property
    def output_dir(self) -> Path:
        return self.content_dir / self.target

    def fail(self, path: str, error: Exception) -> None:
        logger.warning("failed to convert %s: %s", path, error)
        self.failures.append(Failure(path=path, error=error))

    def run(self) -> list[Failure]:
        self.create_order()
        self.files()
        self.add_section_indices()
        self.copy_extra()
        return self.failures

    def create_order(self) -> None:
        summary = self.source_dir / self.settings.summary_file
        try:
            self.order = load_order(summary, self.patterns)
        except MigrateError as e:
            self.order = {}
            self.fail(str(summary), e)

    def walk_error(self, error: OSError) -> None:
        self.fail(str(error.filename or self.source_dir), error)

    def files(self) -> None:
        pipeline = DocumentPipeline(
            self.target, self.order, self.settings, self.link_titles, self.patterns
        )
        for path in iter_files(self.source_dir, self.walk_error):
            try:
                self.convert(pipeline, path)
            except (MigrateError, OSError, UnicodeDecodeError) as e:
                self.fail(path.as_posix(), e)

    def convert(self, pipeline: DocumentPipeline, path: Path) -> Path:
        content_path = path.relative_to(self.source_dir).as_posix()
        kind, rel = classify(content_path, self.settings.assets_dir)
        target = self.output_dir / rel
        logger.debug("%s %s -> %s", kind, content_path, target)
        if kind == ASSET:
            copy_file(path, target)
        else:
            text = path.read_text(encoding="utf-8")
            write_file(target, pipeline.convert(content_path, text).encode("utf-8"))
        return target

    def add_section_indices(self) -> None:
        """Write `_index.md` for each top-level directory of the output."""
        if not self.output_dir.is_dir():
            self.fail(str(self.output_dir), FileNotFoundError(f"no output in {self.output_dir}"))
            return
        for entry in sorted(self.output_dir.iterdir()):
            if not entry.is_dir() or entry.name == self.settings.assets_dir:
                continue
            section = f"{self.target}/{entry.name}"
            info = self.sections.get(section)
            if info is None:
                self.fail(section, SectionMappingError(section))
            try:
                write_file(entry / "_index.md", section_index(info).encode("utf-8"))
            except OSError as e:
                self.fail(section, e)

    def copy_extra(self) -> None:
        """Overlay hand-written files from `<extra_dir>/<target>` onto the output."""
        if self.extra_dir is None:
            return
        source = self.extra_dir / self.target
        if not source.is_dir():
            return
        for path in iter_files(source, self.walk_error):
            target = self.output_dir / path.relative_to(source)
            logger.debug("extra %s -> %s", path, target)
            try:
                copy_file(path, target)
            except OSError as e:
                self.fail(path.as_posix(), e)


def run_conversion(conv: Conversion, settings: Settings) -> list[Failure]:
    """Convert one configured source tree; configured tables extend the static ones."""
    converter = Converter(
        source_dir=Path(conv.source_dir),
        content_dir=Path(settings.content_dir),
        target=conv.target_dir,
        extra_dir=Path(settings.extra_dir),
        settings=settings,
        sections={**SECTIONS, **settings.sections},
        link_titles={**LINK_TITLES, **settings.link_titles},
    )
    return converter.run()
