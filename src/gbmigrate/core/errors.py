"""Error types raised by the conversion pipeline"""

from gbmigrate.core.utils.diff import unified_diff


class MigrateError(Exception):
    """Base class for every recorded conversion failure."""


class PatternNotFoundError(MigrateError):
    pass


class SummaryReadError(MigrateError):
    pass


class OrderMissingError(MigrateError):
    def __init__(self, content_path: str):
        super().__init__(f"order missing for {content_path}")
        self.content_path = content_path


class DirectiveError(MigrateError):
    """A `{% ... %}` tag outside the known vocabulary or with unparseable attributes."""

    def __init__(self, tag: str):
        super().__init__(f"unhandled: {tag}")
        self.tag = tag


class ContentRefMismatchError(MigrateError):
    """A content-ref block whose url, link and title do not agree."""

    def __init__(self, field: str, got: str, expected: str, block: str):
        diff = "".join(unified_diff(expected, got, from_label="expected", to_label=field))
        super().__init__(
            f"content-ref {field} mismatch: {block}\n"
            f"{field}: {got!r}\n"
            f"expected: {expected!r}\n"
            f"{diff}"
        )
        self.field = field
        self.got = got
        self.expected = expected
        self.block = block


class UnknownFileTypeError(MigrateError):
    pass


class SectionMappingError(MigrateError):
    def __init__(self, section: str):
        super().__init__(f"menu mapping missing for {section}")
        self.section = section
