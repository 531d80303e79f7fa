"""Data models for the conversion pipeline"""

from dataclasses import dataclass

from pydantic import BaseModel


class SummaryItem(BaseModel):
    """One `[title](path)` entry of the table of contents."""
    title: str
    content_path: str


class SectionInfo(BaseModel):
    """Menu entry written into a top-level section's _index.md."""
    title: str = ""
    weight: int = 0


@dataclass
class Page:
    """A markdown document split into raw front matter and body; mutated in place by each stage."""
    content_path: str          # source-relative, '/' separated
    front_matter: str = ""     # raw text between the delimiters, newline-terminated
    content: str = ""          # body after the closing delimiter

    def render(self) -> str:
        return "---\n" + self.front_matter + "---\n" + self.content


@dataclass
class Failure:
    """A recorded per-file failure; the run continues past it."""
    path: str
    error: Exception

    def __str__(self) -> str:
        return f"failed to convert {self.path}: {self.error}"
