"""File system helpers for walking the source tree and writing output"""

import shutil
from pathlib import Path
from typing import Callable, Iterator


def iter_files(root: Path, onerror: Callable[[OSError], None] = None) -> Iterator[Path]:
    """Yield files under root in sorted order, skipping any `.git` entry.

    A directory that cannot be listed is passed to onerror and skipped; without
    onerror the OSError propagates.
    """
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        if onerror is None:
            raise
        onerror(e)
        return
    for p in entries:
        if p.name == ".git":
            continue
        if p.is_dir():
            yield from iter_files(p, onerror)
        elif p.is_file():
            yield p


def write_file(to: Path, data: bytes) -> None:
    to.parent.mkdir(parents=True, exist_ok=True)
    to.write_bytes(data)


def copy_file(src: Path, to: Path) -> None:
    write_file(to, src.read_bytes())


def reset_dir(path: Path) -> None:
    """Delete path and recreate it empty."""
    if path.exists():
        shutil.rmtree(path)
    path.mkdir(parents=True)
