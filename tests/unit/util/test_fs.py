"""Unit tests for util/fs.py"""

import pytest

from gbmigrate.util.fs import copy_file, iter_files, reset_dir, write_file


def test_iter_files_sorted_and_skips_git(tmp_path):
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "x.md").write_text("x")
    (tmp_path / "a.md").write_text("a")
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").write_text("ref")
    files = [p.relative_to(tmp_path).as_posix() for p in iter_files(tmp_path)]
    assert files == ["a.md", "b/x.md"]


def test_write_file_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "c.txt"
    write_file(target, b"data")
    assert target.read_bytes() == b"data"


def test_copy_file(tmp_path):
    src = tmp_path / "src.bin"
    src.write_bytes(b"\x00\x01")
    copy_file(src, tmp_path / "out" / "dst.bin")
    assert (tmp_path / "out" / "dst.bin").read_bytes() == b"\x00\x01"


def test_reset_dir(tmp_path):
    out = tmp_path / "content"
    (out / "old").mkdir(parents=True)
    (out / "old" / "f.md").write_text("x")
    reset_dir(out)
    assert out.is_dir() and not any(out.iterdir())
    reset_dir(tmp_path / "fresh")
    assert (tmp_path / "fresh").is_dir()


def test_iter_files_missing_root_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(iter_files(tmp_path / "absent"))


def test_iter_files_reports_unlistable_directories(tmp_path):
    (tmp_path / "a.md").write_text("a")
    errors = []
    assert list(iter_files(tmp_path / "absent", errors.append)) == []
    assert isinstance(errors[0], FileNotFoundError)
    assert [p.name for p in iter_files(tmp_path, errors.append)] == ["a.md"]
    assert len(errors) == 1
