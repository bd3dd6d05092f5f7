from pathlib import Path

import pytest

from minigit.storage import (
    read_current_head,
    read_file_content,
    read_parent_hash,
    read_staged_files,
)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    base = tmp_path / ".minigit"
    (base / "refs").mkdir(parents=True)
    (base / "commits").mkdir()
    return tmp_path


def test_read_file_content_returns_bytes(tmp_path):
    target = tmp_path / "f.txt"
    target.write_bytes(b"line one\nline two\n")
    assert read_file_content(target) == b"line one\nline two\n"


def test_read_file_content_missing_is_empty(tmp_path):
    assert read_file_content(tmp_path / "nope") == b""


def test_staged_files_skip_blank_lines(repo):
    (repo / ".minigit" / "stage").write_text("abc\n\ndef\n", encoding="utf-8")
    assert read_staged_files(repo) == ["abc", "def"]


def test_staged_files_missing_stage(repo):
    assert read_staged_files(repo) == []


def test_current_head_empty_ref_is_null(repo):
    (repo / ".minigit" / "refs" / "main").write_text("", encoding="utf-8")
    assert read_current_head(repo) == "null"


def test_current_head_missing_ref_is_null(repo):
    assert read_current_head(repo) == "null"


def test_current_head_reads_first_line(repo):
    (repo / ".minigit" / "refs" / "main").write_text("cafe\nbeef\n", encoding="utf-8")
    assert read_current_head(repo) == "cafe"


def test_parent_hash_found(repo):
    (repo / ".minigit" / "commits" / "c1").write_text(
        "commit: c1\ntimestamp: t\nmessage: m\nparent: c0\nblob: b\n", encoding="utf-8"
    )
    assert read_parent_hash("c1", repo) == "c0"


def test_parent_hash_missing_commit(repo):
    assert read_parent_hash("absent", repo) == "null"


def test_parent_hash_without_parent_line(repo):
    (repo / ".minigit" / "commits" / "c2").write_text("commit: c2\n", encoding="utf-8")
    assert read_parent_hash("c2", repo) == "null"