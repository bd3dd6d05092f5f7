import pytest

from minigit.add import add_file_to_stage
from minigit.commit import commit
from minigit.initialize import init_repo
from minigit.log import LogEntry, iter_log, show_log
from minigit.objects import Commit
from minigit.storage import MiniGitError


def _commit_file(tmp_path, name, text, message):
    (tmp_path / name).write_text(text)
    add_file_to_stage(name, tmp_path)
    return commit(message, tmp_path)


def test_empty_repository_has_no_commits(tmp_path, capsys):
    init_repo(tmp_path)
    capsys.readouterr()
    assert show_log(tmp_path) == []
    assert capsys.readouterr().out == "No commits yet.\n"


def test_log_lists_newest_first(tmp_path):
    init_repo(tmp_path)
    first = _commit_file(tmp_path, "a.txt", "one\n", "first")
    second = _commit_file(tmp_path, "a.txt", "two\n", "second")
    entries = list(iter_log(tmp_path))
    assert [entry.hash for entry in entries] == [second.hash, first.hash]
    assert [entry.message for entry in entries] == ["second", "first"]
    assert entries[0].parent == first.hash
    assert entries[1].parent == "null"
    assert entries[0].timestamp == second.timestamp


def test_show_log_prints_each_commit(tmp_path, capsys):
    init_repo(tmp_path)
    record = _commit_file(tmp_path, "a.txt", "one\n", "hello")
    capsys.readouterr()
    entries = show_log(tmp_path)
    out = capsys.readouterr().out
    assert entries == [LogEntry(record.hash, record.timestamp, "hello", "null")]
    assert f"Commit: {record.hash}\n" in out
    assert f"Date:   {record.timestamp}\n" in out
    assert "Message: hello\n\n" in out


def test_invalid_head_raises(tmp_path):
    init_repo(tmp_path)
    (tmp_path / ".minigit" / "HEAD").write_text("abc123")
    with pytest.raises(MiniGitError, match="invalid format"):
        list(iter_log(tmp_path))


def test_missing_commit_raises(tmp_path):
    init_repo(tmp_path)
    (tmp_path / ".minigit" / "refs" / "main").write_text("deadbeef")
    with pytest.raises(MiniGitError, match="deadbeef"):
        show_log(tmp_path)


def test_chain_stops_at_missing_parent_after_yielding(tmp_path):
    init_repo(tmp_path)
    repo = tmp_path / ".minigit"
    record = Commit(hash="c2", message="m", timestamp="t", parent_hash="gone")
    (repo / "commits" / "c2").write_text(record.render())
    (repo / "refs" / "main").write_text("c2")
    walker = iter_log(tmp_path)
    assert next(walker).hash == "c2"
    with pytest.raises(MiniGitError, match="gone"):
        next(walker)