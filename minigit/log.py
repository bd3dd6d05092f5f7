"""Walking the history of the current branch."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from minigit.objects import parse_commit
from minigit.storage import REPO_DIR, MiniGitError


@dataclass(frozen=True)
class LogEntry:
    """One commit as shown in the log."""

    hash: str
    timestamp: str
    message: str
    parent: str


def _read_text(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return None


def _first_line(path: Path) -> str:
    text = _read_text(path)
    return "" if text is None else text.split("\n", 1)[0]


def iter_log(root: str | os.PathLike[str] | None = None) -> Iterator[LogEntry]:
    """Yield the commits reachable from HEAD, newest first."""
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR

    head_ref = _first_line(repo / "HEAD")
    if not head_ref.startswith("ref: "):
        raise MiniGitError("HEAD is in an invalid format.")

    current = _first_line(repo / head_ref[len("ref: "):])
    while current and current != "null":
        text = _read_text(repo / "commits" / current)
        if text is None:
            raise MiniGitError(f"Error: Cannot find commit {current}")
        record = parse_commit(text)
        yield LogEntry(current, record.timestamp, record.message, record.parent_hash)
        current = record.parent_hash


def show_log(root: str | os.PathLike[str] | None = None) -> list[LogEntry]:
    """Print the history of the current branch and return its entries."""
    entries = []
    for entry in iter_log(root):
        print(f"Commit: {entry.hash}")
        print(f"Date:   {entry.timestamp}")
        print(f"Message: {entry.message}\n")
        entries.append(entry)
    if not entries:
        print("No commits yet.")
    return entries