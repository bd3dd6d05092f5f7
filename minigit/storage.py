"""Reading the repository's files: stage, refs, commits and working files."""

from __future__ import annotations

import os
from pathlib import Path

REPO_DIR = ".minigit"


class MiniGitError(Exception):
    """Raised when a repository operation cannot be carried out."""


def _repo(root: str | os.PathLike[str] | None) -> Path:
    return (Path.cwd() if root is None else Path(root)) / REPO_DIR


def _read_lines(path: Path) -> list[str]:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        return []
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_file_content(path: str | os.PathLike[str]) -> bytes:
    """Return the whole content of *path*, or empty bytes if it cannot be read."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""


def read_staged_files(root: str | os.PathLike[str] | None = None) -> list[str]:
    """Return the blob hashes listed in the staging area, in order."""
    return [line for line in _read_lines(_repo(root) / "stage") if line]


def read_current_head(root: str | os.PathLike[str] | None = None) -> str:
    """Return the commit hash the main branch points to, or "null"."""
    lines = _read_lines(_repo(root) / "refs" / "main")
    head = lines[0] if lines else ""
    return head or "null"


def read_parent_hash(commit_hash: str, root: str | os.PathLike[str] | None = None) -> str:
    """Return the parent recorded in a commit, or "null" if there is none."""
    for line in _read_lines(_repo(root) / "commits" / commit_hash):
        if line.startswith("parent: "):
            return line[len("parent: "):]
    return "null"