"""Creating branches."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.storage import REPO_DIR, MiniGitError


def _first_line(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read().split("\n", 1)[0]
    except OSError:
        return ""


def create_branch(branch_name: str, root: str | os.PathLike[str] | None = None) -> str:
    """Create a branch at the current commit and return that commit's hash."""
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR
    branch_path = repo / "refs" / branch_name

    if branch_path.exists():
        raise MiniGitError(f"Branch '{branch_name}' already exists.")

    ref_line = _first_line(repo / "HEAD")
    if len(ref_line) < len("ref: "):
        raise MiniGitError("HEAD is in an invalid format.")
    current_commit = _first_line(repo / ref_line[len("ref: "):])

    try:
        branch_path.write_text(current_commit, encoding="utf-8")
    except OSError as exc:
        raise MiniGitError(f"Error: could not create branch '{branch_name}': {exc}") from exc

    print(f"Branch '{branch_name}' created at commit {current_commit}")
    return current_commit