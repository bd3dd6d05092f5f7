"""Creating a new repository."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.storage import REPO_DIR, MiniGitError


def init_repo(root: str | os.PathLike[str] | None = None) -> bool:
    """Create an empty repository under *root*.

    Returns False, after saying so, if one already exists there.
    """
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR
    if repo.exists():
        print("Repository already initialized.")
        return False
    try:
        repo.mkdir()
        for name in ("objects", "commits", "refs"):
            (repo / name).mkdir()
        (repo / "HEAD").write_text("ref: refs/main", encoding="utf-8")
        (repo / "refs" / "main").write_text("", encoding="utf-8")
    except OSError as exc:
        raise MiniGitError(f"Error initializing MiniGit: {exc}") from exc
    print("Initialized empty MiniGit repository in .minigit/")
    return True