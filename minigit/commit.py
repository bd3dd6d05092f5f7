"""Recording the staged files as a new commit."""

from __future__ import annotations

import os
import time
from pathlib import Path

from minigit.hasher import simple_hash
from minigit.objects import Commit
from minigit.storage import REPO_DIR, MiniGitError, read_current_head, read_staged_files


def commit(message: str, root: str | os.PathLike[str] | None = None) -> Commit | None:
    """Commit the staged blobs on the main branch.

    Returns the new commit, or None when nothing is staged.
    """
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR

    blob_hashes = read_staged_files(root)
    if not blob_hashes:
        print("Nothing to commit. Stage some files first.")
        return None

    commits_dir = repo / "commits"
    if not commits_dir.is_dir():
        raise MiniGitError("Error: not a MiniGit repository (run init first).")

    parent = read_current_head(root)
    timestamp = time.ctime()
    record = Commit(
        hash=simple_hash(timestamp + message + parent),
        message=message,
        timestamp=timestamp,
        parent_hash=parent,
        blob_hashes=blob_hashes,
    )

    (commits_dir / record.hash).write_text(record.render(), encoding="utf-8")
    (repo / "refs").mkdir(exist_ok=True)
    (repo / "refs" / "main").write_text(record.hash, encoding="utf-8")
    (repo / "HEAD").write_text("ref: refs/main\n", encoding="utf-8")
    (repo / "stage").write_text("", encoding="utf-8")

    print(f"Committed as {record.hash}")
    return record