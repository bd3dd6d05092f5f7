"""Switching to a branch or a commit."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from minigit.storage import REPO_DIR, MiniGitError, read_file_content


def _read_text(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return None


def restore_files_from_commit(
    commit_hash: str, root: str | os.PathLike[str] | None = None
) -> list[Path]:
    """Write each blob of a commit to the working directory as <hash>.txt."""
    base = Path.cwd() if root is None else Path(root)
    repo = base / REPO_DIR

    text = _read_text(repo / "commits" / commit_hash)
    if text is None:
        raise MiniGitError(f"Error: Commit not found: {commit_hash}")

    written = []
    for line in text.split("\n"):
        if not line.startswith("blob: "):
            continue
        blob_hash = line[len("blob: "):]
        content = read_file_content(repo / "objects" / blob_hash)
        target = base / f"{blob_hash}.txt"
        target.write_bytes(content)
        written.append(target)
    return written


def checkout(target: str, root: str | os.PathLike[str] | None = None) -> list[Path]:
    """Check out a branch or a commit and return the files restored."""
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR
    ref_path = repo / "refs" / target

    if ref_path.exists():
        text = _read_text(ref_path) or ""
        commit_hash = text.split("\n", 1)[0]
        try:
            restored = restore_files_from_commit(commit_hash, root)
        except MiniGitError as exc:
            print(exc, file=sys.stderr)
            restored = []
        (repo / "HEAD").write_text(f"ref: refs/{target}", encoding="utf-8")
        print(f"Switched to branch '{target}'")
        return restored

    if not (repo / "commits" / target).exists():
        raise MiniGitError("Error: branch or commit not found.")

    restored = restore_files_from_commit(target, root)
    (repo / "HEAD").write_text(target, encoding="utf-8")
    print(f"Detached HEAD at commit {target}")
    return restored