"""Staging a file."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.hasher import simple_hash
from minigit.objects import Blob
from minigit.storage import REPO_DIR, MiniGitError, read_file_content


def add_file_to_stage(filename: str, root: str | os.PathLike[str] | None = None) -> str:
    """Store a file's content as a blob, stage it and return its hash."""
    base = Path.cwd() if root is None else Path(root)
    file_path = base / filename
    if not file_path.exists():
        raise MiniGitError(f"Error: file '{filename}' is not found.")

    content = read_file_content(file_path)
    digest = simple_hash(content)
    Blob(filename, digest).save(content, base)

    with open(base / REPO_DIR / "stage", "a", encoding="utf-8") as stage:
        stage.write(f"{digest}\n")

    print(f"staged: {filename} ({digest})")
    return digest