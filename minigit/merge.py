"""Merging another branch into the working directory."""

from __future__ import annotations

import os
from pathlib import Path

from minigit.storage import (
    REPO_DIR,
    MiniGitError,
    read_current_head,
    read_file_content,
    read_parent_hash,
)


def _read_text(path: Path) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return None


def find_lca(current: str, other: str, root: str | os.PathLike[str] | None = None) -> str:
    """Return the nearest common ancestor of two commits, or "null"."""
    ancestors = set()
    node = current
    while node and node != "null":
        ancestors.add(node)
        node = read_parent_hash(node, root)

    node = other
    while node and node != "null":
        if node in ancestors:
            return node
        node = read_parent_hash(node, root)
    return "null"


def get_blobs(commit_hash: str, root: str | os.PathLike[str] | None = None) -> dict[str, str]:
    """Map the working file name of each blob in a commit to the blob's hash."""
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR
    text = _read_text(repo / "commits" / commit_hash) or ""
    blobs = {}
    for line in text.split("\n"):
        if line.startswith("blob: "):
            blob_hash = line[len("blob: "):]
            blobs[f"{blob_hash}.txt"] = blob_hash
    return blobs


def merge(target_branch: str, root: str | os.PathLike[str] | None = None) -> list[str]:
    """Merge a branch into the working directory; return the conflicted files."""
    base_dir = Path.cwd() if root is None else Path(root)
    repo = base_dir / REPO_DIR
    current_commit = read_current_head(root)

    ref_text = _read_text(repo / "refs" / target_branch)
    if ref_text is None:
        raise MiniGitError(f"Branch '{target_branch}' does not exist.")
    target_commit = ref_text.split("\n", 1)[0]

    base = find_lca(current_commit, target_commit, root)
    base_blobs = get_blobs(base, root)
    current_blobs = get_blobs(current_commit, root)
    target_blobs = get_blobs(target_commit, root)
    objects = repo / "objects"

    conflicts = []
    for filename, base_hash in base_blobs.items():
        current_hash = current_blobs.get(filename, "")
        target_hash = target_blobs.get(filename, "")

        if current_hash != target_hash and base_hash not in (current_hash, target_hash):
            conflicts.append(filename)
            print(f"CONFLICT: both modified {filename}")
            (base_dir / filename).write_bytes(
                b"<<<<<<< current\n"
                + read_file_content(objects / current_hash)
                + b"=======\n"
                + read_file_content(objects / target_hash)
                + f">>>>>>> {target_branch}\n".encode("utf-8")
            )
            print(f"Conflict markers written to {filename}")
            continue

        if target_hash != base_hash and current_hash == base_hash:
            (base_dir / filename).write_bytes(read_file_content(objects / target_hash))
            print(f"Merged {filename} from {target_branch}")

    if conflicts:
        print("\nMerge completed with conflicts.\nPlease resolve conflicts and commit manually.")
    else:
        print("\nMerge finished successfully with no conflicts.")
    return conflicts