"""Blob and commit objects and the commit file format."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from minigit.storage import REPO_DIR

_FIELDS = {
    "commit: ": "hash",
    "timestamp: ": "timestamp",
    "message: ": "message",
    "parent: ": "parent_hash",
}


@dataclass(frozen=True)
class Blob:
    """A stored snapshot of one file's content, named by its hash."""

    filename: str
    hash: str

    def save(self, content: str | bytes, root: str | os.PathLike[str] | None = None) -> Path:
        """Write *content* to the object store and return the object's path."""
        objects = (Path.cwd() if root is None else Path(root)) / REPO_DIR / "objects"
        objects.mkdir(parents=True, exist_ok=True)
        data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        target = objects / self.hash
        target.write_bytes(data)
        return target


@dataclass
class Commit:
    """A commit: its hash, metadata, parent and the blobs it records."""

    hash: str = ""
    message: str = ""
    timestamp: str = ""
    parent_hash: str = ""
    blob_hashes: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Return the text stored in the commit's file."""
        lines = [
            f"commit: {self.hash}",
            f"timestamp: {self.timestamp}",
            f"message: {self.message}",
            f"parent: {self.parent_hash}",
        ]
        lines.extend(f"blob: {blob}" for blob in self.blob_hashes)
        return "".join(f"{line}\n" for line in lines)


def parse_commit(text: str) -> Commit:
    """Build a Commit from the text of a commit file."""
    result = Commit()
    for line in text.split("\n"):
        if line.startswith("blob: "):
            result.blob_hashes.append(line[len("blob: "):])
            continue
        for prefix, name in _FIELDS.items():
            if line.startswith(prefix):
                setattr(result, name, line[len(prefix):])
                break
    return result