"""Line-by-line comparison of the blobs of two commits."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from minigit.storage import REPO_DIR

Change = tuple[int, str, str]


def _read_text(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError:
        return ""


def _lines(path: Path) -> list[str]:
    lines = _read_text(path).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _blob_hashes(path: Path) -> list[str]:
    return [
        line[len("blob: "):]
        for line in _read_text(path).split("\n")
        if line.startswith("blob: ")
    ]


def _compare(old: list[str], new: list[str]) -> Iterator[Change]:
    paired = min(len(old), len(new))
    for number, (before, after) in enumerate(zip(old, new), start=1):
        if before != after:
            yield number, before, after
    number = paired + 1
    if len(old) > len(new):
        # The read that finds the second file exhausted has already taken
        # one line of the first, so that line is not reported.
        for offset, line in enumerate(old[paired + 1:]):
            yield number + offset, line, ""
    else:
        for offset, line in enumerate(new[paired:]):
            yield number + offset, "", line


def diff(hash1: str, hash2: str, root: str | os.PathLike[str] | None = None) -> list[Change]:
    """Print and return the differing lines of two commits' blobs.

    Blobs are paired by position; each change is (line number, old, new).
    """
    repo = (Path.cwd() if root is None else Path(root)) / REPO_DIR
    blobs1 = _blob_hashes(repo / "commits" / hash1)
    blobs2 = _blob_hashes(repo / "commits" / hash2)

    print("Diff View")
    changes = []
    for first, second in zip(blobs1, blobs2):
        old = _lines(repo / "objects" / first)
        new = _lines(repo / "objects" / second)
        for number, before, after in _compare(old, new):
            print(f"Line {number}:\n- {before}\n+ {after}")
            changes.append((number, before, after))

    if not changes:
        print("No differences found.")
    return changes