"""The minigit command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from minigit.add import add_file_to_stage
from minigit.branch import create_branch
from minigit.checkout import checkout
from minigit.commit import commit
from minigit.diff import diff
from minigit.initialize import init_repo
from minigit.log import show_log
from minigit.merge import merge
from minigit.storage import MiniGitError


def _usage(text: str) -> int:
    print(f"Usage: {text}")
    return 1


def _dispatch(command: str, rest: list[str]) -> int:
    match command:
        case "init":
            init_repo()
        case "add":
            if not rest:
                return _usage("minigit add <filename>")
            add_file_to_stage(rest[0])
        case "commit":
            if len(rest) >= 2 and rest[0] == "-m":
                commit(rest[1])
            else:
                _usage('minigit commit -m "commit message"')
        case "log":
            show_log()
        case "branch":
            if not rest:
                return _usage("minigit branch <branch-name>")
            create_branch(rest[0])
        case "checkout":
            if not rest:
                return _usage("minigit checkout <branch-name|commit-hash>")
            checkout(rest[0])
        case "merge":
            if not rest:
                return _usage("minigit merge <branch-name>")
            merge(rest[0])
        case "diff":
            if len(rest) < 2:
                return _usage("minigit diff <commit1> <commit2>")
            diff(rest[0], rest[1])
        case _:
            print(f"Unknown command: {command}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one minigit command in the current directory; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _usage("minigit <command> [options]")
    try:
        return _dispatch(args[0], args[1:])
    except MiniGitError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())