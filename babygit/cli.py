"""Command-line entry point."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from .branch import checkout_branch, create_branch, load_all_branch_heads
from .commit import create_commit
from .merge import merge_branch
from .models import BabyGitError, Repository
from .repository import init_repository, load_repository, save_repository
from .staging import (
    add_to_index,
    clear_staging_area,
    load_index,
    print_status,
    save_index,
    update_file_status,
)
from .stash import apply_stash, list_stashes, stash_changes

PROG = "babygit"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _add(repo: Repository, args: list[str]) -> None:
    if not args:
        print(f"Usage: {PROG} add <file>")
    elif args[0] == ".":
        update_file_status(repo)
    else:
        add_to_index(repo, args[0])


def _commit(repo: Repository, args: list[str]) -> None:
    if len(args) < 2:
        print(f'Usage: {PROG} commit "message" "author"')
        return
    try:
        commit = create_commit(repo, args[0], args[1])
    except BabyGitError as exc:
        print(exc)
        print("Commit failed. Nothing to commit or an error occurred.")
        return
    print(f"Committed: {commit.hash}")
    clear_staging_area(repo)
    if repo.current_branch is not None:
        repo.current_branch.head = commit


def _branch(repo: Repository, args: list[str]) -> None:
    if not args:
        print(f"Usage: {PROG} branch <name>")
        return
    try:
        create_branch(repo, args[0])
    finally:
        load_all_branch_heads(repo)


def _checkout(repo: Repository, args: list[str]) -> None:
    if not args:
        print(f"Usage: {PROG} checkout <branch>")
        return
    load_all_branch_heads(repo)
    checkout_branch(repo, args[0])


def _status(repo: Repository, args: list[str]) -> None:
    print_status(repo)


def _merge(repo: Repository, args: list[str]) -> None:
    if not args:
        print(f"Usage: {PROG} merge <branch>")
        return
    merge_branch(repo, args[0])


def _stash(repo: Repository, args: list[str]) -> None:
    if not args:
        list_stashes(repo)
    elif args[0] == "apply" and len(args) >= 2:
        apply_stash(repo, _atoi(args[1]))
    else:
        stash_changes(repo, args[0])


_COMMANDS = {
    "add": _add,
    "commit": _commit,
    "branch": _branch,
    "checkout": _checkout,
    "status": _status,
    "merge": _merge,
    "stash": _stash,
}


def main(argv: list[str] | None = None) -> int:
    """Run one babygit command in the current directory; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {PROG} <command> [args...]")
        return 1

    command, rest = args[0], args[1:]
    root = Path.cwd()

    try:
        repo = load_repository(root)
    except BabyGitError as exc:
        print(exc, file=sys.stderr)
        repo = None
    if repo is not None:
        load_index(repo)

    if repo is None and command != "init":
        print("Not a babygit repository. Run 'init' first.")
        return 1

    if command == "init":
        if repo is not None:
            print("Repository already initialized")
        else:
            try:
                repo = init_repository(root)
            except BabyGitError as exc:
                print(exc, file=sys.stderr)
                return 1
    else:
        handler = _COMMANDS.get(command)
        if handler is None:
            print(f"Unknown command: {command}")
        else:
            try:
                handler(repo, rest)
            except BabyGitError as exc:
                print(exc)

    save_repository(repo)
    save_index(repo)
    return 0


if __name__ == "__main__":
    sys.exit(main())