"""Creating, loading and saving a repository on disk."""

from __future__ import annotations

import os
import re
import sys
from contextlib import suppress
from pathlib import Path

from .branch import checkout_branch, create_branch, find_branch, load_all_branch_heads
from .models import GIT_DIR_NAME, BabyGitError, Branch, Repository
from .utils import ensure_directory_exists

DEFAULT_BRANCH = "main"
INITIAL_HEAD_BRANCH = "master"
MAX_REF_PATH_LENGTH = 255

_HEAD_REF = re.compile(r"ref: refs/heads/(\S{1,255})")


def _ref_path_too_long(name: str) -> bool:
    return len(f"{GIT_DIR_NAME}/refs/heads/{name}") > MAX_REF_PATH_LENGTH


def ensure_main_branch(repo: Repository) -> Branch:
    """Create and check out the main branch unless it already exists."""
    branch = find_branch(repo, DEFAULT_BRANCH)
    if branch is None:
        create_branch(repo, DEFAULT_BRANCH)
        branch = checkout_branch(repo, DEFAULT_BRANCH)
    return branch


def init_repository(root: str | os.PathLike = ".") -> Repository:
    """Create an empty repository under ``root`` with a main branch."""
    repo = Repository(root=Path(root))
    for directory in (
        repo.git_dir,
        repo.objects_dir,
        repo.git_dir / "refs",
        repo.heads_dir,
        repo.git_dir / "refs" / "remotes",
    ):
        ensure_directory_exists(directory)

    try:
        repo.head_file.write_text(
            f"ref: refs/heads/{INITIAL_HEAD_BRANCH}\n", encoding="utf-8"
        )
    except OSError as exc:
        raise BabyGitError(f"Failed to create HEAD file: {exc.strerror}") from exc

    ensure_main_branch(repo)
    print("Initialized empty babygit repository")
    return repo


def load_repository(root: str | os.PathLike = ".") -> Repository | None:
    """Load the repository under ``root``; None if there is none."""
    repo = Repository(root=Path(root))
    if not repo.git_dir.exists():
        return None

    if repo.heads_dir.is_dir():
        for entry in sorted(repo.heads_dir.iterdir()):
            # Mirrors the head-insertion order of silently registered branches.
            from .branch import create_branch_silent

            create_branch_silent(repo, entry.name)

    with suppress(OSError):
        head_text = repo.head_file.read_text(encoding="utf-8")
        match = _HEAD_REF.match(head_text)
        if match:
            try:
                checkout_branch(repo, match.group(1))
            except BabyGitError as exc:
                print(exc)

    branch = repo.current_branch
    if branch is None:
        raise BabyGitError("Current branch not set. HEAD might be corrupt.")
    if _ref_path_too_long(branch.name):
        raise BabyGitError(f"Branch path too long for branch: {branch.name}")

    load_all_branch_heads(repo)
    return repo


def save_repository(repo: Repository) -> None:
    """Write HEAD, every branch ref and the staged entries to disk."""
    if repo is None:
        return

    for directory in (repo.git_dir, repo.objects_dir, repo.git_dir / "refs", repo.heads_dir):
        directory.mkdir(exist_ok=True)

    head_name = repo.current_branch.name if repo.current_branch else DEFAULT_BRANCH
    with suppress(OSError):
        repo.head_file.write_text(f"ref: refs/heads/{head_name}\n", encoding="utf-8")

    for branch in repo.branches:
        if _ref_path_too_long(branch.name):
            print(f"Branch path too long for branch: {branch.name}", file=sys.stderr)
            continue
        content = branch.head.hash if branch.head is not None else ""
        with suppress(OSError):
            (repo.heads_dir / branch.name).write_text(content, encoding="utf-8")

    entries = "".join(f"{staged.hash} {staged.filename}\n" for staged in repo.staged_files)
    with suppress(OSError):
        repo.index_file.write_text(entries, encoding="utf-8")