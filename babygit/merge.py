"""Merging one branch into the current branch."""

from __future__ import annotations

import logging
import time

from .branch import find_branch
from .models import BabyGitError, Commit, Repository
from .utils import calculate_hash

log = logging.getLogger(__name__)

HASH_LENGTH = 40
MAX_FILENAME_LENGTH = 255
MERGE_AUTHOR = "merge-tool"


def _scan_entry(line: str) -> tuple[str, str] | None:
    """Split a file line into its first two fields, as two width-limited words."""
    tokens = line.split()
    if not tokens:
        return None
    first = tokens[0]
    if len(first) > HASH_LENGTH:
        return first[:HASH_LENGTH], first[HASH_LENGTH:HASH_LENGTH + MAX_FILENAME_LENGTH]
    if len(tokens) < 2:
        return None
    return first, tokens[1][:MAX_FILENAME_LENGTH]


def _read_file_entries(text: str) -> str:
    lines = iter(text.splitlines())
    for line in lines:
        if line.startswith("files"):
            break
    entries = (_scan_entry(line) for line in lines)
    return "".join(f"{first} {second}\n" for first, second in filter(None, entries))


def merge_branch(repo: Repository, branch_name: str) -> Commit:
    """Merge ``branch_name`` into the current branch and return the new head."""
    if repo is None or branch_name is None:
        raise BabyGitError("merge_branch: Invalid parameters")

    target = find_branch(repo, branch_name)
    current = repo.current_branch

    if current is None:
        raise BabyGitError("Current branch is NULL")
    if target is None:
        raise BabyGitError(f"Branch '{branch_name}' not found")

    log.debug("current branch = %s, target branch = %s", current.name, target.name)
    if current.head is None:
        log.debug("Current branch HEAD is NULL")
    if target.head is None:
        log.debug("Target branch HEAD is NULL")
    if current.head is None or target.head is None:
        raise BabyGitError("Cannot merge: invalid branch state (HEAD missing)")

    if current is target:
        raise BabyGitError("Cannot merge branch into itself.")

    if current.head.hash == target.head.parent_hash:
        print("Fast-forward merge")
        current.head = target.head
        return current.head

    print(f"Merging branch '{target.name}' into '{current.name}'")

    target_path = repo.objects_dir / target.head.hash
    try:
        target_text = target_path.read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        raise BabyGitError(f"Failed to read target commit file: {target_path}") from exc

    merged_content = _read_file_entries(target_text)

    merge_commit = Commit(
        hash="",
        parent_hash=current.head.hash,
        second_parent=target.head.hash,
        author=MERGE_AUTHOR,
        message=f"Merged branch {target.name}",
        timestamp=int(time.time()),
        parent=current.head,
    )
    full = (
        f"parent {merge_commit.parent_hash}\n"
        f"parent2 {merge_commit.second_parent}\n"
        f"author {merge_commit.author}\n"
        f"time {merge_commit.timestamp}\n"
        f"message {merge_commit.message}\n"
        f"files\n{merged_content}"
    ).encode("utf-8")
    merge_commit.hash = calculate_hash(full)

    try:
        (repo.objects_dir / merge_commit.hash).write_bytes(full)
    except OSError as exc:
        raise BabyGitError("Could not save merge commit to disk") from exc

    repo.commits.insert(0, merge_commit)
    current.head = merge_commit
    print(f"Merge successful: {merge_commit.hash}")
    return merge_commit