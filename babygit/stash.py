"""Saving and listing stashed changes."""

from __future__ import annotations

from .commit import create_commit
from .models import BabyGitError, Repository, Stash

MAX_MESSAGE_LENGTH = 255
STASH_AUTHOR = "stash"


def stash_changes(repo: Repository, message: str) -> Stash:
    """Commit the staged files as a stash and remember it."""
    if repo is None or message is None:
        raise BabyGitError("stash_changes: Invalid parameters")

    commit = create_commit(repo, message, STASH_AUTHOR)
    stash = Stash(message=message[:MAX_MESSAGE_LENGTH], commit=commit)
    repo.stashes.append(stash)
    print(f"Saved working directory to stash: {message}")
    return stash


def apply_stash(repo: Repository, stash_index: int) -> Stash:
    """Select stash number ``stash_index``; negative numbers select the first."""
    if repo is None:
        raise BabyGitError("apply_stash: Invalid parameters")
    position = max(stash_index, 0)
    if position >= len(repo.stashes):
        raise BabyGitError("Stash not found")
    stash = repo.stashes[position]
    print(f"Applying stash: {stash.message}")
    return stash


def list_stashes(repo: Repository) -> list[str]:
    """Print the stashes and return their listing lines."""
    if repo is None:
        return []
    lines = [
        f"{index}: {stash.message} ({stash.commit.hash})"
        for index, stash in enumerate(repo.stashes)
    ]
    print("Stashes:")
    for line in lines:
        print(line)
    return lines