"""Creating, finding and loading commits."""

from __future__ import annotations

import logging
import os
import re
import time

from .models import BabyGitError, Commit, Repository
from .utils import calculate_hash

log = logging.getLogger(__name__)

HASH_LENGTH = 40
MAX_AUTHOR_LENGTH = 255
MAX_MESSAGE_LENGTH = 1023

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def create_commit(repo: Repository, message: str, author: str) -> Commit:
    """Record the staged files as a new commit on the current branch."""
    if repo is None or message is None or author is None:
        raise BabyGitError("create_commit: Invalid parameters")
    if not repo.staged_files:
        raise BabyGitError("create_commit: No staged files to commit")

    branch = repo.current_branch
    parent = branch.head if branch is not None else None
    commit = Commit(
        hash="",
        parent_hash=parent.hash if parent is not None else "",
        author=author[:MAX_AUTHOR_LENGTH],
        message=message[:MAX_MESSAGE_LENGTH],
        timestamp=int(time.time()),
        parent=parent,
    )

    log.debug("Creating commit on branch %r", branch.name if branch else None)
    log.debug("Parent commit hash: %s", commit.parent_hash or "None")

    files = "".join(f"file {f.filename} {f.hash}\n" for f in repo.staged_files)
    content = (
        f"parent {commit.parent_hash}\n"
        f"author {commit.author}\n"
        f"time {commit.timestamp}\n"
        f"message {commit.message}\n"
        f"files\n{files}"
    ).encode("utf-8")
    commit.hash = calculate_hash(content)

    path = repo.objects_dir / commit.hash
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise BabyGitError(
            f"create_commit: Failed to open commit file {path} for writing"
        ) from exc

    if branch is not None:
        log.debug("Updating HEAD of branch %r to %s", branch.name, commit.hash)
        branch.head = commit

    repo.commits.insert(0, commit)
    repo.staged_files.clear()
    repo.index_file.unlink(missing_ok=True)
    return commit


def find_commit(repo: Repository, commit_hash: str) -> Commit | None:
    """Return the in-memory commit with ``commit_hash``, or None."""
    if repo is None or commit_hash is None:
        return None
    return next((c for c in repo.commits if c.hash == commit_hash), None)


def find_commit_by_hash(repo: Repository, commit_hash: str) -> Commit | None:
    """Return the in-memory commit with ``commit_hash``, or None."""
    return find_commit(repo, commit_hash)


def load_commit(objects_dir: str | os.PathLike, commit_hash: str) -> Commit | None:
    """Read a commit object from ``objects_dir``; None if it is not there."""
    if commit_hash is None:
        return None
    try:
        with open(os.path.join(objects_dir, commit_hash), "rb") as handle:
            text = handle.read().decode("utf-8", errors="replace")
    except OSError:
        return None

    commit = Commit(hash=commit_hash[:HASH_LENGTH])
    for line in text.split("\n"):
        if line.startswith("parent "):
            tokens = line[len("parent "):].split()
            if tokens:
                commit.parent_hash = tokens[0][:HASH_LENGTH]
        elif line.startswith("author "):
            value = line[len("author "):]
            if value:
                commit.author = value[:MAX_AUTHOR_LENGTH]
        elif line.startswith("time "):
            match = _LEADING_INT.match(line[len("time "):])
            if match:
                commit.timestamp = int(match.group(1))
        elif line.startswith("message "):
            value = line[len("message "):]
            if value:
                commit.message = value[:MAX_MESSAGE_LENGTH]
    return commit