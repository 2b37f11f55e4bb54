"""Creating, finding and switching branches."""

from __future__ import annotations

from contextlib import suppress

from .commit import find_commit_by_hash, load_commit
from .models import BabyGitError, Branch, Commit, Repository

MAX_NAME_LENGTH = 255
HASH_LENGTH = 40


def _resolve_commit(repo: Repository, commit_hash: str) -> Commit | None:
    commit = find_commit_by_hash(repo, commit_hash)
    if commit is None:
        commit = load_commit(repo.objects_dir, commit_hash)
        if commit is not None:
            repo.commits.append(commit)
    return commit


def load_branch_head(repo: Repository, branch: Branch) -> Commit | None:
    """Set ``branch.head`` from its ref file and return it."""
    try:
        text = (repo.heads_dir / branch.name).read_text(encoding="utf-8")
    except OSError:
        branch.head = None
        return None
    commit_hash = text.split("\n", 1)[0][:HASH_LENGTH]
    branch.head = _resolve_commit(repo, commit_hash) if commit_hash else None
    return branch.head


def find_branch(repo: Repository, name: str) -> Branch | None:
    """Return the branch called ``name``, or None."""
    if repo is None or name is None:
        return None
    return next((b for b in repo.branches if b.name == name), None)


def create_branch(repo: Repository, name: str) -> Branch:
    """Create a branch at the current head and write its ref file."""
    if repo is None or name is None:
        raise BabyGitError("create_branch: Invalid parameters")
    if find_branch(repo, name) is not None:
        raise BabyGitError(f"Branch {name} already exists")

    current = repo.current_branch
    branch = Branch(
        name=name[:MAX_NAME_LENGTH],
        head=current.head if current is not None else None,
        parent=current,
    )
    if current is not None:
        current.children.insert(0, branch)
    repo.branches.append(branch)

    try:
        content = f"{branch.head.hash}\n" if branch.head is not None else ""
        (repo.heads_dir / branch.name).write_text(content, encoding="utf-8")
    except OSError:
        print(f"Warning: Could not create branch reference file for {name}")

    print(f"Created branch {name}")
    load_branch_head(repo, branch)
    return branch


def checkout_branch(repo: Repository, name: str) -> Branch:
    """Make ``name`` the current branch and point HEAD at it."""
    branch = find_branch(repo, name)
    if branch is None:
        raise BabyGitError(f"Branch {name} not found")

    load_branch_head(repo, branch)
    repo.current_branch = branch

    try:
        repo.head_file.write_text(f"ref: refs/heads/{name}\n", encoding="utf-8")
    except OSError:
        print("Warning: Could not update HEAD file")

    print(f"Switched to branch {name}")
    return branch


def create_branch_silent(repo: Repository, name: str) -> Branch | None:
    """Register a branch in memory only; None if it already exists."""
    if repo is None or name is None:
        return None
    if find_branch(repo, name) is not None:
        return None
    branch = Branch(name=name[:MAX_NAME_LENGTH])
    repo.branches.insert(0, branch)
    return branch


def update_branch_ref(repo: Repository, branch: Branch) -> None:
    """Write the branch's head hash to its ref file."""
    if branch is None:
        return
    content = f"{branch.head.hash}\n" if branch.head is not None else "\n"
    with suppress(OSError):
        (repo.heads_dir / branch.name).write_text(content, encoding="utf-8")


def set_branch_head(repo: Repository, branch: Branch, commit: Commit | None) -> None:
    """Point ``branch`` at ``commit`` and save its ref."""
    if branch is None:
        return
    branch.head = commit
    update_branch_ref(repo, branch)


def load_all_branch_heads(repo: Repository) -> None:
    """Reload every branch head from its ref file."""
    for branch in repo.branches:
        load_branch_head(repo, branch)