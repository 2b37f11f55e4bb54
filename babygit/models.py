"""Core data types of a babygit repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

GIT_DIR_NAME = ".babygit"


class BabyGitError(Exception):
    """Raised when a repository operation cannot be carried out."""


class FileState(IntEnum):
    """State of a file in the staging area."""

    UNMODIFIED = 0
    MODIFIED = 1
    ADDED = 2
    DELETED = 3


@dataclass
class StagedFile:
    """A file recorded in the index together with its content hash."""

    filename: str
    hash: str
    status: FileState | int = FileState.ADDED


@dataclass(eq=False)
class Commit:
    """A commit object; equality is identity, as commits form a graph."""

    hash: str
    parent_hash: str = ""
    second_parent: str = ""
    author: str = ""
    message: str = ""
    timestamp: int = 0
    parent: Commit | None = field(default=None, repr=False)


@dataclass(eq=False)
class Branch:
    """A named pointer to a commit, remembering the branch it came from."""

    name: str
    head: Commit | None = None
    parent: Branch | None = field(default=None, repr=False)
    children: list[Branch] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Stash:
    """A saved set of changes."""

    message: str
    commit: Commit


@dataclass(eq=False)
class Repository:
    """In-memory state of a repository rooted at ``root``."""

    root: Path = field(default_factory=Path)
    branches: list[Branch] = field(default_factory=list)
    current_branch: Branch | None = None
    commits: list[Commit] = field(default_factory=list)
    staged_files: list[StagedFile] = field(default_factory=list)
    stashes: list[Stash] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    @property
    def git_dir(self) -> Path:
        return self.root / GIT_DIR_NAME

    @property
    def objects_dir(self) -> Path:
        return self.git_dir / "objects"

    @property
    def heads_dir(self) -> Path:
        return self.git_dir / "refs" / "heads"

    @property
    def head_file(self) -> Path:
        return self.git_dir / "HEAD"

    @property
    def index_file(self) -> Path:
        return self.git_dir / "index"