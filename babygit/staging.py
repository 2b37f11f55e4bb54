"""The staging area: adding files, reporting and persisting the index."""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path

from .models import BabyGitError, FileState, Repository, StagedFile
from .utils import calculate_hash

MAX_FILENAME_LENGTH = 255
HASH_LENGTH = 40


def add_to_index(repo: Repository, filepath: str) -> StagedFile | None:
    """Hash the file at ``filepath`` (relative to the repository root) and stage it."""
    if repo is None or filepath is None:
        return None

    try:
        content = (Path(repo.root) / filepath).read_bytes()
    except OSError as exc:
        raise BabyGitError(f"Failed to open file: {filepath}: {exc.strerror}") from exc

    file_hash = calculate_hash(content)

    for staged in repo.staged_files:
        if staged.filename == filepath:
            staged.hash = file_hash
            staged.status = FileState.MODIFIED
            return staged

    staged = StagedFile(
        filename=filepath[:MAX_FILENAME_LENGTH],
        hash=file_hash,
        status=FileState.ADDED,
    )
    repo.staged_files.append(staged)
    print(f"Added {filepath} to staging area")
    return staged


def clear_staging_area(repo: Repository) -> None:
    """Drop every staged file and empty the index file."""
    if repo is None:
        return
    repo.staged_files.clear()
    with suppress(OSError):
        repo.index_file.write_text("", encoding="utf-8")


def update_file_status(repo: Repository) -> list[StagedFile]:
    """Restage every regular file in the repository root."""
    if repo is None:
        return []
    clear_staging_area(repo)
    try:
        entries = sorted(Path(repo.root).iterdir())
    except OSError:
        return []
    for entry in entries:
        if entry.is_file() and not entry.is_symlink():
            add_to_index(repo, entry.name)
    return list(repo.staged_files)


def _status_name(status: int) -> str:
    try:
        return FileState(status).name.lower()
    except ValueError:
        return "unknown"


def format_status(repo: Repository) -> str:
    """Return the status report for the current branch and staged files."""
    if repo is None or repo.current_branch is None:
        return ""
    lines = [f"On branch {repo.current_branch.name}", "", "Staged changes:"]
    lines.extend(
        f"  {_status_name(staged.status)}: {staged.filename}"
        for staged in repo.staged_files
    )
    return "\n".join(lines) + "\n"


def print_status(repo: Repository) -> None:
    """Print the status report."""
    print(format_status(repo), end="")


def save_index(repo: Repository) -> None:
    """Write the staged files to the index file."""
    if repo is None:
        return
    content = "".join(
        f"{staged.filename} {staged.hash} {int(staged.status)}\n"
        for staged in repo.staged_files
    )
    with suppress(OSError):
        repo.index_file.write_text(content, encoding="utf-8")


def _parse_status(token: str) -> FileState | int | None:
    try:
        value = int(token)
    except ValueError:
        return None
    try:
        return FileState(value)
    except ValueError:
        return value


def load_index(repo: Repository) -> None:
    """Replace the staged files with the entries of the index file, if any."""
    if repo is None:
        return
    try:
        text = repo.index_file.read_text(encoding="utf-8")
    except OSError:
        return

    repo.staged_files = []
    tokens = text.split()
    for start in range(0, len(tokens) - 2, 3):
        filename, file_hash, status_token = tokens[start:start + 3]
        status = _parse_status(status_token)
        if status is None:
            break
        repo.staged_files.append(
            StagedFile(
                filename=filename[:MAX_FILENAME_LENGTH],
                hash=file_hash[:HASH_LENGTH],
                status=status,
            )
        )