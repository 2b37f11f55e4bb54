# babygit

A very small version control tool. It keeps its data in a `.babygit`
directory in the current working directory: commit objects named by the
SHA-1 of their text, one ref file per branch under `refs/heads`, a `HEAD`
file and a staging index.

## Installing

```
pip install .
```

## The command

Every command works on the `.babygit` directory in the current directory.

```
babygit init                          # create .babygit with a "main" branch
babygit add notes.txt                 # stage one file
babygit add .                         # restage every regular file in the directory
babygit status                        # show the current branch and staged files
babygit commit "first notes" "alice"  # commit the staged files as an author
babygit branch feature                # create a branch at the current head
babygit checkout feature              # make a branch the current one
babygit merge feature                 # merge a branch into the current one
babygit stash "work in progress"      # commit the staged files as a stash
babygit stash                         # list stashes
babygit stash apply 0                 # select a stash by its index
```

`init` in a directory that already has a repository prints
`Repository already initialized`. Any other command outside a repository
prints `Not a babygit repository. Run 'init' first.` and exits with status 1;
so does running `babygit` with no command. Errors from a command (an unknown
branch, nothing staged, a failed merge) are printed, and the repository state
is then saved as usual.

`status` prints the current branch and each staged file with its state
(`added` the first time a file is staged, `modified` when it is staged again):

```
On branch main

Staged changes:
  added: notes.txt
```

A commit needs at least one staged file; the commit object lists the parent
hash, author, time, message and the staged file names with their hashes,
and committing empties the index.

A merge is a fast-forward when the current head is the recorded parent of
the other branch's head. Otherwise a merge commit is written with author
`merge-tool`, message `Merged branch <name>`, both heads as parents, and the
file entries of the other branch's head commit.

## The library

```python
from babygit.repository import init_repository, load_repository, save_repository
from babygit.staging import add_to_index, format_status
from babygit.commit import create_commit
from babygit.branch import create_branch, checkout_branch
from babygit.merge import merge_branch

repo = init_repository(".")
add_to_index(repo, "notes.txt")          # path relative to the repository root
commit = create_commit(repo, "first notes", "alice")
print(commit.hash)

create_branch(repo, "feature")
checkout_branch(repo, "feature")
save_repository(repo)                    # writes HEAD, branch refs and the index

repo = load_repository(".")              # None when there is no .babygit
print(format_status(repo), end="")
```

The data types (`Repository`, `Branch`, `Commit`, `StagedFile`, `Stash`,
`FileState`) live in `babygit.models`. Failures are raised as
`babygit.models.BabyGitError`.

## What it does not do

- File contents are never stored: staging and commits record only file
  names and their SHA-1 hashes, so nothing can be restored from a commit.
- `checkout` and `merge` change only branch pointers and commit objects; they
  never touch files in the working directory, and there is no conflict
  handling.
- `stash apply` only selects and announces a stash; it changes nothing.
  Stashes are held in memory only and are not saved in `.babygit`, so from
  the command line `babygit stash` lists none and `stash apply` reports
  `Stash not found`.
- There is no log, diff, remote or deletion command.

## Running the tests

```
pip install .[test]
pytest
```