from pathlib import Path

from babygit.models import Branch, Commit, FileState, Repository, StagedFile


def test_paths_are_under_git_dir(tmp_path):
    repo = Repository(root=tmp_path)
    assert repo.git_dir == tmp_path / ".babygit"
    assert repo.objects_dir == tmp_path / ".babygit" / "objects"
    assert repo.heads_dir == tmp_path / ".babygit" / "refs" / "heads"
    assert repo.head_file == tmp_path / ".babygit" / "HEAD"
    assert repo.index_file == tmp_path / ".babygit" / "index"


def test_string_root_becomes_path(tmp_path):
    repo = Repository(root=str(tmp_path))
    assert isinstance(repo.root, Path)
    assert repo.root == tmp_path


def test_default_repository_is_empty():
    repo = Repository()
    assert repo.root == Path(".")
    assert repo.branches == []
    assert repo.commits == []
    assert repo.staged_files == []
    assert repo.stashes == []
    assert repo.current_branch is None


def test_repositories_do_not_share_lists():
    first = Repository()
    second = Repository()
    first.branches.append(Branch("main"))
    assert second.branches == []


def test_staged_file_defaults_to_added():
    staged = StagedFile("a.txt", "0" * 40)
    assert staged.status == FileState.ADDED
    assert staged.status.name.lower() == "added"


def test_commit_equality_is_identity():
    first = Commit("a" * 40)
    second = Commit("a" * 40)
    assert (first == second) is False
    assert first == first


def test_branch_repr_with_cycle_terminates():
    parent = Branch("main")
    child = Branch("dev", parent=parent)
    parent.children.append(child)
    assert "dev" in repr(child)
    assert "main" in repr(parent)