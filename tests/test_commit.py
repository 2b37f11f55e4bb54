import pytest

from babygit.commit import (
    create_commit,
    find_commit,
    find_commit_by_hash,
    load_commit,
)
from babygit.models import BabyGitError, Branch, Repository, StagedFile
from babygit.utils import calculate_hash

FILE_HASH = "1" * 40


@pytest.fixture
def repo(tmp_path):
    repository = Repository(root=tmp_path)
    repository.objects_dir.mkdir(parents=True)
    repository.heads_dir.mkdir(parents=True)
    main = Branch("main")
    repository.branches.append(main)
    repository.current_branch = main
    return repository


def stage(repo, name="a.txt", file_hash=FILE_HASH):
    repo.staged_files.append(StagedFile(name, file_hash))


def test_commit_object_content_and_name(repo):
    stage(repo)
    commit = create_commit(repo, "first", "alice")
    data = (repo.objects_dir / commit.hash).read_bytes()
    assert calculate_hash(data) == commit.hash
    expected = (
        f"parent \nauthor alice\ntime {commit.timestamp}\n"
        f"message first\nfiles\nfile a.txt {FILE_HASH}\n"
    )
    assert data.decode() == expected


def test_commit_updates_branch_and_history(repo):
    stage(repo)
    commit = create_commit(repo, "first", "alice")
    assert repo.current_branch.head is commit
    assert repo.commits[0] is commit
    assert commit.parent is None
    assert commit.parent_hash == ""


def test_commit_clears_staging_and_index(repo):
    stage(repo)
    repo.index_file.write_text("a.txt x 2\n")
    create_commit(repo, "first", "alice")
    assert repo.staged_files == []
    assert not repo.index_file.exists()


def test_second_commit_links_parent(repo):
    stage(repo)
    first = create_commit(repo, "first", "alice")
    stage(repo, "b.txt", "2" * 40)
    second = create_commit(repo, "second", "bob")
    assert second.parent is first
    assert second.parent_hash == first.hash
    assert repo.commits[:2] == [second, first]
    content = (repo.objects_dir / second.hash).read_text()
    assert content.startswith(f"parent {first.hash}\n")


def test_nothing_staged_raises(repo):
    with pytest.raises(BabyGitError, match="No staged files"):
        create_commit(repo, "msg", "alice")
    assert repo.commits == []


def test_missing_message_raises(repo):
    stage(repo)
    with pytest.raises(BabyGitError, match="Invalid parameters"):
        create_commit(repo, None, "alice")


def test_unwritable_objects_dir_raises_and_keeps_staging(repo):
    stage(repo)
    repo.objects_dir.rmdir()
    with pytest.raises(BabyGitError):
        create_commit(repo, "msg", "alice")
    assert len(repo.staged_files) == 1
    assert repo.current_branch.head is None


def test_long_message_and_author_truncated(repo):
    stage(repo)
    commit = create_commit(repo, "m" * 2000, "a" * 600)
    assert commit.message == "m" * 1023
    assert commit.author == "a" * 255


def test_load_commit_round_trip(repo):
    stage(repo)
    first = create_commit(repo, "first", "alice")
    stage(repo)
    second = create_commit(repo, "second message", "bob smith")
    loaded = load_commit(repo.objects_dir, second.hash)
    assert loaded.hash == second.hash
    assert loaded.parent_hash == first.hash
    assert loaded.author == "bob smith"
    assert loaded.message == "second message"
    assert loaded.timestamp == second.timestamp
    assert loaded.parent is None


def test_load_commit_missing_returns_none(repo):
    assert load_commit(repo.objects_dir, "f" * 40) is None


def test_load_commit_reads_merge_object(repo):
    (repo.objects_dir / "m1").write_text(
        "parent abc\nparent2 def\nauthor merge-tool\ntime 42\n"
        "message Merged branch dev\nfiles\nabc a.txt\n"
    )
    loaded = load_commit(repo.objects_dir, "m1")
    assert loaded.parent_hash == "abc"
    assert loaded.author == "merge-tool"
    assert loaded.timestamp == 42
    assert loaded.message == "Merged branch dev"


def test_load_commit_with_empty_parent(repo):
    (repo.objects_dir / "c1").write_text("parent \nauthor x\ntime 7\nmessage hi\nfiles\n")
    loaded = load_commit(repo.objects_dir, "c1")
    assert loaded.parent_hash == ""
    assert loaded.timestamp == 7


def test_find_commit(repo):
    stage(repo)
    commit = create_commit(repo, "first", "alice")
    assert find_commit(repo, commit.hash) is commit
    assert find_commit_by_hash(repo, commit.hash) is commit
    assert find_commit(repo, "0" * 40) is None
    assert find_commit_by_hash(repo, None) is None