from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from dulwich.repo import Repo

from gitline.enums import UntrackedPolicy
from gitline.status._untracked import count_untracked

if TYPE_CHECKING:
    from pathlib import Path

    from tests.conftest import GitRepo

BOTH_POLICIES = pytest.mark.parametrize(
    "policy", [UntrackedPolicy.COLLAPSE, UntrackedPolicy.ENUMERATE], ids=str
)


def _touch(root: Path, *relpaths: str) -> None:
    for relpath in relpaths:
        target = root / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_text("x\n")


def _exclude(repo: GitRepo, *patterns: str) -> None:
    exclude = repo.git_dir / "info" / "exclude"
    exclude.parent.mkdir(exist_ok=True)
    _ = exclude.write_text("".join(f"{pattern}\n" for pattern in patterns))


def _count(
    repo: GitRepo, policy: UntrackedPolicy, tracked: tuple[str, ...] = ()
) -> int:
    return count_untracked(repo.path, {path.encode() for path in tracked}, policy)


class TestCountUntracked:
    def test_exclude_policy_rejected(self, git_repo: GitRepo) -> None:
        with pytest.raises(ValueError, match="exclude"):
            _ = _count(git_repo, UntrackedPolicy.EXCLUDE)

    @BOTH_POLICIES
    def test_counts_untracked_files(
        self, git_repo: GitRepo, policy: UntrackedPolicy
    ) -> None:
        _touch(git_repo.path, "a.txt", "b.txt", "tracked.txt")

        assert _count(git_repo, policy, ("tracked.txt",)) == 2

    @BOTH_POLICIES
    def test_metadata_directory_never_counts(
        self, git_repo: GitRepo, policy: UntrackedPolicy
    ) -> None:
        assert _count(git_repo, policy) == 0

    def test_collapse_counts_untracked_directory_once(self, git_repo: GitRepo) -> None:
        _touch(git_repo.path, "build/a.o", "build/b.o", "build/sub/c.o")

        assert _count(git_repo, UntrackedPolicy.COLLAPSE) == 1

    def test_enumerate_counts_every_file(self, git_repo: GitRepo) -> None:
        _touch(git_repo.path, "build/a.o", "build/b.o", "build/sub/c.o")

        assert _count(git_repo, UntrackedPolicy.ENUMERATE) == 3

    @BOTH_POLICIES
    def test_empty_directories_never_count(
        self, git_repo: GitRepo, policy: UntrackedPolicy
    ) -> None:
        (git_repo.path / "empty" / "nested").mkdir(parents=True)

        assert _count(git_repo, policy) == 0

    def test_descends_into_directories_with_tracked_files(
        self, git_repo: GitRepo
    ) -> None:
        _touch(git_repo.path, "src/main.py", "src/new.py", "src/gen/out.py")

        count = _count(git_repo, UntrackedPolicy.COLLAPSE, ("src/main.py",))

        # src/new.py plus the collapsed src/gen
        assert count == 2

    def test_ignored_files_do_not_count(self, git_repo: GitRepo) -> None:
        _exclude(git_repo, "*.log")
        _touch(git_repo.path, "app.log", "notes.txt")

        assert _count(git_repo, UntrackedPolicy.ENUMERATE) == 1

    @BOTH_POLICIES
    def test_ignored_directories_do_not_count(
        self, git_repo: GitRepo, policy: UntrackedPolicy
    ) -> None:
        _exclude(git_repo, "node_modules/")
        _touch(git_repo.path, "node_modules/pkg/index.js")

        assert _count(git_repo, policy) == 0

    def test_collapse_skips_directory_holding_only_ignored_files(
        self, git_repo: GitRepo
    ) -> None:
        _exclude(git_repo, "*.pyc")
        _touch(git_repo.path, "cache/a.pyc", "cache/deep/b.pyc")

        assert _count(git_repo, UntrackedPolicy.COLLAPSE) == 0


class TestNestedRepositories:
    @pytest.fixture
    def vendor(self, git_repo: GitRepo) -> Path:
        """Create ``vendor/lib``, a repository of its own."""
        lib = git_repo.path / "vendor" / "lib"
        lib.mkdir(parents=True)
        Repo.init(str(lib)).close()
        _touch(git_repo.path, "vendor/README", "vendor/lib/a.c", "vendor/lib/src/b.c")
        return lib

    @pytest.mark.usefixtures("vendor")
    def test_collapse_counts_nested_repository_once(self, git_repo: GitRepo) -> None:
        count = _count(git_repo, UntrackedPolicy.COLLAPSE, ("vendor/README",))

        assert count == 1

    @pytest.mark.usefixtures("vendor")
    def test_collapse_counts_untracked_parent_once(self, git_repo: GitRepo) -> None:
        assert _count(git_repo, UntrackedPolicy.COLLAPSE) == 1

    @pytest.mark.usefixtures("vendor")
    def test_enumerate_leaves_out_nested_repository_files(
        self, git_repo: GitRepo
    ) -> None:
        _touch(git_repo.path, "vendor/new.txt")

        count = _count(git_repo, UntrackedPolicy.ENUMERATE, ("vendor/README",))

        assert count == 1

    @BOTH_POLICIES
    def test_submodule_never_counts(
        self, git_repo: GitRepo, policy: UntrackedPolicy
    ) -> None:
        _touch(git_repo.path, "sub/a.c", "sub/src/b.c")
        _ = (git_repo.path / "sub" / ".git").write_text(
            "gitdir: ../.git/modules/sub\n"
        )

        assert _count(git_repo, policy, ("sub",)) == 0
