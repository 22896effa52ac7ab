"""Shared test fixtures for gitline tests."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from dulwich.porcelain import add, commit
from dulwich.repo import Repo
from dulwich.worktree import add_worktree

from gitline.enums import ResolverKind
from gitline.repository import RepositoryHandle, locate_repository
from gitline.resolver import ResolverProtocol, get_resolver

AUTHOR = b"Test <test@test.com>"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's config and GITLINE_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("GITLINE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@dataclass(frozen=True, slots=True)
class GitRepo:
    """A real repository built with dulwich.

    Attributes:
        path: Root of the working tree.
    """

    path: Path

    @property
    def git_dir(self) -> Path:
        return self.path / ".git"

    @property
    def handle(self) -> RepositoryHandle:
        return locate_repository(self.path)

    def write(self, relpath: str, content: str = "content\n") -> Path:
        """Write a file in the working tree, creating parent directories."""
        target = self.path / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
        return target

    def stage(self, *relpaths: str) -> None:
        add(str(self.path), paths=list(relpaths))

    def commit(self, message: str = "commit") -> bytes:
        return commit(
            str(self.path),
            message=message.encode(),
            author=AUTHOR,
            committer=AUTHOR,
            sign=False,
        )

    def commit_files(self, files: dict[str, str], message: str = "commit") -> bytes:
        """Write, stage and commit files in one step."""
        for relpath, content in files.items():
            self.write(relpath, content)
        self.stage(*files)
        return self.commit(message)

    def set_head(self, content: str) -> None:
        """Overwrite HEAD verbatim."""
        (self.git_dir / "HEAD").write_text(content)

    def set_upstream(self, branch: str, remote: str, merge: str) -> None:
        """Configure ``branch.<branch>.remote`` and ``.merge``."""
        repo = Repo(str(self.path))
        try:
            config = repo.get_config()
            section = (b"branch", branch.encode())
            config.set(section, b"remote", remote.encode())
            config.set(section, b"merge", merge.encode())
            config.write_to_path()
        finally:
            repo.close()

    def add_worktree(self, path: Path, branch: str) -> GitRepo:
        """Check ``branch`` out in a new linked worktree at ``path``."""
        repo = Repo(str(self.path))
        try:
            add_worktree(repo, str(path), branch=branch).close()
        finally:
            repo.close()
        return GitRepo(path=path.resolve())


def init_repo(path: Path, branch: str = "main") -> GitRepo:
    """Initialize a repository whose HEAD points at ``branch``."""
    path.mkdir(parents=True, exist_ok=True)
    Repo.init(str(path)).close()
    repo = GitRepo(path=path.resolve())
    repo.set_head(f"ref: refs/heads/{branch}\n")
    return repo


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Create an empty repository on an unborn ``main`` branch."""
    return init_repo(tmp_path / "repo")


@pytest.fixture
def committed_repo(git_repo: GitRepo) -> GitRepo:
    """Create a repository on ``main`` with one committed file."""
    git_repo.commit_files({"README.md": "# Test Repository\n"}, "Initial commit")
    return git_repo


@pytest.fixture(params=[ResolverKind.DULWICH, ResolverKind.FILES], ids=str)
def resolver(request: pytest.FixtureRequest) -> ResolverProtocol:
    """Run a test once per resolution strategy."""
    return get_resolver(request.param)


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., GitRepo]:
    """Return a factory creating repositories under ``tmp_path``."""

    def _make(name: str = "repo", branch: str = "main") -> GitRepo:
        return init_repo(tmp_path / name, branch)

    return _make
