"""Resolver backed by dulwich's repository object model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dulwich.errors import NotGitRepository
from dulwich.refs import SymrefLoop
from dulwich.repo import Repo

from gitline.exceptions import (
    MetadataReadError,
    NoUpstreamConfiguredError,
    NotARepositoryError,
)
from gitline.resolver._common import branch_from_chain, upstream_from_config

if TYPE_CHECKING:
    from dulwich.config import ConfigFile

    from gitline.repository import RepositoryHandle
    from gitline.resolver._models import BranchIdentity, UpstreamIdentity


def open_repo(handle: RepositoryHandle) -> Repo:
    """Open the dulwich repository for a handle.

    Args:
        handle: Repository located by locate_repository().

    Returns:
        An open Repo. Callers must close it.

    Raises:
        NotARepositoryError: If dulwich does not recognise the directory.
    """
    root = handle.work_dir if handle.work_dir is not None else handle.git_dir
    try:
        return Repo(str(root))
    except NotGitRepository as e:
        msg = f"Not a git repository: {root}"
        raise NotARepositoryError(msg, path=root) from e


def _config_value(
    config: ConfigFile, section: tuple[bytes, bytes], name: bytes
) -> bytes | None:
    try:
        return config.get(section, name)
    except KeyError:
        return None


class DulwichResolver:
    """Resolve branch and upstream through dulwich refs and config."""

    __slots__ = ()

    def resolve_branch(self, handle: RepositoryHandle) -> BranchIdentity:
        repo = open_repo(handle)
        try:
            refnames, sha = repo.refs.follow(b"HEAD")  # pyright: ignore[reportArgumentType]
        except SymrefLoop as e:
            msg = f"Symbolic ref loop following HEAD: {e}"
            raise MetadataReadError(msg, path=handle.head_file) from e
        except OSError as e:
            msg = f"Unable to read HEAD: {e}"
            raise MetadataReadError(msg, path=handle.head_file) from e
        finally:
            repo.close()
        return branch_from_chain(refnames, sha)

    def resolve_upstream(
        self, handle: RepositoryHandle, branch: BranchIdentity
    ) -> UpstreamIdentity:
        if not branch.is_named or branch.name is None:
            msg = f"No upstream for a {branch.kind} HEAD"
            raise NoUpstreamConfiguredError(msg)

        repo = open_repo(handle)
        try:
            config = repo.get_config()
        except OSError as e:
            msg = f"Unable to read config: {e}"
            raise MetadataReadError(msg, path=handle.config_file) from e
        finally:
            repo.close()

        section = (b"branch", branch.name.encode("utf-8"))
        return upstream_from_config(
            branch,
            _config_value(config, section, b"remote"),
            _config_value(config, section, b"merge"),
        )

    def __repr__(self) -> str:
        return "DulwichResolver()"
