"""Fake resolver for testing.

This module provides a FakeResolver that implements ResolverProtocol
without touching the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitline.exceptions import GitlineError, NoUpstreamConfiguredError
from gitline.resolver._models import BranchIdentity, UpstreamIdentity

if TYPE_CHECKING:
    from gitline.repository import RepositoryHandle


@dataclass(slots=True)
class FakeResolver:
    """Resolver returning preset identities.

    Example:
        >>> git_dir = Path("/work/.git")
        >>> handle = RepositoryHandle(Path("/work"), git_dir, git_dir)
        >>> resolver = FakeResolver(branch=BranchIdentity.named("main"))
        >>> resolver.upstream = UpstreamIdentity("origin", "main")
        >>> resolver.resolve_upstream(handle, resolver.branch).display
        'origin/main'
    """

    branch: BranchIdentity = field(default_factory=lambda: BranchIdentity.named("main"))
    upstream: UpstreamIdentity | None = None
    branch_error: GitlineError | None = None
    upstream_error: GitlineError | None = None
    calls: list[str] = field(default_factory=list)

    def resolve_branch(self, handle: RepositoryHandle) -> BranchIdentity:
        self.calls.append("resolve_branch")
        if self.branch_error is not None:
            raise self.branch_error
        return self.branch

    def resolve_upstream(
        self, handle: RepositoryHandle, branch: BranchIdentity
    ) -> UpstreamIdentity:
        self.calls.append("resolve_upstream")
        if self.upstream_error is not None:
            raise self.upstream_error
        if not branch.is_named or self.upstream is None:
            msg = f"No upstream configured for {branch}"
            raise NoUpstreamConfiguredError(msg, branch=branch.name)
        return self.upstream
