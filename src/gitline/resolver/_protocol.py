"""Resolver protocol shared by the resolution strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gitline.repository import RepositoryHandle
    from gitline.resolver._models import BranchIdentity, UpstreamIdentity


@runtime_checkable
class ResolverProtocol(Protocol):
    """Capability contract for resolving HEAD and its upstream.

    DulwichResolver goes through the repository object model,
    MetadataFileResolver parses HEAD, refs and config by hand. Both must
    agree on every repository.

    Example:
        >>> resolver = get_resolver(ResolverKind.FILES)
        >>> branch = resolver.resolve_branch(handle)
        >>> try:
        ...     upstream = resolver.resolve_upstream(handle, branch)
        ... except NoUpstreamConfiguredError:
        ...     upstream = None
    """

    def resolve_branch(self, handle: RepositoryHandle) -> BranchIdentity:
        """Determine what HEAD designates.

        Args:
            handle: Repository to inspect.

        Returns:
            Named, detached, or unborn identity.

        Raises:
            MetadataReadError: If HEAD or a ref cannot be read.
            InvalidEncodingError: If the branch name is not valid UTF-8.
        """
        ...

    def resolve_upstream(
        self, handle: RepositoryHandle, branch: BranchIdentity
    ) -> UpstreamIdentity:
        """Determine the remote-tracking branch of ``branch``.

        Args:
            handle: Repository to inspect.
            branch: Identity returned by resolve_branch().

        Returns:
            The configured upstream.

        Raises:
            NoUpstreamConfiguredError: If ``branch`` is detached or unborn,
                or has no ``remote``/``merge`` configured.
            MetadataReadError: If the config file cannot be read.
            InvalidEncodingError: If a config value is not valid UTF-8.
        """
        ...
