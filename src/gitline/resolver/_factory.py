"""Resolver strategy selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitline.enums import ResolverKind

if TYPE_CHECKING:
    from gitline.resolver._protocol import ResolverProtocol


def get_resolver(kind: ResolverKind | str) -> ResolverProtocol:
    """Return the resolver strategy for ``kind``.

    The dulwich strategy is imported lazily so the fast path never pays
    for loading the object model.

    Args:
        kind: Strategy name.

    Returns:
        A resolver instance.

    Raises:
        ValueError: If ``kind`` is not a known strategy.
    """
    match ResolverKind(kind):
        case ResolverKind.FILES:
            from gitline.resolver._files import MetadataFileResolver

            return MetadataFileResolver()
        case ResolverKind.DULWICH:
            from gitline.resolver._dulwich import DulwichResolver

            return DulwichResolver()
