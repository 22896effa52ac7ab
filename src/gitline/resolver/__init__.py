"""Branch and upstream resolution.

Two interchangeable strategies implement ResolverProtocol:

Classes:
    DulwichResolver: Goes through dulwich's refs and config objects
        (imported lazily from gitline.resolver._dulwich).
    MetadataFileResolver: Parses HEAD, refs and config files by hand.
    FakeResolver: Returns preset identities, for tests.

Models:
    BranchIdentity: Named, detached, or unborn HEAD.
    UpstreamIdentity: Configured remote-tracking branch.
"""

from gitline.resolver._factory import get_resolver
from gitline.resolver._fake import FakeResolver
from gitline.resolver._files import MetadataFileResolver
from gitline.resolver._models import LOCAL_REMOTE, BranchIdentity, UpstreamIdentity
from gitline.resolver._protocol import ResolverProtocol

__all__ = [
    "LOCAL_REMOTE",
    "BranchIdentity",
    "FakeResolver",
    "MetadataFileResolver",
    "ResolverProtocol",
    "UpstreamIdentity",
    "get_resolver",
]
