"""Fast-path resolver reading HEAD, refs and config directly.

Prompt rendering runs on every keystroke-return, so this strategy avoids
loading the object model. It reads at most a handful of small files:
``HEAD``, the loose ref or ``packed-refs`` it points to, and ``config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitline.exceptions import MetadataReadError, NoUpstreamConfiguredError
from gitline.repository import read_metadata_file, read_ref
from gitline.resolver._common import (
    MAX_SYMREF_DEPTH,
    SYMREF_PREFIX,
    branch_from_chain,
    upstream_from_config,
)
from gitline.resolver._config_scan import read_config_section

if TYPE_CHECKING:
    from gitline.repository import RepositoryHandle
    from gitline.resolver._models import BranchIdentity, UpstreamIdentity


def _follow_head(handle: RepositoryHandle) -> tuple[list[bytes], bytes | None]:
    """Follow HEAD through symbolic refs.

    Returns:
        The names visited, starting with ``HEAD``, and the object id the
        chain ends at (None when it ends at a missing ref).

    Raises:
        MetadataReadError: If the chain is longer than git allows.
    """
    refnames: list[bytes] = []
    name = b"HEAD"
    for _ in range(MAX_SYMREF_DEPTH + 1):
        refnames.append(name)
        contents = read_ref(handle, name)
        if not contents:
            return refnames, None
        if not contents.startswith(SYMREF_PREFIX):
            return refnames, contents
        name = contents[len(SYMREF_PREFIX) :].strip()
    msg = f"Symbolic ref loop following HEAD: {b' -> '.join(refnames)!r}"
    raise MetadataReadError(msg, path=handle.head_file)


class MetadataFileResolver:
    """Resolve branch and upstream by parsing metadata files by hand."""

    __slots__ = ()

    def resolve_branch(self, handle: RepositoryHandle) -> BranchIdentity:
        refnames, sha = _follow_head(handle)
        return branch_from_chain(refnames, sha)

    def resolve_upstream(
        self, handle: RepositoryHandle, branch: BranchIdentity
    ) -> UpstreamIdentity:
        if not branch.is_named or branch.name is None:
            msg = f"No upstream for a {branch.kind} HEAD"
            raise NoUpstreamConfiguredError(msg)

        data = read_metadata_file(handle.config_file)
        if data is None:
            msg = f"No config file at {handle.config_file}"
            raise NoUpstreamConfiguredError(msg, branch=branch.name)

        values = read_config_section(data, b"branch", branch.name.encode("utf-8"))
        return upstream_from_config(branch, values.get(b"remote"), values.get(b"merge"))

    def __repr__(self) -> str:
        return "MetadataFileResolver()"
