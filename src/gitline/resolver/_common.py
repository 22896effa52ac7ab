"""Resolution rules shared by both resolver strategies.

Both strategies reduce the repository state to the same raw inputs (the
chain of symbolic refs followed from HEAD, and the ``remote``/``merge``
config values) and hand them to these functions, so the two can only
differ in how they read the metadata, never in what they conclude.
"""

from collections.abc import Sequence
from typing import Final

from gitline.exceptions import InvalidEncodingError, NoUpstreamConfiguredError
from gitline.resolver._models import BranchIdentity, UpstreamIdentity

BRANCH_PREFIX: Final = b"refs/heads/"
SYMREF_PREFIX: Final = b"ref: "
MAX_SYMREF_DEPTH: Final = 5


def decode_name(value: bytes) -> str:
    """Decode a ref or config value as UTF-8.

    Args:
        value: Raw bytes read from the repository.

    Returns:
        The decoded text.

    Raises:
        InvalidEncodingError: If the value is not valid UTF-8.
    """
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"Name is not valid UTF-8: {value!r}"
        raise InvalidEncodingError(msg, value=value) from e


def strip_branch_prefix(refname: bytes) -> bytes:
    """Strip ``refs/heads/`` from a fully qualified branch ref."""
    if refname.startswith(BRANCH_PREFIX):
        return refname[len(BRANCH_PREFIX) :]
    return refname


def branch_from_chain(refnames: Sequence[bytes], sha: bytes | None) -> BranchIdentity:
    """Classify HEAD from the reference chain followed from it.

    Args:
        refnames: Names visited while following HEAD, starting with
            ``HEAD`` itself.
        sha: Object id the chain ends at, or None if it ends at a
            reference that does not exist.

    Returns:
        Unborn when the chain does not reach an object, named when HEAD
        is a symbolic ref into ``refs/heads/``, detached otherwise.

    Raises:
        InvalidEncodingError: If the branch name is not valid UTF-8.
    """
    if not sha:
        return BranchIdentity.unborn()
    if len(refnames) < 2:  # noqa: PLR2004
        return BranchIdentity.detached()
    target = refnames[1]
    if not target.startswith(BRANCH_PREFIX):
        return BranchIdentity.detached()
    return BranchIdentity.named(decode_name(strip_branch_prefix(target)))


def upstream_from_config(
    branch: BranchIdentity, remote: bytes | None, merge: bytes | None
) -> UpstreamIdentity:
    """Build the upstream identity from ``branch.<name>`` config values.

    Args:
        branch: The current branch.
        remote: Value of ``branch.<name>.remote``, None if unset.
        merge: Value of ``branch.<name>.merge``, None if unset.

    Returns:
        The configured upstream.

    Raises:
        NoUpstreamConfiguredError: If the branch is not named, or either
            value is missing or empty.
        InvalidEncodingError: If either value is not valid UTF-8.
    """
    if not branch.is_named:
        msg = f"No upstream for a {branch.kind} HEAD"
        raise NoUpstreamConfiguredError(msg)
    if not remote or not merge:
        msg = f"No upstream configured for branch {branch.name}"
        raise NoUpstreamConfiguredError(msg, branch=branch.name)
    return UpstreamIdentity(
        remote=decode_name(remote),
        branch=decode_name(strip_branch_prefix(merge)),
    )
