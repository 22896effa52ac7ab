"""Status report assembly."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitline.enums import UntrackedPolicy
from gitline.exceptions import (
    GitlineError,
    InvalidEncodingError,
    MetadataReadError,
    NoUpstreamConfiguredError,
)
from gitline.status._classifier import classify_changes
from gitline.status._models import StatusReport
from gitline.utils import get_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitline.repository import RepositoryHandle
    from gitline.resolver import BranchIdentity, ResolverProtocol, UpstreamIdentity


def _resolve_branch(
    handle: RepositoryHandle, resolver: ResolverProtocol, logger: FilteringBoundLogger
) -> BranchIdentity | None:
    try:
        return resolver.resolve_branch(handle)
    except (InvalidEncodingError, MetadataReadError) as e:
        logger.warning("branch_unresolved", error=str(e))
        return None


def _resolve_upstream(
    handle: RepositoryHandle,
    resolver: ResolverProtocol,
    branch: BranchIdentity,
    logger: FilteringBoundLogger,
) -> UpstreamIdentity | None:
    try:
        return resolver.resolve_upstream(handle, branch)
    except NoUpstreamConfiguredError as e:
        logger.debug("no_upstream", branch=e.branch)
        return None
    except GitlineError as e:
        logger.warning("upstream_unresolved", error=str(e))
        return None


def collect_status(
    handle: RepositoryHandle,
    resolver: ResolverProtocol,
    policy: UntrackedPolicy = UntrackedPolicy.EXCLUDE,
    *,
    logger: FilteringBoundLogger | None = None,
) -> StatusReport:
    """Gather branch, upstream and change counts for one repository.

    Resolution failures degrade the report instead of failing it: a branch
    that cannot be read is reported as None and its upstream is skipped,
    and a missing upstream is simply absent.

    Args:
        handle: Repository to report on.
        resolver: Strategy for branch and upstream resolution.
        policy: Untracked-file policy for classification.
        logger: Logger for degraded results and timings.

    Returns:
        The assembled report.
    """
    log = logger if logger is not None else get_null_logger()

    branch = _resolve_branch(handle, resolver, log)
    upstream = (
        _resolve_upstream(handle, resolver, branch, log) if branch is not None else None
    )
    changes = classify_changes(handle, policy, logger=log)

    log.debug(
        "status_collected",
        branch=branch.name if branch is not None else None,
        upstream=upstream.display if upstream is not None else None,
        clean=changes.is_clean,
    )
    return StatusReport(branch=branch, upstream=upstream, changes=changes)
