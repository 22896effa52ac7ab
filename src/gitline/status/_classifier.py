"""Working tree change classification.

Two independent passes compare the three states of a repository:

1. Staged pass: HEAD tree against the index. Every differing path counts
   once as staged, whatever the kind of difference.
2. Working-tree pass: index against the filesystem. Tracked paths are
   classified modified, deleted or renamed; untracked files are counted
   only when the policy asks for them.

A pass that fails to read what it needs contributes zero counts and logs
the failure; the other pass still runs.
"""

from __future__ import annotations

import os
import stat
import struct
import time
from collections import defaultdict
from enum import Enum, auto
from typing import TYPE_CHECKING, Final

from dulwich.errors import ChecksumMismatch, NoIndexPresent, ObjectFormatException
from dulwich.index import (
    EXTENDED_FLAG_INTEND_TO_ADD,
    EXTENDED_FLAG_SKIP_WORKTREE,
    IndexEntry,
    UnsupportedIndexFormat,
    blob_from_path_and_stat,
    cleanup_mode,
)
from dulwich.object_store import iter_tree_contents
from dulwich.objects import Commit, S_ISGITLINK

from gitline.enums import UntrackedPolicy
from gitline.exceptions import MetadataReadError
from gitline.resolver._dulwich import open_repo
from gitline.status._models import ChangeCounts
from gitline.status._untracked import count_untracked
from gitline.utils import get_null_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from dulwich.index import ConflictedIndexEntry
    from dulwich.repo import Repo
    from structlog.typing import FilteringBoundLogger

    from gitline.repository import RepositoryHandle

    IndexEntries = Mapping[bytes, IndexEntry | ConflictedIndexEntry]

# Failures that leave a pass without usable input
_PASS_ERRORS: Final = (
    OSError,
    KeyError,
    ValueError,
    MetadataReadError,
    ChecksumMismatch,
    ObjectFormatException,
)

# Index sizes are stored truncated to 32 bits
_SIZE_MASK: Final = 0xFFFFFFFF
_NS_PER_SECOND: Final = 1_000_000_000


class _EntryState(Enum):
    CLEAN = auto()
    MODIFIED = auto()
    DELETED = auto()


def _read_index(repo: Repo, handle: RepositoryHandle) -> IndexEntries:
    """Read every index entry, keyed by path.

    A repository without an index file (fresh, or bare) has no entries.

    Raises:
        MetadataReadError: If the index exists but cannot be parsed.
    """
    try:
        index = repo.open_index()
    except NoIndexPresent:
        return {}
    # dulwich reports a bad header with AssertionError and truncation with
    # struct.error
    except (
        OSError,
        ValueError,
        AssertionError,
        struct.error,
        UnsupportedIndexFormat,
        ChecksumMismatch,
    ) as e:
        msg = f"Unable to read index: {e}"
        raise MetadataReadError(msg, path=handle.git_dir / "index") from e
    return dict(index.items())


def _is_intent_to_add(entry: IndexEntry) -> bool:
    return bool(entry.extended_flags & EXTENDED_FLAG_INTEND_TO_ADD)


def _is_skip_worktree(entry: IndexEntry) -> bool:
    return bool(entry.extended_flags & EXTENDED_FLAG_SKIP_WORKTREE)


def _head_tree(repo: Repo) -> dict[bytes, tuple[int, bytes]] | None:
    """Map each path in the HEAD tree to its ``(mode, sha)``.

    Returns:
        The tree contents, or None if HEAD has no commit yet.

    Raises:
        MetadataReadError: If HEAD does not point at a commit.
    """
    try:
        head_sha = repo.head()
    except KeyError:
        return None

    commit = repo[head_sha]
    if not isinstance(commit, Commit):
        msg = f"HEAD points at a {commit.type_name.decode()} object, not a commit"
        raise MetadataReadError(msg)

    return {
        entry.path: (entry.mode, entry.sha)
        for entry in iter_tree_contents(repo.object_store, commit.tree)
        if entry.path is not None
        and entry.mode is not None
        and entry.sha is not None
        and not S_ISGITLINK(entry.mode)
    }


def count_staged(repo: Repo, entries: IndexEntries) -> ChangeCounts:
    """Compare the HEAD tree with the index.

    Additions, deletions, mode and content changes all count as one staged
    path each. A conflicted path counts once. Submodules are ignored. An
    unborn HEAD has nothing to compare against and yields zero.
    """
    tree = _head_tree(repo)
    if tree is None:
        return ChangeCounts()

    staged = 0
    for path, entry in entries.items():
        committed = tree.pop(path, None)
        if not isinstance(entry, IndexEntry):
            staged += 1
            continue
        if S_ISGITLINK(entry.mode):
            continue
        if committed != (entry.mode, entry.sha):
            staged += 1

    # Whatever is left in the tree was removed from the index
    return ChangeCounts(staged=staged + len(tree))


def _fs_path(root: bytes, tree_path: bytes) -> bytes:
    return os.path.join(root, *tree_path.split(b"/"))


def _stat_matches(entry: IndexEntry, st: os.stat_result, index_mtime_ns: int) -> bool:
    """Trust cached stat data when it matches and the entry is not racy.

    An entry written in the same second as the index could have been
    modified again without its mtime changing, so it must be hashed.
    """
    mtime = entry.mtime
    if isinstance(mtime, tuple):
        seconds, nanoseconds = mtime
    else:
        seconds, nanoseconds = int(mtime), 0
    entry_mtime_ns = seconds * _NS_PER_SECOND + nanoseconds
    if seconds >= index_mtime_ns // _NS_PER_SECOND:
        return False
    return st.st_mtime_ns == entry_mtime_ns and (st.st_size & _SIZE_MASK) == entry.size


def _entry_state(
    fs_path: bytes, entry: IndexEntry, index_mtime_ns: int
) -> _EntryState:
    try:
        st = os.lstat(fs_path)
    except (FileNotFoundError, NotADirectoryError):
        return _EntryState.DELETED

    if cleanup_mode(st.st_mode) != entry.mode:
        return _EntryState.MODIFIED
    if stat.S_ISREG(st.st_mode):
        if (st.st_size & _SIZE_MASK) != entry.size:
            return _EntryState.MODIFIED
        if _stat_matches(entry, st, index_mtime_ns):
            return _EntryState.CLEAN

    blob = blob_from_path_and_stat(fs_path, st)
    return _EntryState.CLEAN if blob.id == entry.sha else _EntryState.MODIFIED


def _disk_blob_id(fs_path: bytes) -> bytes | None:
    """Hash a file on disk, None if it is missing, a directory, or empty."""
    try:
        st = os.lstat(fs_path)
    except (FileNotFoundError, NotADirectoryError):
        return None
    if not (stat.S_ISREG(st.st_mode) or stat.S_ISLNK(st.st_mode)) or st.st_size == 0:
        return None
    return blob_from_path_and_stat(fs_path, st).id


def _index_mtime_ns(handle: RepositoryHandle) -> int:
    try:
        return os.stat(handle.git_dir / "index").st_mtime_ns
    except FileNotFoundError:
        return 0


def count_worktree(
    handle: RepositoryHandle,
    entries: IndexEntries,
    policy: UntrackedPolicy,
    *,
    logger: FilteringBoundLogger,
) -> ChangeCounts:
    """Compare the index with the working tree.

    Tracked paths missing from disk are deleted; paths whose type,
    executable bit or content differ are modified. Intent-to-add paths are
    left to the staged pass, except that one whose content equals the blob
    of another tracked path counts as renamed (withdrawing that path's
    deleted count when the source is gone). Skip-worktree entries,
    conflicted entries and submodules are ignored.

    Untracked entries are counted only under COLLAPSE and ENUMERATE; under
    EXCLUDE the directory walk never starts.
    """
    if handle.work_dir is None:
        logger.debug("worktree_pass_skipped", reason="bare")
        return ChangeCounts()

    root = os.fsencode(handle.work_dir)
    index_mtime_ns = _index_mtime_ns(handle)

    modified = 0
    deleted_by_sha: defaultdict[bytes, int] = defaultdict(int)
    present_shas: set[bytes] = set()
    intent_to_add: list[bytes] = []

    for path, entry in entries.items():
        if not isinstance(entry, IndexEntry):
            continue
        if S_ISGITLINK(entry.mode) or _is_skip_worktree(entry):
            continue
        if _is_intent_to_add(entry):
            intent_to_add.append(path)
            continue

        state = _entry_state(_fs_path(root, path), entry, index_mtime_ns)
        if state is _EntryState.DELETED:
            deleted_by_sha[entry.sha] += 1
        elif state is _EntryState.MODIFIED:
            modified += 1
        else:
            present_shas.add(entry.sha)

    renamed = 0
    for path in intent_to_add:
        blob_id = _disk_blob_id(_fs_path(root, path))
        if blob_id is None:
            continue
        if deleted_by_sha.get(blob_id, 0) > 0:
            deleted_by_sha[blob_id] -= 1
            renamed += 1
        elif blob_id in present_shas:
            renamed += 1

    untracked = 0
    if policy is not UntrackedPolicy.EXCLUDE:
        untracked = count_untracked(handle.work_dir, entries.keys(), policy)

    return ChangeCounts(
        renamed=renamed,
        modified=modified,
        deleted=sum(deleted_by_sha.values()),
        untracked=untracked,
    )


def _run_pass(
    name: str,
    func: Callable[[], ChangeCounts],
    logger: FilteringBoundLogger,
) -> ChangeCounts:
    started = time.perf_counter()
    try:
        counts = func()
    except _PASS_ERRORS as e:
        logger.warning("pass_failed", pass_name=name, error=str(e), exc_info=True)
        return ChangeCounts()
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.debug(
        "pass_complete",
        pass_name=name,
        elapsed_ms=round(elapsed_ms, 3),
        **counts.as_dict(),
    )
    return counts


def classify_changes(
    handle: RepositoryHandle,
    policy: UntrackedPolicy = UntrackedPolicy.EXCLUDE,
    *,
    logger: FilteringBoundLogger | None = None,
) -> ChangeCounts:
    """Count staged, renamed, modified, deleted and untracked paths.

    Args:
        handle: Repository to classify.
        policy: Whether and how untracked files are counted.
        logger: Receives pass timings and swallowed failures.

    Returns:
        The sum of the staged and working-tree passes. A pass that fails
        contributes zero; an unreadable index zeroes both.

    Raises:
        NotARepositoryError: If dulwich cannot open the repository.
    """
    log = logger if logger is not None else get_null_logger()
    repo = open_repo(handle)
    try:
        try:
            entries = _read_index(repo, handle)
        except MetadataReadError as e:
            log.warning("index_unreadable", path=str(e.path), error=str(e))
            return ChangeCounts()

        staged = _run_pass("staged", lambda: count_staged(repo, entries), log)
        worktree = _run_pass(
            "worktree",
            lambda: count_worktree(handle, entries, policy, logger=log),
            log,
        )
    finally:
        repo.close()
    return staged + worktree
