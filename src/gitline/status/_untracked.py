"""Untracked file counting.

Discovery is delegated to ``dulwich.porcelain.get_untracked_paths``, which
honors the repository's ignore rules and never walks ignored directories.
What it reports is then filtered so that the contents of nested
repositories and submodules never count as files of this one.
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import TYPE_CHECKING, Final

from dulwich.porcelain import get_untracked_paths

from gitline.enums import UntrackedPolicy

if TYPE_CHECKING:
    from collections.abc import Collection
    from pathlib import Path

_DOT_GIT: Final = ".git"

# dulwich's names for the untracked-files modes
_DULWICH_MODES: Final = {
    UntrackedPolicy.COLLAPSE: "normal",
    UntrackedPolicy.ENUMERATE: "all",
}


class _NestedRepositories:
    """Remembers which directories below the work tree hold a ``.git``."""

    def __init__(self, work_dir: Path) -> None:
        self._work_dir = work_dir
        self._seen: dict[PurePath, bool] = {}

    def _is_repository(self, relative: PurePath) -> bool:
        found = self._seen.get(relative)
        if found is None:
            found = os.path.lexists(self._work_dir / relative / _DOT_GIT)
            self._seen[relative] = found
        return found

    def contains(self, relative: PurePath) -> bool:
        """Check whether a directory above ``relative`` is a repository."""
        return any(self._is_repository(parent) for parent in relative.parents[:-1])


def count_untracked(
    work_dir: Path,
    index: Collection[bytes],
    policy: UntrackedPolicy,
) -> int:
    """Count untracked entries under a working tree.

    Under ``COLLAPSE`` a directory holding no tracked path counts once,
    provided it contains a file that is not ignored; a nested repository
    is such a directory. Under ``ENUMERATE`` every untracked file counts,
    and files inside nested repositories are left out. Submodules never
    count. Empty directories never count.

    Args:
        work_dir: Root of the working tree.
        index: Index paths, ``/``-separated and relative to ``work_dir``.
        policy: COLLAPSE or ENUMERATE.

    Returns:
        The number of untracked entries.

    Raises:
        ValueError: If ``policy`` is EXCLUDE.
    """
    mode = _DULWICH_MODES.get(policy)
    if mode is None:
        msg = "The untracked walk does not run under the exclude policy"
        raise ValueError(msg)

    nested = _NestedRepositories(work_dir)
    count = 0
    for found in get_untracked_paths(
        work_dir,
        work_dir,
        index,  # pyright: ignore[reportArgumentType]
        exclude_ignored=True,
        untracked_files=mode,
    ):
        relative = PurePath(found)
        if os.fsencode(relative.as_posix()) in index or nested.contains(relative):
            continue
        count += 1
    return count

