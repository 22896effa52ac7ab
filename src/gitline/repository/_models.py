# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Repository handle model."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RepositoryHandle:
    """Paths of a discovered repository.

    For a plain checkout ``git_dir`` and ``common_dir`` are the same ``.git``
    directory. For a linked worktree ``git_dir`` is the worktree's private
    metadata directory (holding its own ``HEAD`` and ``index``) while
    ``common_dir`` is the main repository's ``.git`` (holding ``config``,
    ``refs/`` and ``packed-refs``).

    Attributes:
        work_dir: Root of the working tree, or None for a bare repository.
        git_dir: Per-worktree metadata directory.
        common_dir: Metadata directory shared by all worktrees.
    """

    work_dir: Path | None
    git_dir: Path
    common_dir: Path

    @property
    def is_bare(self) -> bool:
        """Whether the repository has no working tree."""
        return self.work_dir is None

    @property
    def head_file(self) -> Path:
        """Path to this worktree's HEAD file."""
        return self.git_dir / "HEAD"

    @property
    def config_file(self) -> Path:
        """Path to the repository config file."""
        return self.common_dir / "config"
