"""Branch and upstream identity models."""

from dataclasses import dataclass
from typing import Final, Self

from gitline.enums import BranchKind

# Remote name git uses when a branch tracks another local branch
LOCAL_REMOTE: Final = "."


@dataclass(frozen=True, slots=True)
class BranchIdentity:
    """What HEAD currently designates.

    Exactly one kind holds. ``name`` is set only for named branches and
    never carries the ``refs/heads/`` prefix.

    Attributes:
        kind: Whether HEAD names a branch, points at a commit, or is unborn.
        name: Short branch name for named branches, None otherwise.
    """

    kind: BranchKind
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is BranchKind.NAMED) != (self.name is not None):
            msg = f"Branch name must be set exactly for named branches: {self!r}"
            raise ValueError(msg)

    @classmethod
    def named(cls, name: str) -> Self:
        """Create a named branch identity."""
        return cls(kind=BranchKind.NAMED, name=name)

    @classmethod
    def detached(cls) -> Self:
        """Create a detached HEAD identity."""
        return cls(kind=BranchKind.DETACHED)

    @classmethod
    def unborn(cls) -> Self:
        """Create an unborn branch identity."""
        return cls(kind=BranchKind.UNBORN)

    @property
    def is_named(self) -> bool:
        return self.kind is BranchKind.NAMED


@dataclass(frozen=True, slots=True)
class UpstreamIdentity:
    """Remote-tracking branch configured for a local branch.

    Attributes:
        remote: Remote name from ``branch.<name>.remote``.
        branch: Upstream branch name from ``branch.<name>.merge`` with the
            ``refs/heads/`` prefix removed.
    """

    remote: str
    branch: str

    @property
    def display(self) -> str:
        """Short display form, ``<remote>/<branch>``.

        A branch tracking another local branch (remote ``.``) displays as
        the bare branch name, the way git itself shows it.
        """
        if self.remote == LOCAL_REMOTE:
            return self.branch
        return f"{self.remote}/{self.branch}"
