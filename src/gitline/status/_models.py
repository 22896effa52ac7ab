"""Change count and status report models."""

from __future__ import annotations

from dataclasses import astuple, dataclass, field, fields
from typing import TYPE_CHECKING, Self

from gitline.enums import ChangeCategory

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gitline.resolver import BranchIdentity, UpstreamIdentity


@dataclass(frozen=True, slots=True)
class ChangeCounts:
    """Number of paths in each change category.

    Counts start at zero and only grow: two passes combine with ``+``.

    Attributes:
        staged: Paths whose index entry differs from the HEAD tree.
        renamed: Intent-to-add paths whose content matches another tracked
            path.
        modified: Tracked paths whose content or type differs on disk.
        deleted: Tracked paths missing from disk.
        untracked: Untracked files, or wholly untracked directories when
            collapsed.
    """

    staged: int = 0
    renamed: int = 0
    modified: int = 0
    deleted: int = 0
    untracked: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or value < 0:
                msg = f"{f.name} must be a non-negative integer, got {value!r}"
                raise ValueError(msg)

    def __add__(self, other: ChangeCounts) -> ChangeCounts:
        if not isinstance(other, ChangeCounts):
            return NotImplemented
        return ChangeCounts(
            *(a + b for a, b in zip(astuple(self), astuple(other), strict=True))
        )

    @property
    def is_clean(self) -> bool:
        """Whether every category is zero."""
        return not any(astuple(self))

    def get(self, category: ChangeCategory) -> int:
        """Count for a single category."""
        return getattr(self, category.value)

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by category name, in display order."""
        return {category.value: self.get(category) for category in ChangeCategory}

    @classmethod
    def from_mapping(cls, counts: Mapping[ChangeCategory | str, int]) -> Self:
        """Build counts from a category mapping; missing categories are zero.

        Raises:
            ValueError: If a key is not a category or a count is negative.
        """
        values = {ChangeCategory(key).value: value for key, value in counts.items()}
        return cls(**values)


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Everything the summary line is rendered from.

    Attributes:
        branch: What HEAD designates, or None when the branch could not be
            resolved to text.
        upstream: Configured remote-tracking branch, None if there is none.
        changes: Combined counts of both comparison passes.
    """

    branch: BranchIdentity | None
    upstream: UpstreamIdentity | None = None
    changes: ChangeCounts = field(default_factory=ChangeCounts)
