"""Display symbols and branch labels."""

from dataclasses import dataclass, fields
from typing import Final

from gitline.enums import BranchKind, ChangeCategory

# Order in which category tokens appear in the change token
CATEGORY_ORDER: Final[tuple[ChangeCategory, ...]] = (
    ChangeCategory.STAGED,
    ChangeCategory.RENAMED,
    ChangeCategory.MODIFIED,
    ChangeCategory.DELETED,
    ChangeCategory.UNTRACKED,
)


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Glyphs used to render change counts.

    Renamed and modified share ``~`` by default, so ``~1~2`` alone does not
    say which count is which. Give ``renamed`` its own glyph to tell them
    apart.

    Attributes:
        staged: Prefix for the staged count.
        renamed: Prefix for the renamed count.
        modified: Prefix for the modified count.
        deleted: Prefix for the deleted count.
        untracked: Prefix for the untracked count.
        clean: Emitted alone when every count is zero.
        separator: Placed between category tokens.
    """

    staged: str = "^"
    renamed: str = "~"
    modified: str = "~"
    deleted: str = "-"
    untracked: str = "+"
    clean: str = "✓"
    separator: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name != "separator" and not getattr(self, f.name):
                msg = f"Symbol for {f.name} must not be empty"
                raise ValueError(msg)

    def symbol_for(self, category: ChangeCategory) -> str:
        """Glyph for a change category."""
        return getattr(self, category.value)


DEFAULT_SYMBOLS: Final = SymbolTable()


@dataclass(frozen=True, slots=True)
class BranchLabels:
    """Text shown in place of a branch name when HEAD has none.

    Attributes:
        detached: Label for a detached HEAD.
        unborn: Label for a branch with no commits.
    """

    detached: str = "HEAD"
    unborn: str = "(no branch)"

    def label_for(self, kind: BranchKind, name: str | None) -> str:
        match kind:
            case BranchKind.NAMED:
                return name or ""
            case BranchKind.DETACHED:
                return self.detached
            case BranchKind.UNBORN:
                return self.unborn


DEFAULT_LABELS: Final = BranchLabels()
