"""Enumeration types for gitline."""

from enum import StrEnum


class BranchKind(StrEnum):
    """State of HEAD."""

    NAMED = "named"
    DETACHED = "detached"
    UNBORN = "unborn"


class UntrackedPolicy(StrEnum):
    """How untracked files contribute to the change counts.

    EXCLUDE skips the directory walk entirely. COLLAPSE counts a wholly
    untracked directory as one entry. ENUMERATE counts every file.
    """

    EXCLUDE = "exclude"
    COLLAPSE = "collapse"
    ENUMERATE = "enumerate"


class ResolverKind(StrEnum):
    """Strategy used to resolve the branch and its upstream."""

    DULWICH = "dulwich"
    FILES = "files"


class ChangeCategory(StrEnum):
    """Change count categories, declared in display order."""

    STAGED = "staged"
    RENAMED = "renamed"
    MODIFIED = "modified"
    DELETED = "deleted"
    UNTRACKED = "untracked"
