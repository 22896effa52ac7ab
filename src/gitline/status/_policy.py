"""Untracked-file policy resolution.

The explicit mode flag beats the generic show-all flag, which beats the
configured default. The precedence is a literal table over the four flag
combinations rather than nested conditionals.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from gitline.enums import UntrackedPolicy


class _PolicySource(StrEnum):
    DEFAULT = "default"
    SHOW_ALL = "show_all"
    MODE = "mode"


# (mode flag given, show-all flag set) -> where the policy comes from
POLICY_PRECEDENCE: Final[dict[tuple[bool, bool], _PolicySource]] = {
    (False, False): _PolicySource.DEFAULT,
    (False, True): _PolicySource.SHOW_ALL,
    (True, False): _PolicySource.MODE,
    (True, True): _PolicySource.MODE,
}

_MODE_ALIASES: Final[dict[str, UntrackedPolicy]] = {
    "none": UntrackedPolicy.EXCLUDE,
    "no": UntrackedPolicy.EXCLUDE,
    "exclude": UntrackedPolicy.EXCLUDE,
    "collapse-directories": UntrackedPolicy.COLLAPSE,
    "normal": UntrackedPolicy.COLLAPSE,
    "collapse": UntrackedPolicy.COLLAPSE,
    "enumerate-all": UntrackedPolicy.ENUMERATE,
    "all": UntrackedPolicy.ENUMERATE,
    "enumerate": UntrackedPolicy.ENUMERATE,
}

UNTRACKED_MODE_CHOICES: Final = ("none", "collapse-directories", "enumerate-all")


def parse_untracked_mode(value: str) -> UntrackedPolicy:
    """Parse an untracked-files mode name.

    Accepts ``none``, ``collapse-directories`` and ``enumerate-all`` along
    with git's ``no``, ``normal`` and ``all`` spellings.

    Args:
        value: Mode name, case-insensitive.

    Returns:
        The matching policy.

    Raises:
        ValueError: If the name is not recognised.
    """
    try:
        return _MODE_ALIASES[value.strip().lower()]
    except KeyError:
        choices = ", ".join(UNTRACKED_MODE_CHOICES)
        msg = f"Unknown untracked-files mode {value!r} (expected one of: {choices})"
        raise ValueError(msg) from None


def resolve_untracked_policy(
    mode: UntrackedPolicy | None,
    *,
    show_all: bool = False,
    default: UntrackedPolicy = UntrackedPolicy.EXCLUDE,
) -> UntrackedPolicy:
    """Pick the effective untracked policy from the CLI flags.

    Args:
        mode: Policy named by the explicit mode flag, None if not given.
        show_all: Whether the show-all flag was set.
        default: Policy used when neither flag is given.

    Returns:
        The effective policy.
    """
    match POLICY_PRECEDENCE[(mode is not None, show_all)]:
        case _PolicySource.MODE if mode is not None:
            return mode
        case _PolicySource.SHOW_ALL:
            return UntrackedPolicy.ENUMERATE
        case _:
            return default
