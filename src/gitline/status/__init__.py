"""Working tree status.

Functions:
    classify_changes: Count staged, renamed, modified, deleted and
        untracked paths.
    collect_status: Assemble branch, upstream and counts into a report.
    parse_untracked_mode: Parse an untracked-files mode name.
    resolve_untracked_policy: Apply flag precedence to pick a policy.

Models:
    ChangeCounts: Per-category path counts.
    StatusReport: Input of the summary formatter.
"""

from gitline.status._classifier import classify_changes
from gitline.status._models import ChangeCounts, StatusReport
from gitline.status._policy import (
    POLICY_PRECEDENCE,
    UNTRACKED_MODE_CHOICES,
    parse_untracked_mode,
    resolve_untracked_policy,
)
from gitline.status._report import collect_status

__all__ = [
    "POLICY_PRECEDENCE",
    "UNTRACKED_MODE_CHOICES",
    "ChangeCounts",
    "StatusReport",
    "classify_changes",
    "collect_status",
    "parse_untracked_mode",
    "resolve_untracked_policy",
]
