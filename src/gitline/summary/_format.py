"""Summary line rendering.

Every function here is pure: the same report and tables always produce
the same output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gitline.summary._symbols import (
    CATEGORY_ORDER,
    DEFAULT_LABELS,
    DEFAULT_SYMBOLS,
    BranchLabels,
    SymbolTable,
)

if TYPE_CHECKING:
    from gitline.resolver import BranchIdentity
    from gitline.status import ChangeCounts, StatusReport


def format_changes(counts: ChangeCounts, symbols: SymbolTable = DEFAULT_SYMBOLS) -> str:
    """Render the change token.

    Example:
        >>> format_changes(ChangeCounts(staged=1, modified=2))
        '^1~2'
        >>> format_changes(ChangeCounts())
        '✓'
    """
    if counts.is_clean:
        return symbols.clean
    return symbols.separator.join(
        f"{symbols.symbol_for(category)}{counts.get(category)}"
        for category in CATEGORY_ORDER
        if counts.get(category)
    )


def branch_label(
    branch: BranchIdentity | None, labels: BranchLabels = DEFAULT_LABELS
) -> str | None:
    """Text shown for the branch, None when it could not be resolved."""
    if branch is None:
        return None
    return labels.label_for(branch.kind, branch.name)


def format_summary(
    report: StatusReport,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
    labels: BranchLabels = DEFAULT_LABELS,
) -> str:
    """Render the single status line.

    The line is ``<branch>[ <upstream>] <changes>``. The upstream is
    omitted when absent or when its display form equals the branch label.
    An unresolved branch is omitted along with its upstream.

    Args:
        report: Status to render.
        symbols: Change count glyphs.
        labels: Labels for detached and unborn HEADs.

    Returns:
        The summary line, without a trailing newline.
    """
    parts: list[str] = []
    label = branch_label(report.branch, labels)
    if label is not None:
        parts.append(label)
        if report.upstream is not None and report.upstream.display != label:
            parts.append(report.upstream.display)
    parts.append(format_changes(report.changes, symbols))
    return " ".join(parts)


def report_to_dict(
    report: StatusReport,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
    labels: BranchLabels = DEFAULT_LABELS,
) -> dict[str, Any]:
    """Machine-readable form of a report, including the rendered line."""
    branch = report.branch
    upstream = report.upstream
    return {
        "branch": (
            {"kind": branch.kind.value, "name": branch.name}
            if branch is not None
            else None
        ),
        "label": branch_label(branch, labels),
        "upstream": (
            {
                "remote": upstream.remote,
                "branch": upstream.branch,
                "display": upstream.display,
            }
            if upstream is not None
            else None
        ),
        "changes": report.changes.as_dict(),
        "clean": report.changes.is_clean,
        "summary": format_summary(report, symbols, labels),
    }
