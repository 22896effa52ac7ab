"""Summary line formatting.

Functions:
    format_changes: Render change counts as the symbolic change token.
    format_summary: Render a status report as one line.
    report_to_dict: Machine-readable form of a status report.

Models:
    SymbolTable: Glyph for each change category, plus the clean glyph.
    BranchLabels: Text for detached and unborn HEADs.
"""

from gitline.summary._format import (
    branch_label,
    format_changes,
    format_summary,
    report_to_dict,
)
from gitline.summary._symbols import (
    CATEGORY_ORDER,
    DEFAULT_LABELS,
    DEFAULT_SYMBOLS,
    BranchLabels,
    SymbolTable,
)

__all__ = [
    "CATEGORY_ORDER",
    "DEFAULT_LABELS",
    "DEFAULT_SYMBOLS",
    "BranchLabels",
    "SymbolTable",
    "branch_label",
    "format_changes",
    "format_summary",
    "report_to_dict",
]
