# pyright: reportExplicitAny=false
"""Shared CLI utilities.

- Standardized exit codes
- JSON output formatting
- Console helpers for terse error reporting
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Never

if TYPE_CHECKING:
    from rich.console import Console

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "get_error_console",
    "print_line",
]


class ExitCode(IntEnum):
    """Exit codes for the gitline CLI."""

    SUCCESS = 0
    NOT_A_REPOSITORY = 1
    USAGE_ERROR = 2
    INTERNAL_ERROR = 5


def format_json(data: FormattableData, *, indent: bool = False) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr."""
    from rich.console import Console

    return Console(stderr=True)


def print_line(console: Console, text: str) -> None:
    """Print text verbatim: no markup, highlighting, emoji or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print ``gitline: <message>`` and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    print_line(console, f"gitline: {message}")
    raise SystemExit(code)
