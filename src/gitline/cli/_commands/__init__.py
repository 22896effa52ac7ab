"""gitline CLI commands."""

from ._context import CLIContext
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    get_error_console,
    print_line,
)
from ._status import run_status

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "get_error_console",
    "print_line",
    "run_status",
]
