"""Shared utilities.

Functions:
    create_cli_logger: Build the structlog logger for one invocation.
    get_null_logger: Build a logger that discards every event.
"""

from gitline.utils._logging import LogFormatType, create_cli_logger, get_null_logger

__all__ = [
    "LogFormatType",
    "create_cli_logger",
    "get_null_logger",
]
