"""Logging utilities for gitline.

Each invocation builds a standalone structlog logger; global structlog
configuration is never touched. Depending on the options the logger
appends to a log file, writes human-readable text to stderr, or discards
everything.
"""

from __future__ import annotations

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from contextlib import ExitStack

    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]


def _get_log_level() -> int:
    """Get the log level from environment variables.

    Checks GITLINE_DEBUG first (sets DEBUG if present), then
    GITLINE_LOG_LEVEL. Defaults to WARNING if neither is set.
    """
    if getenv("GITLINE_DEBUG", None):
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    level = getenv("GITLINE_LOG_LEVEL", "warning").upper()
    return log_levels.get(level, logging.WARNING)


def _log_level_from_string(level: str | None) -> int:
    """Convert a level name to a logging level, GITLINE_DEBUG winning."""
    if level is None or getenv("GITLINE_DEBUG", None):
        return _get_log_level()

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def _wrap(
    raw_logger: object, processors: list[Processor], level: int
) -> FilteringBoundLogger:
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        ),
    )


def _file_logger(
    log_file: Path,
    level: int,
    log_format: LogFormatType,
    resources: ExitStack | None,
) -> FilteringBoundLogger:
    log_file.parent.mkdir(parents=True, exist_ok=True)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    stream = log_file.open("a", encoding="utf-8")
    if resources is not None:
        stream = resources.enter_context(stream)
    factory = structlog.WriteLoggerFactory(file=stream)
    return _wrap(factory(), processors, level)


def _stderr_logger(stream: TextIO) -> FilteringBoundLogger:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.dev.ConsoleRenderer(colors=False),
    ]
    return _wrap(structlog.PrintLogger(file=stream), processors, logging.DEBUG)


def get_null_logger() -> FilteringBoundLogger:
    """Create a logger that drops every event.

    Events below CRITICAL are filtered out before processing; the rest reach
    a ReturnLogger, which writes nothing.
    """
    return _wrap(structlog.ReturnLogger(), [], logging.CRITICAL)


def create_cli_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str | Path | None = None,
    verbose: bool = False,
    stream: TextIO | None = None,
    resources: ExitStack | None = None,
) -> FilteringBoundLogger:
    """Create the logger for one CLI invocation.

    The destination is chosen in this order:

    1. ``log_file`` set: structured lines appended to that file at
       ``level``. GITLINE_DEBUG overrides the level.
    2. ``verbose``: text lines on stderr at DEBUG level.
    3. Otherwise: a logger that emits nothing.

    Args:
        level: Log level name (debug, info, warning, error). Falls back to
            GITLINE_LOG_LEVEL, then WARNING.
        log_format: Output format for the log file, "json" or "text".
        log_file: Log file path, None for no file.
        verbose: Whether to log to stderr when no file is configured.
        stream: Stream for verbose output (defaults to sys.stderr).
        resources: Owner of the log file handle. When given, the file is
            closed with it; otherwise it stays open for the life of the
            process.

    Returns:
        A FilteringBoundLogger instance.
    """
    if log_file:
        return _file_logger(
            Path(log_file).expanduser(),
            _log_level_from_string(level),
            log_format,
            resources,
        )
    if verbose:
        return _stderr_logger(stream if stream is not None else sys.stderr)
    return get_null_logger()
