"""The status command: print one summary line for a repository."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitline.exceptions import NotARepositoryError
from gitline.repository import locate_repository
from gitline.resolver import get_resolver
from gitline.status import (
    collect_status,
    parse_untracked_mode,
    resolve_untracked_policy,
)
from gitline.summary import format_summary, report_to_dict
from gitline.utils import get_null_logger

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error, format_json, print_line

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from gitline.enums import UntrackedPolicy


def _parse_mode(value: str | None, error_console: Console) -> UntrackedPolicy | None:
    if value is None:
        return None
    try:
        return parse_untracked_mode(value)
    except ValueError as e:
        exit_with_error(str(e), ExitCode.USAGE_ERROR, console=error_console)


def run_status(
    path: Path,
    *,
    untracked_files: str | None,
    show_all: bool,
    json_output: bool,
    console: Console,
    error_console: Console,
) -> None:
    """Locate the repository at ``path``, collect its status, print it.

    Raises:
        SystemExit: With USAGE_ERROR for an unknown untracked mode, or
            NOT_A_REPOSITORY when no repository encloses ``path``.
    """
    ctx = CLIContext.get_current()
    log = ctx.logger if ctx.logger is not None else get_null_logger()
    config = ctx.config

    policy = resolve_untracked_policy(
        _parse_mode(untracked_files, error_console),
        show_all=show_all,
        default=config.untracked,
    )

    try:
        handle = locate_repository(path)
    except NotARepositoryError as e:
        log.debug("repository_not_found", path=str(path), error=str(e))
        exit_with_error(str(e), ExitCode.NOT_A_REPOSITORY, console=error_console)

    log.debug(
        "repository_located",
        work_dir=str(handle.work_dir) if handle.work_dir else None,
        git_dir=str(handle.git_dir),
        resolver=config.resolver.value,
        untracked=policy.value,
    )

    report = collect_status(handle, get_resolver(config.resolver), policy, logger=log)
    symbols = config.symbols.to_table()
    labels = config.labels.to_labels()

    if json_output:
        print_line(console, format_json(report_to_dict(report, symbols, labels)))
    else:
        print_line(console, format_summary(report, symbols, labels))
