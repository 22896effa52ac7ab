"""The command-line interface for gitline."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import sys
from contextlib import ExitStack
from pathlib import Path
from typing import Annotated

from cyclopts import App, CycloptsError, Parameter
from rich.console import Console

from gitline import __version__
from gitline.config import safe_load_config
from gitline.enums import ResolverKind
from gitline.exceptions import NotARepositoryError
from gitline.utils import create_cli_logger

from ._commands import CLIContext, ExitCode, exit_with_error, run_status

_HELP = "Print a one-line git status summary for shell prompts."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitline",
        help=_HELP,
        help_on_error=False,
        version=__version__,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        path: Annotated[
            Path | None, Parameter(help="Directory inside the repository")
        ] = None,
        *,
        verbose: Annotated[
            bool,
            Parameter(
                name=["--verbose", "-v"],
                negative="",
                help="Log to stderr and show tracebacks",
            ),
        ] = False,
        untracked_files: Annotated[
            str | None,
            Parameter(
                name=["--untracked-files", "-u"],
                help="none, collapse-directories or enumerate-all",
            ),
        ] = None,
        show_all: Annotated[
            bool,
            Parameter(
                name=["--all", "-a"],
                negative="",
                help="Count every untracked file",
            ),
        ] = False,
        resolver: Annotated[
            ResolverKind | None,
            Parameter(name="--resolver", help="Branch resolution strategy"),
        ] = None,
        json_output: Annotated[
            bool, Parameter(name="--json", negative="", help="Print JSON")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Print a one-line git status summary for shell prompts.

        Args:
            path: Directory inside the repository (defaults to the current
                directory).
            verbose: Log to stderr and show tracebacks on failure.
            untracked_files: Untracked file policy; wins over --all.
            show_all: Count every untracked file.
            resolver: Branch resolution strategy.
            json_output: Print the report as JSON instead of one line.
            config: Explicit path to config file.
        """
        cli_overrides: dict[str, object] | None = None
        if resolver is not None:
            cli_overrides = {"resolver": resolver.value}

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=cli_overrides,
        )

        with ExitStack() as resources:
            cli_logger = create_cli_logger(
                level=loaded_config.logging.level.value,
                log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
                log_file=loaded_config.logging.file or None,
                verbose=verbose,
                stream=error_console.file,
                resources=resources,
            )
            if config_error is not None:
                cli_logger.warning("config_load_failed", error=config_error)

            ctx = CLIContext(
                config=loaded_config,
                verbose=verbose,
                config_error=config_error,
                logger=cli_logger,
            )
            CLIContext.set_current(ctx)

            try:
                run_status(
                    path if path is not None else Path.cwd(),
                    untracked_files=untracked_files,
                    show_all=show_all,
                    json_output=json_output,
                    console=console,
                    error_console=error_console,
                )
            except Exception as e:  # noqa: BLE001
                cli_logger.error("command_failed", error=str(e), exc_info=True)
                if verbose:
                    error_console.print_exception()
                code = (
                    ExitCode.NOT_A_REPOSITORY
                    if isinstance(e, NotARepositoryError)
                    else ExitCode.INTERNAL_ERROR
                )
                exit_with_error(
                    str(e) or type(e).__name__, code, console=error_console
                )
            finally:
                CLIContext.reset()

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `gitline` CLI."""
    cli = create_app(exit_on_error=False)
    try:
        cli()
    except CycloptsError:
        sys.exit(ExitCode.USAGE_ERROR)


if __name__ == "__main__":
    main()
