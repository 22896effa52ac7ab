# pyright: reportUnusedCallResult=false
"""CLI context for per-invocation state.

The CLIContext is set once when the command starts and made available to
everything it calls via contextvars.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitline.config import Config


_current_cli_context: contextvars.ContextVar[CLIContext | None] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Per-invocation CLI state.

    Attributes:
        config: Loaded configuration object.
        verbose: Log to stderr and show tracebacks on failure.
        config_error: Error message if config loading failed.
        logger: Structured logger for this invocation.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> CLIContext:
        """Get the active CLIContext, or a default one if none is set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx

        from gitline.config import Config  # noqa: PLC0415

        return cls(config=Config.from_dict({}))

    @classmethod
    def set_current(cls, ctx: CLIContext) -> None:
        """Set the active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Clear the active context."""
        _current_cli_context.set(None)
