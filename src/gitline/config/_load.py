"""Configuration loading with error handling."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Any

from gitline.config._models import Config
from gitline.exceptions import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Handles errors based on the GITLINE_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and fall back to the defaults
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        cli_overrides: Values from command line flags.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns the defaults plus CLI
        overrides, with the error message.
    """
    strict_mode = os.environ.get("GITLINE_STRICT_CONFIG", "0") == "1"

    if config_path is not None and not config_path.is_file():
        print(f"gitline: config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    try:
        config = Config.load(config_path=config_path, cli_overrides=cli_overrides)
    except ConfigError as e:
        error_msg = str(e)
    except OSError as e:
        error_msg = f"Failed to load config: {e}"
    else:
        return config, None

    if strict_mode:
        print(f"gitline: {error_msg}", file=sys.stderr)  # noqa: T201
        sys.exit(1)
    print(f"gitline: warning: {error_msg}", file=sys.stderr)  # noqa: T201
    return Config.from_dict(cli_overrides or {}), error_msg
