"""Configuration source discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import platformdirs

from gitline.config._defaults import DEFAULT_CONFIG
from gitline.config._models._common import ConfigSource, ConfigSourceName


def get_user_config_path() -> Path:
    r"""Get the platform-specific user config file path.

    - Linux: ``~/.config/gitline/config.toml``
    - macOS: ``~/Library/Application Support/gitline/config.toml``
    - Windows: ``%APPDATA%\gitline\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path("gitline") / "config.toml"


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    *,
    config_path: Path | None = None,
    include_env: bool = True,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Discover all configuration sources, highest precedence first.

    Repository-local files are never consulted; configuration is per user.

    Args:
        config_path: Explicit config file, replacing the user file.
        include_env: Include environment variables as a source.
        cli_overrides: Values from command line flags.

    Returns:
        Sources in precedence order. File sources that don't exist are
        still included with exists=False.
    """
    sources: list[ConfigSource] = []

    if cli_overrides is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.CLI,
                path=None,
                exists=bool(cli_overrides),
                values=cli_overrides,
            )
        )

    if include_env:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.ENV,
                path=None,
                exists=True,  # Values parsed during loading
                values={},
            )
        )

    if config_path is not None:
        sources.append(
            ConfigSource(
                name=ConfigSourceName.FILE,
                path=config_path,
                exists=_file_exists(config_path),
                values={},
            )
        )
    else:
        user_path = get_user_config_path()
        sources.append(
            ConfigSource(
                name=ConfigSourceName.USER,
                path=user_path,
                exists=_file_exists(user_path),
                values={},
            )
        )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources
