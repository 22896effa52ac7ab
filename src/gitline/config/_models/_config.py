# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Configuration container with typed access.

Values that do not parse fall back to their defaults instead of failing
the whole load.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from gitline.config._defaults import DEFAULT_CONFIG
from gitline.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitline.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from gitline.config._models._sections import LabelsConfig, LoggingConfig, SymbolsConfig
from gitline.enums import ResolverKind, UntrackedPolicy
from gitline.status import parse_untracked_mode

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name, {})
    return value if isinstance(value, dict) else {}


def _strings(
    data: dict[str, Any], defaults: dict[str, str], *, allow_empty: set[str]
) -> dict[str, str]:
    """Keep string values from ``data``, falling back to ``defaults``."""
    result: dict[str, str] = {}
    for key, default in defaults.items():
        value = data.get(key, default)
        if not isinstance(value, str) or (not value and key not in allow_empty):
            value = default
        result[key] = value
    return result


def _parse_resolver(value: Any) -> ResolverKind:
    try:
        return ResolverKind(str(value).lower())
    except ValueError:
        return ResolverKind.DULWICH


def _parse_untracked(value: Any) -> UntrackedPolicy:
    try:
        return parse_untracked_mode(str(value))
    except ValueError:
        return UntrackedPolicy.EXCLUDE


def _parse_log_level(value: Any) -> LogLevel:
    try:
        return LogLevel(str(value).lower())
    except ValueError:
        return LogLevel.WARNING


def _parse_log_format(value: Any) -> LogFormat:
    try:
        return LogFormat(str(value).lower())
    except ValueError:
        return LogFormat.JSON


def _parse_logging(data: dict[str, Any]) -> LoggingConfig:
    file = data.get("file", "")
    return LoggingConfig(
        level=_parse_log_level(data.get("level", "warning")),
        format=_parse_log_format(data.get("format", "json")),
        file=file if isinstance(file, str) else "",
    )


def _parse_symbols(data: dict[str, Any]) -> SymbolsConfig:
    return SymbolsConfig(
        **_strings(data, DEFAULT_CONFIG["symbols"], allow_empty={"separator"})
    )


def _parse_labels(data: dict[str, Any]) -> LabelsConfig:
    return LabelsConfig(**_strings(data, DEFAULT_CONFIG["labels"], allow_empty=set()))


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor.

    Attributes:
        resolver: Branch and upstream resolution strategy.
        untracked: Untracked policy used when no CLI flag picks one.
        symbols: Change token glyphs.
        labels: Detached and unborn branch labels.
        logging: Log destination and threshold.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    resolver: ResolverKind = ResolverKind.DULWICH
    untracked: UntrackedPolicy = UntrackedPolicy.EXCLUDE
    symbols: SymbolsConfig = SymbolsConfig()
    labels: LabelsConfig = LabelsConfig()
    logging: LoggingConfig = LoggingConfig()

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def _from_merged(
        cls, merged: dict[str, Any], sources: tuple[ConfigSource, ...] = ()
    ) -> Self:
        config = cls(
            resolver=_parse_resolver(merged.get("resolver", "dulwich")),
            untracked=_parse_untracked(merged.get("untracked", "exclude")),
            symbols=_parse_symbols(_section(merged, "symbols")),
            labels=_parse_labels(_section(merged, "labels")),
            logging=_parse_logging(_section(merged, "logging")),
        )
        config._sources = sources
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults."""
        return cls._from_merged(deep_merge(DEFAULT_CONFIG, data))

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
        """
        data = read_toml_file(path)
        source = ConfigSource(
            name=ConfigSourceName.FILE, path=path, exists=True, values=data
        )
        return cls._from_merged(deep_merge(DEFAULT_CONFIG, data), (source,))

    @classmethod
    def load(
        cls,
        *,
        config_path: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources merge in precedence order, lowest first: defaults, the user
        file (or ``config_path`` in its place), environment variables, then
        CLI overrides.

        Args:
            config_path: File used instead of the user config file.
            include_env: Include GITLINE_* environment variables.
            cli_overrides: Values taken from command line flags.

        Returns:
            Merged configuration object.

        Raises:
            FileNotFoundError: If ``config_path`` does not exist.
            ConfigLoadError: If a config file cannot be parsed.
        """
        from gitline.config._discovery import discover_sources  # noqa: PLC0415

        sources = discover_sources(
            config_path=config_path,
            include_env=include_env,
            cli_overrides=cli_overrides,
        )

        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        # Sources are discovered highest-to-lowest
        for source in reversed(sources):
            values: dict[str, Any] = source.values
            if source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path is not None and (
                source.exists or source.name == ConfigSourceName.FILE
            ):
                values = read_toml_file(source.path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        return cls._from_merged(merged, tuple(reversed(loaded_sources)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Sources that contributed to this configuration, highest first."""
        return list(self._sources)
