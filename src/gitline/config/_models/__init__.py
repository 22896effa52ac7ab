"""Configuration models."""

from gitline.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from gitline.config._models._config import Config
from gitline.config._models._sections import LabelsConfig, LoggingConfig, SymbolsConfig

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LabelsConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SymbolsConfig",
]
