"""gitline configuration.

Settings come from built-in defaults, the user config file, GITLINE_*
environment variables and command line flags, in increasing precedence.

Example:
    >>> from gitline.config import Config
    >>> config = Config.load()
    >>> config.symbols.clean
    '✓'
"""

from gitline.exceptions import ConfigError, ConfigLoadError

from ._defaults import DEFAULT_CONFIG
from ._discovery import discover_sources, get_user_config_path
from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    LabelsConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    SymbolsConfig,
)

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "LabelsConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "SymbolsConfig",
    "deep_merge",
    "discover_sources",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
]
