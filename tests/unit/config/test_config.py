# pyright: reportAny=false
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from gitline.config import (
    Config,
    ConfigLoadError,
    ConfigSourceName,
    LogFormat,
    LogLevel,
    SymbolsConfig,
    get_user_config_path,
)
from gitline.enums import ResolverKind, UntrackedPolicy
from gitline.summary import DEFAULT_LABELS, DEFAULT_SYMBOLS

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestConfigDefaults:
    def test_defaults(self) -> None:
        config = Config.from_dict({})

        assert config.resolver == ResolverKind.DULWICH
        assert config.untracked == UntrackedPolicy.EXCLUDE
        assert config.logging.level == LogLevel.WARNING
        assert config.logging.format == LogFormat.JSON
        assert config.logging.file == ""

    def test_default_symbols_match_formatter(self) -> None:
        assert Config.from_dict({}).symbols.to_table() == DEFAULT_SYMBOLS

    def test_default_labels_match_formatter(self) -> None:
        assert Config.from_dict({}).labels.to_labels() == DEFAULT_LABELS

    def test_is_frozen(self) -> None:
        config = Config.from_dict({})

        with pytest.raises(ValidationError):
            config.resolver = ResolverKind.FILES  # pyright: ignore[reportAttributeAccessIssue]


class TestConfigFromDict:
    def test_overrides_values(self) -> None:
        config = Config.from_dict(
            {
                "resolver": "files",
                "untracked": "all",
                "symbols": {"renamed": "r"},
                "labels": {"unborn": "empty"},
                "logging": {"level": "DEBUG", "format": "text"},
            }
        )

        assert config.resolver == ResolverKind.FILES
        assert config.untracked == UntrackedPolicy.ENUMERATE
        assert config.symbols.renamed == "r"
        assert config.symbols.modified == "~"
        assert config.labels.unborn == "empty"
        assert config.labels.detached == "HEAD"
        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.format == LogFormat.TEXT

    @pytest.mark.parametrize(
        ("data", "attr", "expected"),
        [
            ({"resolver": "libgit2"}, "resolver", ResolverKind.DULWICH),
            ({"untracked": "sometimes"}, "untracked", UntrackedPolicy.EXCLUDE),
            ({"untracked": 3}, "untracked", UntrackedPolicy.EXCLUDE),
        ],
    )
    def test_invalid_top_level_values_fall_back(
        self, data: dict[str, object], attr: str, expected: object
    ) -> None:
        assert getattr(Config.from_dict(data), attr) == expected

    def test_invalid_logging_values_fall_back(self) -> None:
        config = Config.from_dict(
            {"logging": {"level": "loud", "format": "xml", "file": 42}}
        )

        assert config.logging.level == LogLevel.WARNING
        assert config.logging.format == LogFormat.JSON
        assert config.logging.file == ""

    def test_empty_symbol_falls_back_per_key(self) -> None:
        config = Config.from_dict({"symbols": {"clean": "", "staged": "S"}})

        assert config.symbols.clean == "✓"
        assert config.symbols.staged == "S"

    def test_separator_may_be_set(self) -> None:
        config = Config.from_dict({"symbols": {"separator": " "}})

        assert config.symbols.to_table().separator == " "

    def test_non_string_symbol_falls_back(self) -> None:
        config = Config.from_dict({"symbols": {"deleted": 5}})

        assert config.symbols.deleted == "-"

    def test_non_table_section_falls_back(self) -> None:
        config = Config.from_dict({"labels": "plain"})

        assert config.labels.to_labels() == DEFAULT_LABELS

    def test_symbols_model_rejects_empty(self) -> None:
        with pytest.raises(ValidationError):
            _ = SymbolsConfig(clean="")


class TestConfigFromFile:
    def test_loads_file(self, fs: FakeFilesystem) -> None:
        path = Path("/config/gitline.toml")
        fs.create_file(path, contents='resolver = "files"\n')

        config = Config.from_file(path)

        assert config.resolver == ResolverKind.FILES
        assert [s.name for s in config.sources] == [ConfigSourceName.FILE]

    def test_invalid_file_raises(self, fs: FakeFilesystem) -> None:
        path = Path("/config/gitline.toml")
        fs.create_file(path, contents="resolver = \n")

        with pytest.raises(ConfigLoadError):
            _ = Config.from_file(path)


class TestConfigLoad:
    def test_user_file_is_read(self, fs: FakeFilesystem) -> None:
        fs.create_file(
            get_user_config_path(), contents='[labels]\ndetached = "detached"\n'
        )

        config = Config.load()

        assert config.labels.detached == "detached"

    def test_missing_user_file_uses_defaults(self, fs: FakeFilesystem) -> None:
        config = Config.load()

        assert config.model_dump() == Config.from_dict({}).model_dump()
        user = next(s for s in config.sources if s.name == ConfigSourceName.USER)
        assert user.exists is False

    def test_env_beats_file(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        fs.create_file(get_user_config_path(), contents='resolver = "files"\n')
        monkeypatch.setenv("GITLINE_RESOLVER", "dulwich")

        assert Config.load().resolver == ResolverKind.DULWICH

    def test_cli_beats_env(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITLINE_RESOLVER", "dulwich")

        config = Config.load(cli_overrides={"resolver": "files"})

        assert config.resolver == ResolverKind.FILES

    def test_env_can_be_skipped(
        self, fs: FakeFilesystem, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GITLINE_RESOLVER", "files")

        assert Config.load(include_env=False).resolver == ResolverKind.DULWICH

    def test_config_path_replaces_user_file(self, fs: FakeFilesystem) -> None:
        fs.create_file(get_user_config_path(), contents='untracked = "all"\n')
        explicit = Path("/work/gitline.toml")
        fs.create_file(explicit, contents='resolver = "files"\n')

        config = Config.load(config_path=explicit)

        assert config.resolver == ResolverKind.FILES
        assert config.untracked == UntrackedPolicy.EXCLUDE
        names = [s.name for s in config.sources]
        assert ConfigSourceName.USER not in names
        assert names[-1] == ConfigSourceName.DEFAULT

    def test_missing_config_path_raises(self, fs: FakeFilesystem) -> None:
        with pytest.raises(FileNotFoundError):
            _ = Config.load(config_path=Path("/work/missing.toml"))

    def test_sources_highest_first(self, fs: FakeFilesystem) -> None:
        config = Config.load(cli_overrides={"resolver": "files"})

        assert [s.name for s in config.sources] == [
            ConfigSourceName.CLI,
            ConfigSourceName.ENV,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]
