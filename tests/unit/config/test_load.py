from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from gitline.config import Config, get_user_config_path, safe_load_config
from gitline.enums import ResolverKind

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestSafeLoadConfig:
    def test_success_returns_no_error(self, fs: FakeFilesystem) -> None:
        config, error = safe_load_config()

        assert error is None
        assert config.model_dump() == Config.from_dict({}).model_dump()

    def test_missing_explicit_path_exits(
        self, fs: FakeFilesystem, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(config_path=Path("/work/missing.toml"))

        assert exc_info.value.code == 1
        assert "config file not found" in capsys.readouterr().err

    def test_invalid_file_warns_and_falls_back(
        self, fs: FakeFilesystem, capsys: pytest.CaptureFixture[str]
    ) -> None:
        fs.create_file(get_user_config_path(), contents="resolver = [\n")

        config, error = safe_load_config(cli_overrides={"resolver": "files"})

        assert error is not None
        assert config.resolver == ResolverKind.FILES
        assert "gitline: warning:" in capsys.readouterr().err

    def test_strict_mode_exits(
        self,
        fs: FakeFilesystem,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("GITLINE_STRICT_CONFIG", "1")
        fs.create_file(get_user_config_path(), contents="resolver = [\n")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config()

        assert exc_info.value.code == 1
        assert "warning" not in capsys.readouterr().err
