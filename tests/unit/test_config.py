"""Unit tests for changelogs.core.config — TOML loading, env overrides, save."""

from __future__ import annotations

from pathlib import Path

import pytest

from changelogs.core.config import (
    ChangelogsConfig,
    config_file_path,
    config_to_dict,
    load_config,
    save_config,
)
from changelogs.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CHANGELOGS_CONFIG",
        "CHANGELOGS_DATA_DIR",
        "CHANGELOGS_LOG_LEVEL",
        "CHANGELOGS_NO_CLEAR",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        cfg = load_config(tmp_path / "absent.toml")
        assert cfg.storage.data_dir == ""
        assert cfg.display.clear_screen is True
        assert cfg.logging.level == "WARNING"

    def test_default_data_dir_is_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert ChangelogsConfig().data_dir == tmp_path

    def test_reads_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "changelogs.toml"
        path.write_text(
            '[storage]\ndata_dir = "/srv/logs"\n\n'
            "[display]\nclear_screen = false\n\n"
            '[logging]\nlevel = "debug"\n',
            encoding="utf-8",
        )
        cfg = load_config(path)
        assert cfg.data_dir == Path("/srv/logs")
        assert cfg.display.clear_screen is False
        assert cfg.logging.level == "DEBUG"

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "changelogs.toml"
        path.write_text('[storage]\ndata_dir = "/from/file"\n', encoding="utf-8")
        monkeypatch.setenv("CHANGELOGS_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CHANGELOGS_LOG_LEVEL", "info")
        monkeypatch.setenv("CHANGELOGS_NO_CLEAR", "1")

        cfg = load_config(path)
        assert cfg.data_dir == tmp_path
        assert cfg.logging.level == "INFO"
        assert cfg.display.clear_screen is False

    def test_config_env_var_selects_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "custom.toml"
        monkeypatch.setenv("CHANGELOGS_CONFIG", str(path))
        assert config_file_path() == path

    def test_bad_toml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "changelogs.toml"
        path.write_text("[storage\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(path)

    def test_bad_level_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "changelogs.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)


class TestSaveConfig:
    def test_save_then_load(self, tmp_path: Path) -> None:
        cfg = ChangelogsConfig()
        cfg.storage.data_dir = str(tmp_path / "data")
        path = save_config(config_to_dict(cfg), tmp_path / "nested" / "changelogs.toml")

        assert path.exists()
        assert not path.with_suffix(".tmp").exists()
        assert load_config(path).data_dir == tmp_path / "data"
