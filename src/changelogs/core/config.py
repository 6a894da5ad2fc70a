"""Changelogs configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from changelogs.core.constants import CONFIG_FILENAME
from changelogs.core.exceptions import ConfigError

# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class StorageConfig(BaseModel):
    data_dir: str = ""  # empty → current working directory


class DisplayConfig(BaseModel):
    clear_screen: bool = True


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: str = ""  # empty → stderr

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class ChangelogsConfig(BaseModel):
    """Root Changelogs configuration model."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_dir(self) -> Path:
        if self.storage.data_dir:
            return Path(self.storage.data_dir).expanduser()
        return Path.cwd()

    @property
    def log_path(self) -> Path | None:
        if self.logging.file:
            return Path(self.logging.file).expanduser()
        return None


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def config_file_path() -> Path:
    if env_path := os.environ.get("CHANGELOGS_CONFIG"):
        return Path(env_path)
    return Path.cwd() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> ChangelogsConfig:
    """
    Load ChangelogsConfig from a TOML file, overlaid with environment variables.

    A missing file is not an error: the defaults describe the plain
    "text files in the current directory" layout.

    Priority (highest to lowest):
      1. Environment variables (CHANGELOGS_*)
      2. Config file (./changelogs.toml or $CHANGELOGS_CONFIG)
    """
    import tomllib

    cfg_path = path or config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc

    _apply_env_overrides(data)

    try:
        return ChangelogsConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay CHANGELOGS_* environment variables onto the parsed TOML data."""
    if data_dir := os.environ.get("CHANGELOGS_DATA_DIR"):
        data.setdefault("storage", {})["data_dir"] = data_dir
    if level := os.environ.get("CHANGELOGS_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level
    if os.environ.get("CHANGELOGS_NO_CLEAR"):
        data.setdefault("display", {})["clear_screen"] = False


def config_to_dict(config: ChangelogsConfig) -> dict[str, Any]:
    """Serialize a config to the plain dict layout of the TOML file."""
    return config.model_dump()


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to a TOML file."""
    import tomli_w

    cfg_path = path or config_file_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.replace(cfg_path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    return cfg_path
