"""Unit tests for changelogs.core.log — logger configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from changelogs.core.config import ChangelogsConfig
from changelogs.core.log import configure_logging


def test_level_from_config() -> None:
    cfg = ChangelogsConfig()
    cfg.logging.level = "DEBUG"
    logger = configure_logging(cfg)
    assert logger.name == "changelogs"
    assert logger.level == logging.DEBUG


def test_reconfigure_replaces_handler() -> None:
    cfg = ChangelogsConfig()
    configure_logging(cfg)
    logger = configure_logging(cfg)
    assert len(logger.handlers) == 1


def test_file_handler(tmp_path: Path) -> None:
    cfg = ChangelogsConfig()
    cfg.logging.file = str(tmp_path / "logs" / "changelogs.log")
    cfg.logging.level = "INFO"
    logger = configure_logging(cfg)
    try:
        logging.getLogger("changelogs.core.store").info("Added project %r", "Demo")
        for handler in logger.handlers:
            handler.flush()
        assert "Added project 'Demo'" in (tmp_path / "logs" / "changelogs.log").read_text()
    finally:
        configure_logging(ChangelogsConfig())
