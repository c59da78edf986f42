# -*- coding: utf-8 -*-
"""Reading and writing config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import CONFIG_FILE, WORKING_DIR
from .config import Config

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """config.json exists but could not be read or parsed."""


def get_config_path() -> Path:
    """Return the default config.json path."""
    return WORKING_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> Config:
    """Load config.json; a missing file yields the default config."""
    if path is None:
        path = get_config_path()

    if not path.is_file():
        logger.debug("Config not found at %s, using defaults", path)
        return Config()

    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        return Config.model_validate(raw or {})
    except (
        OSError,
        UnicodeDecodeError,
        json.JSONDecodeError,
        ValidationError,
    ) as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """Write *config* to config.json."""
    if path is None:
        path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as fh:
        json.dump(
            config.model_dump(mode="json"),
            fh,
            indent=2,
            ensure_ascii=False,
        )
