"""Load wbmodel settings from TOML (e.g. wbmodel.toml).

Config file is looked up in order:
  1. Path in WBMODEL_CONFIG env var (if set)
  2. wbmodel.toml in the wbmodel package directory
  3. wbmodel.toml in the current working directory

Settings are read from the ``[wbmodel]`` table. If no file is found, the
file cannot be parsed or its settings are invalid, built-in defaults are used.
"""

from __future__ import annotations

import logging
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WBMODEL_CONFIG"
CONFIG_FILENAME = "wbmodel.toml"


class DataModelConfig(BaseModel, frozen=True):
    """Settings for identifier parsing and library logging.

    Attributes:
        accept_legacy_serialization: Whether the legacy structured id form
            (``["item", "Q123"]``) is still accepted when unserializing.
        log_level: Level name used by loggers created with setup_logging().
    """

    accept_legacy_serialization: bool = Field(
        default=True,
        description="Accept the legacy [type, id] serialization when unserializing ids.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Standard logging level name for wbmodel loggers.",
    )

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _default_config_paths() -> list[Path]:
    """Return paths to check for wbmodel.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path(__file__).resolve().parent / CONFIG_FILENAME)
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


@lru_cache(maxsize=1)
def load_config() -> DataModelConfig:
    """Load wbmodel config from the first TOML file found.

    Returns:
        DataModelConfig built from the ``[wbmodel]`` table, or the defaults
        when no readable file or table exists or the table holds invalid
        settings (logged as a warning).
    """
    for path in _default_config_paths():
        if path.is_file():
            try:
                with open(path, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, ValueError):
                continue
            section = data.get("wbmodel")
            if isinstance(section, dict):
                try:
                    return DataModelConfig.model_validate(section)
                except ValidationError as e:
                    logger.warning("Ignoring invalid settings in %s, using defaults: %s", path, e)
            break
    return DataModelConfig()
