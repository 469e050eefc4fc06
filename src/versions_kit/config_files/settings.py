import logging
from pathlib import Path

import yaml
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ConfigFileSettings(BaseModel):
    """Settings for locating and reading config files.

    Immutable. Explicit. No magic defaults from environment.
    """

    tool_versions_filename: str = ".tool-versions"
    encoding: str = "utf-8"

    class Config:
        extra = "forbid"
        frozen = True


def load_settings(path: str | Path) -> ConfigFileSettings:
    """Load settings from a YAML mapping. An empty file yields the defaults."""
    logger.info("Loading config file settings from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return ConfigFileSettings(**data)
