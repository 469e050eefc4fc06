# src/versions_kit/config_files/base.py

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol


class ConfigFileType(str, Enum):
    """Closed set of on-disk config formats."""

    TOOL_VERSIONS = "tool_versions"


@dataclass(frozen=True)
class PluginSource:
    """Where a set of requested plugin versions came from."""

    type: ConfigFileType
    path: Path | None


class ConfigFile(Protocol):
    """Capability set shared by every config file variant.

    Design principles:
    - Structural: variants satisfy this protocol, they do not inherit from it
    - In-memory: mutators never touch disk, only `save` does
    - Total: mutators never fail
    """

    def get_type(self) -> ConfigFileType: ...

    def get_path(self) -> Path | None: ...

    def source(self) -> PluginSource: ...

    def plugins(self) -> dict[str, list[str]]:
        """Ordered snapshot of plugin name -> requested versions."""
        ...

    def env(self) -> dict[str, str]: ...

    def remove_plugin(self, plugin: str) -> None: ...

    def add_version(self, plugin: str, version: str) -> None: ...

    def replace_versions(self, plugin: str, versions: list[str]) -> None: ...

    def save(self) -> None: ...

    def dump(self) -> str: ...
