# src/versions_kit/config_files/__init__.py

"""Config file layer for versions-kit.

Reads and writes the files that declare which tool versions a directory
wants, behind one capability set (`ConfigFile`) per format.

Design principles:
- Lossless: comments around the data survive a parse/dump cycle
- Permissive: parsing never fails, only file I/O does
- In-memory: mutators never touch disk, `save` does

Example:
    >>> from versions_kit.config_files import load_config_file
    >>>
    >>> cf = load_config_file(Path(".tool-versions"))
    >>> cf.add_version("python", "3.12.0")
    >>> cf.save()
"""

from .base import ConfigFile, ConfigFileType, PluginSource
from .errors import ConfigFileIOError
from .factory import detect_config_file_type, init_config_file, load_config_file
from .settings import ConfigFileSettings, load_settings
from .tool_versions import ToolVersionPlugin, ToolVersions

__all__ = [
    # Factory
    "detect_config_file_type",
    "init_config_file",
    "load_config_file",
    # Protocol
    "ConfigFile",
    # Settings
    "ConfigFileSettings",
    "load_settings",
    # Types
    "ConfigFileType",
    "PluginSource",
    "ToolVersionPlugin",
    "ToolVersions",
    # Errors
    "ConfigFileIOError",
]
