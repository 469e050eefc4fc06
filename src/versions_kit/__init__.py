# Config files
from .config_files import (
    ConfigFile,
    ConfigFileIOError,
    ConfigFileSettings,
    ConfigFileType,
    PluginSource,
    ToolVersionPlugin,
    ToolVersions,
    detect_config_file_type,
    init_config_file,
    load_config_file,
    load_settings,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

__all__ = [
    # Config files
    "ConfigFile",
    "ConfigFileIOError",
    "ConfigFileSettings",
    "ConfigFileType",
    "PluginSource",
    "ToolVersionPlugin",
    "ToolVersions",
    "detect_config_file_type",
    "init_config_file",
    "load_config_file",
    "load_settings",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
]
