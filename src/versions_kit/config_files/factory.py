# src/versions_kit/config_files/factory.py

from pathlib import Path

from versions_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import ConfigFile, ConfigFileType
from .settings import ConfigFileSettings


def detect_config_file_type(
    path: Path, settings: ConfigFileSettings = ConfigFileSettings()
) -> ConfigFileType:
    """Pick the config file variant for `path` from its file name.

    Raises:
        ValueError: If no known variant uses this file name.
    """
    if path.name == settings.tool_versions_filename:
        return ConfigFileType.TOOL_VERSIONS

    raise ValueError(f"Unknown config file format: {path}")


def load_config_file(
    path: Path,
    settings: ConfigFileSettings = ConfigFileSettings(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ConfigFile:
    """Read and parse a config file.

    Args:
        path: File to read. Its name selects the variant.
        settings: File names and encoding.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Parsed ConfigFile implementation bound to `path`.

    Raises:
        ValueError: If the file name matches no known variant.
        ConfigFileIOError: If the file cannot be read.

    Example:
        >>> cf = load_config_file(Path(".tool-versions"))
        >>> cf.replace_versions("nodejs", ["20"])
        >>> cf.save()
    """
    file_type = detect_config_file_type(path, settings)

    if file_type == ConfigFileType.TOOL_VERSIONS:
        from .tool_versions import ToolVersions

        return ToolVersions.from_file(path, settings, metrics_hook)

    raise ValueError(f"Unknown config file type: {file_type}")


def init_config_file(
    path: Path,
    settings: ConfigFileSettings = ConfigFileSettings(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ConfigFile:
    """Create an empty config file document bound to `path` without reading it."""
    file_type = detect_config_file_type(path, settings)

    if file_type == ConfigFileType.TOOL_VERSIONS:
        from .tool_versions import ToolVersions

        return ToolVersions.init(path, settings, metrics_hook)

    raise ValueError(f"Unknown config file type: {file_type}")
