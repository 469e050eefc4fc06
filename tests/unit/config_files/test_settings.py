from pathlib import Path

import pytest
from pydantic import ValidationError

from versions_kit.config_files.settings import ConfigFileSettings, load_settings


class TestConfigFileSettings:
    def test_defaults(self) -> None:
        settings = ConfigFileSettings()

        assert settings.tool_versions_filename == ".tool-versions"
        assert settings.encoding == "utf-8"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfigFileSettings(legacy_version_file=True)  # type: ignore[call-arg]

    def test_is_frozen(self) -> None:
        settings = ConfigFileSettings()

        with pytest.raises(ValidationError):
            settings.encoding = "latin-1"  # type: ignore[misc]


class TestLoadSettings:
    def test_loads_yaml_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            """tool_versions_filename: .versions
encoding: latin-1
"""
        )

        settings = load_settings(path)

        assert settings.tool_versions_filename == ".versions"
        assert settings.encoding == "latin-1"

    def test_partial_yaml_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("encoding: utf-16\n")

        settings = load_settings(str(path))

        assert settings.tool_versions_filename == ".tool-versions"
        assert settings.encoding == "utf-16"

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")

        assert load_settings(path) == ConfigFileSettings()

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("resolve_versions: true\n")

        with pytest.raises(ValidationError):
            load_settings(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")
