"""Unit tests for cli.config module."""

import pytest

from src.cli.config import ConfigLoader
from src.cli.models import ServerSettings
from src.wiki_client.errors import ConfigError


class TestConfigLoaderLoad:
    """Test cases for ConfigLoader.load() method."""

    def test_load_valid_config_with_all_fields(self, tmp_path):
        """Load valid configuration with all fields specified."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
organization: testorg
project: " testproject "
url: https://tfs.example.com/tfs/DefaultCollection
default_branch: develop
api_version: "7.0"
timeout: 12.5
""")

        result = ConfigLoader.load(str(config_file))

        assert result == ServerSettings(
            organization="testorg",
            project="testproject",
            url="https://tfs.example.com/tfs/DefaultCollection",
            default_branch="develop",
            api_version="7.0",
            timeout=12.5,
        )

    def test_missing_file_gives_defaults(self, tmp_path):
        """A missing settings file is not an error."""
        result = ConfigLoader.load(str(tmp_path / "nope.yaml"))

        assert result == ServerSettings()
        assert result.default_branch == "main"
        assert result.api_version == "7.1"
        assert result.timeout == 30

    @pytest.mark.parametrize("content", ["", "   \n", "~\n"])
    def test_empty_file_gives_defaults(self, tmp_path, content):
        """Empty or null documents give defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        assert ConfigLoader.load(str(config_file)) == ServerSettings()

    def test_invalid_yaml_raises(self, tmp_path):
        """Broken YAML raises ConfigError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("organization: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(str(config_file))
        assert "Invalid YAML syntax" in str(exc_info.value)

    def test_non_dict_raises(self, tmp_path):
        """A top-level list is rejected."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(str(config_file))
        assert "got list" in str(exc_info.value)

    def test_unknown_field_raises(self, tmp_path):
        """Typos in field names are reported."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("organisation: testorg\n")

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(str(config_file))
        assert "organisation" in str(exc_info.value)

    @pytest.mark.parametrize("content,field", [
        ("project: ''\n", "project"),
        ("organization: 5\n", "organization"),
        ("url: not-a-url\n", "url"),
        ("timeout: 0\n", "timeout"),
        ("timeout: fast\n", "timeout"),
        ("timeout: true\n", "timeout"),
    ])
    def test_invalid_values_raise(self, tmp_path, content, field):
        """Field values are validated."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader.load(str(config_file))
        assert exc_info.value.config_field == field

    def test_directory_path_raises(self, tmp_path):
        """A path that cannot be read as a file raises ConfigError."""
        with pytest.raises(ConfigError):
            ConfigLoader.load(str(tmp_path))


class TestServerSettings:
    """Test cases for ServerSettings."""

    def test_connection_defaults_skip_unset_values(self):
        """Only configured values are passed on to the authenticator."""
        settings = ServerSettings(organization="o", url="https://x")
        assert settings.connection_defaults() == {'organization': 'o', 'url': 'https://x'}
