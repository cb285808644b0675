"""YAML settings loading and validation.

This module loads the optional settings file that supplies connection
defaults for the CLI and the MCP server. A missing file is not an error:
everything can come from the environment instead.
"""

from typing import Any, Dict

import yaml

from src.wiki_client.auth import validate_url
from src.wiki_client.errors import ConfigError
from .models import ServerSettings


class ConfigLoader:
    """Handles settings file loading and validation.

    Settings file structure (every key optional):
        organization: "myorg"
        project: "myproject"
        url: "https://tfs.example.com/tfs/DefaultCollection"
        default_branch: "main"
        api_version: "7.1"
        timeout: 30
    """

    DEFAULT_CONFIG_PATH = '.azure-wiki/config.yaml'

    STRING_FIELDS = ('organization', 'project', 'url', 'default_branch', 'api_version')
    KNOWN_FIELDS = set(STRING_FIELDS) | {'timeout'}

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> ServerSettings:
        """Load and parse settings from a YAML file.

        Args:
            config_path: Path to the YAML settings file

        Returns:
            ServerSettings; defaults when the file does not exist or is empty

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return ServerSettings()
        except PermissionError:
            raise ConfigError(f"Permission denied reading {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        if not content.strip():
            return ServerSettings()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return ServerSettings()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ServerSettings:
        """Validate the raw dictionary and build ServerSettings.

        Raises:
            ConfigError: If a field has the wrong type or value
        """
        unknown = set(config_dict.keys()) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        for name in cls.STRING_FIELDS:
            if name not in config_dict:
                continue
            value = config_dict[name]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError("must be a non-empty string", config_field=name)
            values[name] = value.strip()

        if 'url' in values:
            validate_url(values['url'], field_name='url')

        if 'timeout' in config_dict:
            timeout = config_dict['timeout']
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
                raise ConfigError("must be a positive number", config_field='timeout')
            values['timeout'] = timeout

        return ServerSettings(**values)
