"""YAML render configuration loading and validation.

Render options live in a flat YAML mapping. Every key is optional; missing
keys fall back to the RenderConfig defaults.
"""

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from ..errors import ConfigError, FilesystemError
from .models import RenderConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles render configuration loading, validation, and saving.

    Configuration file structure:
        breadcrumb_separator: " > "
        parent_path_segment: "../"
        index_filename: "index.html"
        subpage_separator: ", "
        timestamp_format: "%b %d, %Y %I:%M %p"
        max_ancestor_depth: 100
        announcements_limit: 10
    """

    STRING_FIELDS = {
        'breadcrumb_separator',
        'parent_path_segment',
        'index_filename',
        'subpage_separator',
        'timestamp_format',
    }

    # Minimum value for each integer field
    INT_FIELDS = {
        'max_ancestor_depth': 1,
        'announcements_limit': 0,
    }

    # Fields that may not be empty strings
    NON_EMPTY_FIELDS = {'parent_path_segment', 'index_filename', 'timestamp_format'}

    @classmethod
    def load(cls, config_path: str) -> RenderConfig:
        """Load and parse render configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            RenderConfig with parsed values; an empty file yields defaults

        Raises:
            FilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        path = Path(config_path)
        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            raise FilesystemError.from_os_error(config_path, 'read', e) from e

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {e}") from e

        if config_dict is None:
            logger.info(f"Configuration file {config_path} is empty, using defaults")
            return RenderConfig()
        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )
        return cls._parse_config(config_dict)

    @classmethod
    def save(cls, config_path: str, config: RenderConfig) -> None:
        """Save render configuration to a YAML file, creating parent directories.

        Raises:
            FilesystemError: If the directory or file cannot be written
        """
        path = Path(config_path)
        yaml_str = yaml.safe_dump(
            asdict(config),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        operation = 'create_directory'
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            operation = 'write'
            path.write_text(yaml_str, encoding='utf-8')
        except OSError as e:
            raise FilesystemError.from_os_error(config_path, operation, e) from e
        logger.debug(f"Saved render configuration to {config_path}")

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> RenderConfig:
        """Parse and validate configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated RenderConfig

        Raises:
            ConfigError: If configuration is invalid
        """
        known_fields = {f.name for f in fields(RenderConfig)}
        unknown_fields = set(config_dict.keys()) - known_fields
        if unknown_fields:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(str(k) for k in unknown_fields))}"
            )

        values = {}
        for name, value in config_dict.items():
            if name in cls.STRING_FIELDS:
                if not isinstance(value, str):
                    raise ConfigError(
                        f"Field '{name}' must be a string, got {type(value).__name__}",
                        name
                    )
                if name in cls.NON_EMPTY_FIELDS and not value.strip():
                    raise ConfigError(
                        f"Field '{name}' cannot be empty",
                        name
                    )
            else:
                # bool is a subclass of int, but "true" is never a depth
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigError(
                        f"Field '{name}' must be an integer, got {type(value).__name__}",
                        name
                    )
                minimum = cls.INT_FIELDS[name]
                if value < minimum:
                    raise ConfigError(
                        f"Field '{name}' must be at least {minimum}, got {value}",
                        name
                    )
            values[name] = value

        return RenderConfig(**values)
