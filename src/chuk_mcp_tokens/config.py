"""
Config loader - discovers and loads tokens configuration files.

Configs can come from:
1. Built-in library (shipped with package)
2. Project configs (user's project config directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import ConfigError
from chuk_mcp_tokens.models.config import TokensConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "default"


class ConfigLoader:
    """
    Discovers and loads tokens configurations.

    Configs are loaded from YAML files in the library and project directories.
    Project configs override library configs with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the config loader.

        Args:
            library_path: Path to built-in config library
            project_path: Path to project config directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TokensConfig] = {}

    def list_configs(self) -> list[str]:
        """
        List all available config names.

        Unreadable files are skipped with a warning.
        """
        names: dict[str, None] = {}
        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                try:
                    self.load_file(path)
                except ConfigError as e:
                    logger.warning("Skipping config %s: %s", path, e)
                    continue
                names[path.stem] = None
        return list(names)

    def get_config(self, name: str = DEFAULT_CONFIG_NAME) -> TokensConfig:
        """
        Get a config by name.

        Project configs take precedence over library configs. An unknown
        name yields the built-in defaults.

        Args:
            name: Config name (file stem)

        Returns:
            The loaded configuration

        Raises:
            ConfigError: If the config file exists but is invalid
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                config = self.load_file(path)
                self._cache[name] = config
                return config

        logger.debug("No config named %r, using defaults", name)
        return TokensConfig()

    def load_file(self, path: Path) -> TokensConfig:
        """
        Load a config from a YAML file.

        Raises:
            ConfigError: If the file cannot be read, parsed, or validated
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(ErrorMessages.INVALID_CONFIG.format(path=path, error=e)) from e

        return self._parse_config(path, data or {})

    def save(self, config: TokensConfig, name: str) -> Path:
        """
        Write a config into the project directory.

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(config.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache.pop(name, None)
        return path

    def _parse_config(self, path: Path, data: Any) -> TokensConfig:
        """Validate parsed YAML data."""
        if not isinstance(data, dict):
            raise ConfigError(
                ErrorMessages.INVALID_CONFIG.format(path=path, error="root must be a mapping")
            )
        try:
            return TokensConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(ErrorMessages.INVALID_CONFIG.format(path=path, error=e)) from e

    def clear_cache(self) -> None:
        """Clear the config cache."""
        self._cache.clear()
