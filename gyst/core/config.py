"""Configuration management for Gyst.

Repository settings live in ``.gyst/config`` in INI format. Gyst reads
no global config and no environment variables.
"""

import configparser
from pathlib import Path
from typing import Optional


# Layout version written by ``gyst init``.
REPOSITORY_FORMAT_VERSION = 1


class Config:
    """
    Manages the repository configuration file.

    Example:
        [core]
        repositoryformatversion = 1
    """

    def __init__(self, config_path: Path):
        """
        Initialize Config manager.

        Args:
            config_path: Path to the repository config file
        """
        self.config_path = Path(config_path)
        self._config: Optional[configparser.ConfigParser] = None

    @property
    def config(self) -> configparser.ConfigParser:
        """Load and return repository configuration."""
        if self._config is None:
            self._config = configparser.ConfigParser()
            if self.config_path.exists():
                self._config.read(self.config_path)
        return self._config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value.

        Args:
            section: Config section (e.g., 'core')
            key: Config key (e.g., 'repositoryformatversion')
            fallback: Default value if not found

        Returns:
            Configuration value or fallback
        """
        if self.config.has_option(section, key):
            return self.config.get(section, key)
        return fallback

    def get_int(self, section: str, key: str, fallback: int = 0) -> int:
        """Get a configuration value as an integer."""
        value = self.get(section, key)
        if value is None:
            return fallback
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{section}.{key} must be an integer, got {value!r}")

    def set(self, section: str, key: str, value: str) -> None:
        """
        Set a configuration value and write the file.

        Args:
            section: Config section
            key: Config key
            value: Value to set
        """
        config = self.config
        if not config.has_section(section):
            config.add_section(section)

        config.set(section, key, value)

        with open(self.config_path, 'w') as f:
            config.write(f)

    @property
    def format_version(self) -> int:
        """
        Repository layout version.

        Repositories created before the config file existed report 0.
        """
        return self.get_int('core', 'repositoryformatversion', fallback=0)

    def __repr__(self) -> str:
        return f"Config(path={self.config_path})"
