"""
Configuration management utilities.

This module loads the TOML configuration file and feeds the secrets it
references into a ``SecretStore`` before the pipe is assembled.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_CONFIG_PATH, KNOWN_SECRETS, SECRET_ENV_PREFIX, SECRETS_SECTION
from .secret_store import SecretStore


class ConfigManager:
    """
    Manages configuration loading and access.

    Example configuration::

        version = "latest"

        [source]
        type = "gitlab"
        repo = "group/project"
        token = "glpat-..."

        [target]
        type = "file"
        path = "public"

        [apk]
        key-name = "me@example.com.rsa.pub"

        [secrets]
        rsa_key = "~/.keys/appcast.pem"
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses appcast.toml.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to load configuration from {self.config_path}: {e}") from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "source.type").

        Args:
            key: Configuration key (supports dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.load()
        for k in key.split("."):
            if not isinstance(value, dict) or value.get(k) is None:
                return default
            value = value[k]
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Section name (e.g., "source")

        Returns:
            Dictionary containing section data, or empty dict if section not found
        """
        value = self.load().get(section, {})
        return value if isinstance(value, dict) else {}

    def has_key(self, key: str) -> bool:
        """
        Check if a configuration key exists.

        Args:
            key: Configuration key (supports dot notation)

        Returns:
            True if key exists, False otherwise
        """
        try:
            self.load()
        except (FileNotFoundError, ValueError):
            return False
        return self.get(key) is not None

    def pipe_tree(self) -> Dict[str, Any]:
        """
        Return the configuration tree consumed by the pipe assembler.

        The secrets table only points at key material and is left out.
        """
        return {k: v for k, v in self.load().items() if k != SECRETS_SECTION}

    def load_secrets(self, store: SecretStore) -> List[str]:
        """
        Put every configured secret into ``store``.

        For each known secret name, the environment variable
        ``APPCAST_<NAME>`` wins over a file path given in the secrets table.
        Relative paths are resolved against the configuration file's directory.

        Args:
            store: Store to populate

        Returns:
            Names of the secrets that were stored

        Raises:
            ValueError: If a referenced key file cannot be read
        """
        paths = self.get_section(SECRETS_SECTION)
        loaded = []

        for name in KNOWN_SECRETS:
            env_value = os.environ.get(SECRET_ENV_PREFIX + name.upper())
            if env_value:
                store.put(name, env_value.encode())
                logging.debug("Loaded secret %s from environment", name)
                loaded.append(name)
                continue

            path_value = paths.get(name)
            if not path_value:
                continue

            path = Path(path_value).expanduser()
            if not path.is_absolute():
                path = self.config_path.parent / path
            try:
                store.put(name, path.read_bytes())
            except OSError as e:
                raise ValueError(f"Failed to read secret {name} from {path}: {e}") from e
            logging.debug("Loaded secret %s from %s", name, path)
            loaded.append(name)

        unknown = sorted(set(paths) - set(KNOWN_SECRETS))
        if unknown:
            logging.warning("Ignoring unknown secrets: %s", ", ".join(unknown))

        return loaded

    def reload(self) -> None:
        """Force reload configuration from file."""
        self._config = None
        self.load()


__all__ = ["ConfigManager"]
