"""
Configuration loading and normalization for database connections.

Handles YAML parsing, environment variable substitution, validation,
and the read/write replica resolution applied before connecting.
"""

import os
import random
import re
from pathlib import Path
from typing import Any

import yaml


ROLES = ('read', 'write')


class ConfigError(Exception):
    """Raised when a connection configuration is invalid or missing."""
    pass


class MissingDriverError(ConfigError):
    """Raised when a configuration does not name a driver."""

    def __init__(self, message: str = "A driver must be specified."):
        super().__init__(message)


class UnsupportedDriverError(ConfigError):
    """Raised when no registered or built-in driver matches."""

    def __init__(self, driver: str):
        self.driver = driver
        super().__init__(f"Unsupported driver [{driver}]")


class EmptyReplicaListError(ConfigError):
    """Raised when a read or write role lists no alternatives."""

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"The '{role}' configuration lists no hosts to choose from")


def normalize_config(config: dict, name: str | None = None) -> dict:
    """
    Fill in the defaults every connection configuration carries.

    Args:
        config: Raw connection configuration
        name: Logical connection name

    Returns:
        New configuration with 'prefix' and 'name' present
    """
    normalized = dict(config)
    normalized.setdefault('prefix', '')
    normalized.setdefault('name', name)
    return normalized


def get_role_config(config: dict, role: str, rng=None) -> dict:
    """
    Pick the configuration fragment for a read or write role.

    A list of fragments represents equivalent replicas and one is chosen
    at random. When the role is not configured, the base configuration
    serves both roles.

    Args:
        config: Base connection configuration
        role: 'read' or 'write'
        rng: Object with a choice() method (default: the random module)

    Returns:
        The selected role fragment

    Raises:
        EmptyReplicaListError: If the role is an empty list
        ConfigError: If the role is neither a mapping nor a list
    """
    role_config = config.get(role)
    if role_config is None:
        return config

    if isinstance(role_config, (list, tuple)):
        if not role_config:
            raise EmptyReplicaListError(role)
        return (rng or random).choice(role_config)

    if not isinstance(role_config, dict):
        raise ConfigError(
            f"The '{role}' configuration must be a mapping or a list of mappings, "
            f"got {type(role_config).__name__}"
        )
    return role_config


def merge_role_config(config: dict, role_config: dict) -> dict:
    """Overlay a role fragment on the base config and drop nested role keys."""
    merged = {**config, **role_config}
    for role in ROLES:
        merged.pop(role, None)
    return merged


def resolve_role_config(config: dict, role: str, rng=None) -> dict:
    """
    Resolve a flat configuration for a read or write connection.

    Args:
        config: Base connection configuration, possibly with 'read'/'write'
        role: 'read' or 'write'
        rng: Object with a choice() method used for replica selection

    Returns:
        Flat configuration without 'read'/'write' keys
    """
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role}. Must be one of: {list(ROLES)}")
    return merge_role_config(config, get_role_config(config, role, rng))


class ConfigLoader:
    """Load and validate database connections from a YAML file."""

    ENV_PATTERN = re.compile(r'\$\{([^}]+)\}')

    def __init__(self, config_path: str | Path):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to the connections YAML file
        """
        self.config_path = Path(config_path)
        self._config: dict = {}

    def load(self) -> dict:
        """Load, parse and validate the configuration file."""
        self._config = self._load_yaml(self.config_path)
        self._validate_config()
        return self._config

    def _load_yaml(self, path: Path) -> dict:
        """Load YAML file with environment variable substitution."""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        with open(path, 'r') as f:
            content = f.read()

        content = self._substitute_env_vars(content)

        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    def _substitute_env_vars(self, content: str) -> str:
        """Replace ${VAR_NAME} patterns with environment variable values."""
        def replace_match(match):
            value = os.environ.get(match.group(1))
            if value is None:
                # Left in place, reported by validation
                return match.group(0)
            return value

        return self.ENV_PATTERN.sub(replace_match, content)

    def _validate_config(self) -> None:
        """Validate configuration structure and required fields."""
        connections = self._config.get('connections')
        if not connections or not isinstance(connections, dict):
            raise ConfigError("No database connections defined")

        for name, conn in connections.items():
            self._validate_connection(name, conn)

        default = self._config.get('default')
        if default is not None and default not in connections:
            raise ConfigError(f"Default connection not found: {default}")

    def _validate_connection(self, name: str, conn: Any) -> None:
        """Validate a single database connection definition."""
        if not isinstance(conn, dict):
            raise ConfigError(f"Connection '{name}' must be a mapping")

        if not conn.get('driver'):
            raise MissingDriverError(f"Connection '{name}' missing 'driver' field")

        for key, value in self._iter_values(conn):
            if isinstance(value, str) and self.ENV_PATTERN.search(value):
                raise ConfigError(
                    f"Connection '{name}' has unresolved environment variable in '{key}': {value}"
                )

    def _iter_values(self, conn: dict, parent: str = ''):
        """Yield (dotted key, value) pairs, descending into read/write fragments."""
        for key, value in conn.items():
            path = f"{parent}{key}"
            if isinstance(value, dict):
                yield from self._iter_values(value, f"{path}.")
            elif isinstance(value, list):
                for i, item in enumerate(value):
                    if isinstance(item, dict):
                        yield from self._iter_values(item, f"{path}[{i}].")
                    else:
                        yield f"{path}[{i}]", item
            else:
                yield path, value

    def get_default_connection_name(self) -> str:
        """Return the configured default connection, or the first one."""
        default = self._config.get('default')
        if default:
            return default
        names = self.get_connection_names()
        if not names:
            raise ConfigError("No database connections defined")
        return names[0]

    def get_connection(self, name: str | None = None) -> dict:
        """Get a copy of a connection configuration (default if name omitted)."""
        name = name or self.get_default_connection_name()
        connections = self._config.get('connections', {})
        if name not in connections:
            raise ConfigError(f"Connection not found: {name}")
        return dict(connections[name])

    def get_connection_names(self) -> list[str]:
        """Return list of available connection names."""
        return list(self._config.get('connections', {}).keys())


def load_config(config_path: str | Path) -> ConfigLoader:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to connections YAML

    Returns:
        Loaded ConfigLoader instance
    """
    loader = ConfigLoader(config_path)
    loader.load()
    return loader
