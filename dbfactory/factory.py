"""
Connection factory - turns connection configuration into live connections.

Resolves read/write replicas, picks a connector or connection class for
the configured driver, and checks the registry for overrides before
falling back to the built-in drivers.
"""

import logging
from typing import Any

from dbfactory.config_loader import (
    MissingDriverError,
    UnsupportedDriverError,
    normalize_config,
    resolve_role_config,
)
from dbfactory.connections import CONNECTION_REGISTRY, Connection
from dbfactory.connectors import CONNECTOR_REGISTRY, BaseConnector
from dbfactory.registry import Registry, connection_key, connector_key


logger = logging.getLogger(__name__)


class ConnectionFactory:
    """
    Build database connections from configuration records.

    Handles:
    - Filling in configuration defaults
    - Picking one replica per read/write role
    - Dispatching to registry overrides or built-in drivers
    """

    def __init__(self, registry: Registry | None = None, rng=None):
        """
        Initialize connection factory.

        Args:
            registry: Driver overrides checked before built-ins
            rng: Object with a choice() method used to pick replicas
                 (default: the random module)
        """
        self.registry = registry if registry is not None else Registry()
        self.rng = rng

    def make(self, config: dict, name: str | None = None) -> Connection:
        """
        Build a connection for a single configuration.

        Args:
            config: Connection configuration
            name: Logical connection name

        Returns:
            Connection for the configured driver
        """
        config = normalize_config(config, name)

        return self.create_connection(
            config.get('driver'), config.get('database'), config['prefix'], config
        )

    def create_read_connection(self, config: dict) -> Any:
        """
        Open a raw connection to the read endpoint.

        Args:
            config: Connection configuration, possibly with a 'read' role

        Returns:
            Raw handle returned by the connector
        """
        read_config = self.get_read_config(config)

        return self.create_connector(read_config).connect(read_config)

    def create_write_connection(self, config: dict) -> Any:
        """
        Open a raw connection to the write endpoint.

        Args:
            config: Connection configuration, possibly with a 'write' role

        Returns:
            Raw handle returned by the connector
        """
        write_config = self.get_write_config(config)

        return self.create_connector(write_config).connect(write_config)

    def get_read_config(self, config: dict) -> dict:
        """Resolve the flat configuration for the read role."""
        return self._resolve_role(config, 'read')

    def get_write_config(self, config: dict) -> dict:
        """Resolve the flat configuration for the write role."""
        return self._resolve_role(config, 'write')

    def _resolve_role(self, config: dict, role: str) -> dict:
        resolved = resolve_role_config(config, role, self.rng)
        logger.debug(
            "Resolved %s config for connection %s: driver=%s host=%s database=%s",
            role, resolved.get('name'), resolved.get('driver'),
            resolved.get('host'), resolved.get('database'),
        )
        return resolved

    def create_connector(self, config: dict) -> BaseConnector:
        """
        Create a connector instance based on the configuration.

        Args:
            config: Flat connection configuration with a 'driver' key

        Returns:
            Registered override, or a new built-in connector

        Raises:
            MissingDriverError: If no driver is configured
            UnsupportedDriverError: If the driver is unknown
        """
        if not config.get('driver'):
            raise MissingDriverError()

        driver = config['driver']

        key = connector_key(driver)
        if self.registry.bound(key):
            logger.debug("Using registered connector for driver %s", driver)
            return self.registry.resolve(key)

        connector_class = CONNECTOR_REGISTRY.get(driver)
        if connector_class is None:
            raise UnsupportedDriverError(driver)

        return connector_class()

    def create_connection(
        self,
        driver: str | None,
        database: str | None,
        prefix: str = '',
        config: dict | None = None,
    ) -> Connection:
        """
        Create a new connection instance.

        Args:
            driver: Driver name
            database: Logical database name
            prefix: Table prefix
            config: Full connection configuration

        Returns:
            Registered override, or a built-in Connection subclass

        Raises:
            MissingDriverError: If driver is empty
            UnsupportedDriverError: If the driver is unknown
        """
        if not driver:
            raise MissingDriverError()

        config = config if config is not None else {}

        key = connection_key(driver)
        if self.registry.bound(key):
            logger.debug("Using registered connection for driver %s", driver)
            return self.registry.resolve(key, [database, prefix, config, self])

        connection_class = CONNECTION_REGISTRY.get(driver)
        if connection_class is None:
            raise UnsupportedDriverError(driver)

        return connection_class(database, prefix, config, self)
