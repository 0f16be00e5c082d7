"""
Base connector class defining the interface for database handshakes.

A connector turns a flat connection configuration into a raw DB-API
connection. Connectors keep no state between calls.
"""

from abc import ABC, abstractmethod
from typing import Any


class DatabaseConnectionError(Exception):
    """Raised when a database connection cannot be established."""
    pass


class BaseConnector(ABC):
    """
    Abstract base class for database connectors.

    Subclasses must implement:
        - connect(config): Open and return a raw connection
    """

    connector_type: str = "base"  # Override in subclasses

    @abstractmethod
    def connect(self, config: dict) -> Any:
        """
        Establish a connection to the database.

        Args:
            config: Flat connection configuration

        Returns:
            Raw DB-API connection handle

        Raises:
            DatabaseConnectionError: If connection fails
        """
        pass

    def get_options(self, config: dict, defaults: dict | None = None) -> dict:
        """
        Merge user-supplied driver options over connector defaults.

        Args:
            config: Connection configuration with optional 'options' mapping
            defaults: Connector default keyword arguments

        Returns:
            Keyword arguments for the driver's connect()
        """
        options = config.get('options') or {}
        return {**(defaults or {}), **options}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} driver={self.connector_type!r}>"
