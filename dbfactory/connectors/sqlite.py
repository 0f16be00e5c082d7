"""
SQLite database connector for local development and testing.

SQLite is useful for local development, testing, and demos without
requiring a full database server setup.
"""

import sqlite3
from pathlib import Path

from dbfactory.connectors.base import BaseConnector, DatabaseConnectionError


class SQLiteConnector(BaseConnector):
    """
    Connector for SQLite databases.

    Configuration options:
        database: Path to an existing SQLite file, or ":memory:"
        timeout: Busy timeout in seconds (default: 30)
        foreign_keys: Enforce foreign key constraints (default: True)

    Example configuration:

        local_db:
          driver: sqlite
          database: ./data/test.db

        memory_db:
          driver: sqlite
          database: ":memory:"
    """

    connector_type = "sqlite"

    def connect(self, config: dict) -> sqlite3.Connection:
        """Open the SQLite database named in the configuration."""
        db_path = config.get('database') or ':memory:'

        if db_path != ':memory:' and not Path(db_path).exists():
            raise DatabaseConnectionError(f"Database ({db_path}) does not exist.")

        options = self.get_options(config, {'timeout': config.get('timeout', 30)})

        connection = None
        try:
            connection = sqlite3.connect(db_path, **options)

            if config.get('foreign_keys', True):
                connection.execute("PRAGMA foreign_keys = ON")

            # Return rows as sqlite3.Row for dict-like access
            connection.row_factory = sqlite3.Row
            return connection

        except sqlite3.Error as e:
            if connection is not None:
                connection.close()
            raise DatabaseConnectionError(f"Failed to connect to SQLite: {e}") from e
