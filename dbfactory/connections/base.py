"""
Base connection class wrapping raw driver handles.

A Connection is what ConnectionFactory.make() returns. It holds the
logical database name, table prefix and full configuration, and opens
its read and write handles lazily through the factory that built it.
"""

import logging
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from dbfactory.factory import ConnectionFactory


logger = logging.getLogger(__name__)


class Connection:
    """
    Application-facing database connection.

    Subclasses set:
        - driver_name: Driver identifier
        - quote_identifier(): Driver-specific identifier quoting
    """

    driver_name: str = "base"  # Override in subclasses

    def __init__(
        self,
        database: str | None,
        prefix: str = '',
        config: dict | None = None,
        factory: "ConnectionFactory | None" = None,
    ):
        """
        Initialize connection.

        Args:
            database: Logical database name
            prefix: Table prefix applied by table()
            config: Full connection configuration, including read/write roles
            factory: Factory used to open raw handles on demand
        """
        self.database = database
        self.prefix = prefix
        self.config = config or {}
        self.factory = factory

        self._write_handle = None
        self._read_handle = None

    def get_name(self) -> str | None:
        """Return the logical connection name."""
        return self.config.get('name')

    def get_database_name(self) -> str | None:
        return self.database

    def get_table_prefix(self) -> str:
        return self.prefix

    def set_table_prefix(self, prefix: str) -> None:
        self.prefix = prefix

    def get_config(self, key: str | None = None) -> Any:
        """Return the whole configuration, or a single option."""
        if key is None:
            return self.config
        return self.config.get(key)

    def table(self, name: str) -> str:
        """Return the prefixed table name."""
        return f"{self.prefix}{name}"

    def quote_identifier(self, name: str) -> str:
        """
        Quote a table or column name for safe use in SQL.

        Default implementation uses ANSI double quotes.
        Override in subclasses for database-specific quoting.
        """
        clean_name = name.strip('[]"\'`')
        return f'"{clean_name}"'

    def get_write_handle(self) -> Any:
        """Return the raw write handle, connecting on first use."""
        if self._write_handle is None:
            self._write_handle = self._require_factory().create_write_connection(self.config)
            logger.debug("Opened write handle for connection %s", self.get_name())
        return self._write_handle

    def get_read_handle(self) -> Any:
        """
        Return the raw read handle, connecting on first use.

        Without a 'read' role the write handle serves reads too.
        """
        if self._read_handle is None:
            if self.config.get('read') is None:
                return self.get_write_handle()
            self._read_handle = self._require_factory().create_read_connection(self.config)
            logger.debug("Opened read handle for connection %s", self.get_name())
        return self._read_handle

    def _require_factory(self) -> "ConnectionFactory":
        if self.factory is None:
            raise RuntimeError(
                f"Connection {self.get_name()!r} has no factory to open handles with"
            )
        return self.factory

    def select(self, query: str, params: Any = None) -> list[dict]:
        """
        Run a query on the read handle and return rows as dictionaries.

        Args:
            query: SQL query string
            params: Driver-style query parameters

        Returns:
            List of dictionaries, one per row
        """
        cursor = self.get_read_handle().cursor()
        try:
            self._execute(cursor, query, params)
            if not cursor.description:
                return []
            return self._rows_to_dicts(cursor, cursor.fetchall())
        finally:
            cursor.close()

    def statement(self, query: str, params: Any = None) -> int:
        """
        Run a write statement on the write handle and commit.

        Returns:
            Number of affected rows as reported by the driver
        """
        handle = self.get_write_handle()
        cursor = handle.cursor()
        try:
            self._execute(cursor, query, params)
            handle.commit()
            return cursor.rowcount
        finally:
            cursor.close()

    def test_connection(self) -> bool:
        """
        Test if the connection is working.

        Returns:
            True if a trivial query succeeds on the read handle
        """
        rows = self.select("SELECT 1 AS test")
        return bool(rows) and list(rows[0].values())[0] == 1

    def disconnect(self) -> None:
        """Close any open raw handles."""
        for handle in (self._read_handle, self._write_handle):
            if handle is not None:
                handle.close()
        self._read_handle = None
        self._write_handle = None

    @property
    def is_connected(self) -> bool:
        """Check if any raw handle is open."""
        return self._write_handle is not None or self._read_handle is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close handles."""
        self.disconnect()
        return False  # Don't suppress exceptions

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} name={self.get_name()!r} "
            f"database={self.database!r} prefix={self.prefix!r}>"
        )

    def _execute(self, cursor, query: str, params: Any) -> None:
        if params:
            cursor.execute(query, params)
        else:
            cursor.execute(query)

    def _rows_to_dicts(self, cursor, rows: list) -> list[dict]:
        """
        Convert database rows to list of dictionaries.

        Args:
            cursor: Database cursor with description
            rows: List of row tuples

        Returns:
            List of dictionaries with column names as keys
        """
        if not rows:
            return []

        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in rows]
