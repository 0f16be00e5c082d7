"""
PostgreSQL connection variant.
"""

from dbfactory.connections.base import Connection


class PostgresConnection(Connection):
    """Connection to a PostgreSQL server."""

    driver_name = "pgsql"

    def get_schema(self) -> str:
        """Return the configured schema, 'public' when unset."""
        schema = self.config.get('schema') or 'public'
        if isinstance(schema, list):
            return schema[0]
        return schema
