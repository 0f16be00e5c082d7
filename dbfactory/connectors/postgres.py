"""
PostgreSQL database connector using psycopg2.
"""

from typing import Any

from dbfactory.connectors.base import BaseConnector, DatabaseConnectionError


class PostgresConnector(BaseConnector):
    """
    Connector for PostgreSQL servers.

    Configuration options:
        host: Server hostname (default: localhost)
        port: Port number (default: 5432)
        database: Database name
        username: Login username
        password: Login password
        sslmode: libpq sslmode (disable, require, verify-full, ...)
        charset: Client encoding (default: utf8)
        timezone: Session time zone
        schema: Schema name or list of names for search_path
        options: Extra keyword arguments for psycopg2.connect()
    """

    connector_type = "pgsql"

    def connect(self, config: dict) -> Any:
        """Establish connection to PostgreSQL and apply session settings."""
        import psycopg2

        defaults = {
            'host': config.get('host', 'localhost'),
            'port': int(config.get('port', 5432)),
            'dbname': config.get('database'),
            'user': config.get('username', ''),
            'password': config.get('password', ''),
        }
        if config.get('sslmode'):
            defaults['sslmode'] = config['sslmode']

        connection = None
        try:
            connection = psycopg2.connect(**self.get_options(config, defaults))
            connection.set_client_encoding(config.get('charset', 'utf8'))

            with connection.cursor() as cursor:
                if config.get('timezone'):
                    cursor.execute("SET time zone %s", (config['timezone'],))
                if config.get('schema'):
                    cursor.execute(f"SET search_path TO {self.format_schema(config['schema'])}")

            return connection

        except psycopg2.Error as e:
            if connection is not None:
                connection.close()
            raise DatabaseConnectionError(f"Failed to connect to PostgreSQL: {e}") from e

    def format_schema(self, schema: str | list[str]) -> str:
        """Quote one schema name or a list of them for search_path."""
        if isinstance(schema, str):
            schema = [schema]
        return ', '.join('"' + s.replace('"', '""') + '"' for s in schema)
