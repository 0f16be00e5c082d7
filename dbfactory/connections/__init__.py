"""
Connections package - application-facing connection variants.

Each built-in driver has a Connection subclass constructed as
cls(database, prefix, config, factory).
"""

from dbfactory.connections.base import Connection
from dbfactory.connections.mysql import MySqlConnection
from dbfactory.connections.postgres import PostgresConnection
from dbfactory.connections.sqlite import SQLiteConnection
from dbfactory.connections.sqlserver import SqlServerConnection


# Registry mapping driver names to connection classes
CONNECTION_REGISTRY: dict[str, type[Connection]] = {
    'mysql': MySqlConnection,
    'pgsql': PostgresConnection,
    'sqlite': SQLiteConnection,
    'sqlsrv': SqlServerConnection,
}


def get_connection_class(driver: str) -> type[Connection] | None:
    """Get the built-in connection class for a driver, or None."""
    return CONNECTION_REGISTRY.get(driver)


__all__ = [
    'Connection',
    'MySqlConnection',
    'PostgresConnection',
    'SQLiteConnection',
    'SqlServerConnection',
    'CONNECTION_REGISTRY',
    'get_connection_class',
]
