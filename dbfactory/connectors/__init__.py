"""
Connectors package - database handshake implementations.

Provides connectors for the built-in drivers:
- mysql: MySQL / MariaDB via PyMySQL
- pgsql: PostgreSQL via psycopg2
- sqlite: Local files and in-memory databases
- sqlsrv: SQL Server via pyodbc
"""

from dbfactory.connectors.base import BaseConnector, DatabaseConnectionError
from dbfactory.connectors.mysql import MySqlConnector
from dbfactory.connectors.postgres import PostgresConnector
from dbfactory.connectors.sqlite import SQLiteConnector
from dbfactory.connectors.sqlserver import SqlServerConnector


# Registry mapping driver names to connector classes
CONNECTOR_REGISTRY: dict[str, type[BaseConnector]] = {
    'mysql': MySqlConnector,
    'pgsql': PostgresConnector,
    'sqlite': SQLiteConnector,
    'sqlsrv': SqlServerConnector,
}


def get_connector(driver: str) -> type[BaseConnector] | None:
    """
    Get the built-in connector class for a driver.

    Args:
        driver: Driver name

    Returns:
        Connector class or None if not found
    """
    return CONNECTOR_REGISTRY.get(driver)


def list_connector_types() -> list[str]:
    """Return list of built-in driver names."""
    return list(CONNECTOR_REGISTRY.keys())


__all__ = [
    'BaseConnector',
    'DatabaseConnectionError',
    'MySqlConnector',
    'PostgresConnector',
    'SQLiteConnector',
    'SqlServerConnector',
    'CONNECTOR_REGISTRY',
    'get_connector',
    'list_connector_types',
]
