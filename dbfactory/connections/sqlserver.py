"""
SQL Server connection variant.
"""

from typing import Any

from dbfactory.connections.base import Connection


class SqlServerConnection(Connection):
    """Connection to Microsoft SQL Server."""

    driver_name = "sqlsrv"

    def quote_identifier(self, name: str) -> str:
        """Quote identifier using SQL Server brackets."""
        clean_name = name.strip('[]"\'`')
        return f'[{clean_name}]'

    def _execute(self, cursor, query: str, params: Any) -> None:
        # pyodbc only binds positional parameters
        if isinstance(params, dict):
            params = list(params.values())
        super()._execute(cursor, query, params)
