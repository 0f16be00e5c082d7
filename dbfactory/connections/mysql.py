"""
MySQL connection variant.
"""

from dbfactory.connections.base import Connection


class MySqlConnection(Connection):
    """Connection to a MySQL or MariaDB server."""

    driver_name = "mysql"

    def quote_identifier(self, name: str) -> str:
        """Quote identifier using MySQL backticks."""
        clean_name = name.strip('[]"\'`')
        return f'`{clean_name}`'
