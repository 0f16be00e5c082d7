"""
SQLite connection variant.
"""

from dbfactory.connections.base import Connection


class SQLiteConnection(Connection):
    """
    Connection to a SQLite database file.

    Rows come back as sqlite3.Row, which the base class converts
    to plain dictionaries.
    """

    driver_name = "sqlite"

    def get_tables(self) -> list[str]:
        """Get list of tables in the database."""
        query = """
            SELECT name
            FROM sqlite_master
            WHERE type = 'table'
              AND name NOT LIKE 'sqlite_%'
            ORDER BY name
        """
        return [r['name'] for r in self.select(query)]
