"""
MySQL database connector using PyMySQL.
"""

from typing import Any

from dbfactory.connectors.base import BaseConnector, DatabaseConnectionError


class MySqlConnector(BaseConnector):
    """
    Connector for MySQL and MariaDB servers.

    Configuration options:
        host: Server hostname (default: localhost)
        port: Port number (default: 3306)
        unix_socket: Socket path, used instead of host/port when set
        database: Database name
        username: Login username
        password: Login password
        charset: Connection character set (default: utf8mb4)
        collation: Collation applied with SET NAMES
        timezone: Session time zone, e.g. '+00:00'
        options: Extra keyword arguments for pymysql.connect()
    """

    connector_type = "mysql"

    def connect(self, config: dict) -> Any:
        """Establish connection to MySQL and apply session settings."""
        import pymysql

        charset = config.get('charset', 'utf8mb4')
        defaults = {
            'user': config.get('username', ''),
            'password': config.get('password', ''),
            'database': config.get('database'),
            'charset': charset,
        }
        if config.get('unix_socket'):
            defaults['unix_socket'] = config['unix_socket']
        else:
            defaults['host'] = config.get('host', 'localhost')
            defaults['port'] = int(config.get('port', 3306))

        connection = None
        try:
            connection = pymysql.connect(**self.get_options(config, defaults))

            with connection.cursor() as cursor:
                collation = config.get('collation')
                if collation:
                    cursor.execute(f"SET NAMES {charset} COLLATE {collation}")
                if config.get('timezone'):
                    cursor.execute("SET time_zone = %s", (config['timezone'],))

            return connection

        except pymysql.Error as e:
            if connection is not None:
                connection.close()
            raise DatabaseConnectionError(f"Failed to connect to MySQL: {e}") from e
