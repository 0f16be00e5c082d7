"""
SQL Server database connector using pyodbc.

Supports both Windows Authentication (trusted connection) and
SQL Server Authentication (username/password).
"""

from typing import Any

from dbfactory.connectors.base import BaseConnector, DatabaseConnectionError


class SqlServerConnector(BaseConnector):
    """
    Connector for Microsoft SQL Server databases.

    Configuration options:
        host: Server hostname or IP address
        database: Database name
        port: Port number (default: 1433)
        trusted_connection: Use Windows Authentication (default: False)
        username: SQL Server login username
        password: SQL Server login password
        odbc_driver: ODBC driver name (default: auto-detect)
        timeout: Connection timeout in seconds (default: 30)

    Example configurations:

        # Windows Authentication
        sqlserver_prod:
          driver: sqlsrv
          host: server.domain.com
          database: production
          trusted_connection: true

        # SQL Authentication
        sqlserver_dev:
          driver: sqlsrv
          host: localhost
          database: development
          username: app_user
          password: ${DB_PASSWORD}
    """

    connector_type = "sqlsrv"

    # Common ODBC drivers in preference order
    DRIVERS = [
        'ODBC Driver 18 for SQL Server',
        'ODBC Driver 17 for SQL Server',
        'SQL Server Native Client 11.0',
        'SQL Server',
    ]

    def connect(self, config: dict) -> Any:
        """Establish connection to SQL Server."""
        import pyodbc

        try:
            connection_string = self.build_connection_string(config)
            return pyodbc.connect(connection_string, **self.get_options(config))
        except pyodbc.Error as e:
            raise DatabaseConnectionError(f"Failed to connect to SQL Server: {e}") from e

    def build_connection_string(self, config: dict) -> str:
        """Build ODBC connection string from config."""
        host = config.get('host', 'localhost')
        database = config.get('database', '')
        port = config.get('port', 1433)
        trusted = config.get('trusted_connection', False)
        timeout = config.get('timeout', 30)

        driver = config.get('odbc_driver') or self._detect_driver()

        parts = [
            f"DRIVER={{{driver}}}",
            f"SERVER={host},{port}",
            f"DATABASE={database}",
            f"Connection Timeout={timeout}",
        ]

        if trusted:
            parts.append("Trusted_Connection=yes")
        else:
            username = config.get('username', '')
            password = config.get('password', '')
            parts.append(f"UID={self.escape_value(username)}")
            parts.append(f"PWD={self.escape_value(password)}")

        if 'ODBC Driver 18' in driver:
            # Driver 18 requires explicit encryption settings
            encrypt = config.get('encrypt', 'yes')
            trust_cert = config.get('trust_server_certificate', 'yes')
            parts.append(f"Encrypt={encrypt}")
            parts.append(f"TrustServerCertificate={trust_cert}")

        return ';'.join(parts)

    def escape_value(self, value) -> str:
        """Brace-quote a connection string value so ; and } survive."""
        return '{' + str(value).replace('}', '}}') + '}'

    def _detect_driver(self) -> str:
        """Detect available ODBC driver."""
        import pyodbc

        available_drivers = pyodbc.drivers()

        for driver in self.DRIVERS:
            if driver in available_drivers:
                return driver

        # Fall back to the first driver that looks like SQL Server
        for driver in available_drivers:
            if 'sql server' in driver.lower():
                return driver

        raise DatabaseConnectionError(
            f"No SQL Server ODBC driver found. Available drivers: {available_drivers}"
        )
