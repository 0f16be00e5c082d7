"""
dbfactory - Build database connections from declarative configuration.

Resolves read/write replica splits, dispatches on the configured driver
(mysql, pgsql, sqlite, sqlsrv) and lets callers override any driver
through an explicit registry.

Basic usage:
    from dbfactory.factory import ConnectionFactory

    factory = ConnectionFactory()

    # High-level connection, handles opened lazily
    connection = factory.make({'driver': 'sqlite', 'database': ':memory:'}, 'local')
    rows = connection.select("SELECT 1 AS one")

    # Raw handle to one of the read replicas
    handle = factory.create_read_connection({
        'driver': 'pgsql',
        'database': 'app',
        'read': [{'host': 'replica-1'}, {'host': 'replica-2'}],
        'write': {'host': 'primary'},
    })
"""

from dbfactory.config_loader import (
    ConfigError,
    EmptyReplicaListError,
    MissingDriverError,
    UnsupportedDriverError,
)
from dbfactory.factory import ConnectionFactory
from dbfactory.registry import Registry

__version__ = '1.0.0'

__all__ = [
    'ConfigError',
    'EmptyReplicaListError',
    'MissingDriverError',
    'UnsupportedDriverError',
    'ConnectionFactory',
    'Registry',
]
