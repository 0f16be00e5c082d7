"""
Connection checker - builds configured connections and verifies them.

Resolves the target endpoint for a role, opens it through the
ConnectionFactory, and runs a trivial query to confirm it answers.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from dbfactory.config_loader import ConfigLoader, merge_role_config
from dbfactory.factory import ConnectionFactory


logger = logging.getLogger(__name__)

SECRET_KEYS = {'password', 'passwd', 'pwd', 'secret'}
MASK = '******'

ROLE_CHOICES = ('default', 'read', 'write')


def mask_config(config: dict) -> dict:
    """Return a copy of config with secret values masked, recursively."""
    masked = {}
    for key, value in config.items():
        if key.lower() in SECRET_KEYS and value:
            masked[key] = MASK
        elif isinstance(value, dict):
            masked[key] = mask_config(value)
        elif isinstance(value, list):
            masked[key] = [mask_config(v) if isinstance(v, dict) else v for v in value]
        else:
            masked[key] = value
    return masked


@dataclass
class CheckResult:
    """
    Outcome of a single connection check.

    Attributes:
        connection_name: Name of the checked connection
        driver: Configured driver name
        role: 'default', 'read' or 'write'
        passed: Whether the connection answered the test query
        target: Resolved configuration for the role, secrets masked
        timestamp: When the check ran
        duration_ms: Time taken to connect and query
        error_message: Error if the check failed
    """
    connection_name: str
    driver: str | None
    role: str
    passed: bool
    target: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)
    duration_ms: float = 0.0
    error_message: str | None = None

    @property
    def failed(self) -> bool:
        """Convenience property for checking failure."""
        return not self.passed

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'connection_name': self.connection_name,
            'driver': self.driver,
            'role': self.role,
            'passed': self.passed,
            'target': self.target,
            'timestamp': self.timestamp.isoformat(),
            'duration_ms': self.duration_ms,
            'error_message': self.error_message,
        }


class ConnectionChecker:
    """
    Check configured connections end to end.

    Configuration errors propagate to the caller; connection failures
    are recorded in the returned CheckResult.
    """

    def __init__(self, config: ConfigLoader, factory: ConnectionFactory | None = None):
        """
        Initialize connection checker.

        Args:
            config: Loaded connection configuration
            factory: Factory used to build connections
        """
        self.config = config
        self.factory = factory or ConnectionFactory()

    def check(self, connection_name: str | None = None, role: str = 'default') -> CheckResult:
        """
        Open a connection and run a test query against it.

        Args:
            connection_name: Connection to check (default: configured default)
            role: Which endpoint to check

        Returns:
            CheckResult describing the outcome
        """
        if role not in ROLE_CHOICES:
            raise ValueError(f"Unknown role: {role}. Must be one of: {list(ROLE_CHOICES)}")

        name = connection_name or self.config.get_default_connection_name()
        connection = self.factory.make(self.config.get_connection(name), name)
        config = connection.get_config()

        if role == 'read':
            target = self.factory.get_read_config(config)
        elif role == 'write':
            target = self.factory.get_write_config(config)
        else:
            target = merge_role_config(config, {})

        connector = self.factory.create_connector(target)

        start = time.time()
        try:
            # Connect to the resolved target so the reported replica is the checked one
            handle = connector.connect(target)
            try:
                cursor = handle.cursor()
                cursor.execute("SELECT 1")
                passed = cursor.fetchone()[0] == 1
                cursor.close()
            finally:
                handle.close()
            error_message = None if passed else "Test query returned an unexpected value"
        except Exception as e:
            logger.debug("Connection check for %s failed", name, exc_info=True)
            passed = False
            error_message = str(e)

        return CheckResult(
            connection_name=name,
            driver=target.get('driver'),
            role=role,
            passed=passed,
            target=mask_config(target),
            duration_ms=round((time.time() - start) * 1000, 2),
            error_message=error_message,
        )
