"""
Extension registry for driver overrides.

Callers bind factories or instances under 'connector.<driver>' and
'connection.<driver>' keys; ConnectionFactory checks these before its
built-in driver tables.
"""

from typing import Any, Callable


def connector_key(driver: str) -> str:
    """Registry key for a connector override."""
    return f"connector.{driver}"


def connection_key(driver: str) -> str:
    """Registry key for a connection override."""
    return f"connection.{driver}"


class Registry:
    """
    Mapping of string keys to factories or shared instances.

    Example:

        registry = Registry()
        registry.bind('connector.mysql', MyMySqlConnector)
        registry.instance('connector.sqlite', shared_sqlite_connector)
    """

    def __init__(self):
        self._factories: dict[str, Callable[..., Any]] = {}
        self._instances: dict[str, Any] = {}

    def bind(self, key: str, factory: Callable[..., Any]) -> None:
        """
        Register a factory called on every resolve().

        Args:
            key: Registry key
            factory: Callable receiving the resolve() arguments
        """
        self._instances.pop(key, None)
        self._factories[key] = factory

    def instance(self, key: str, obj: Any) -> None:
        """Register an existing object returned as-is on resolve()."""
        self._factories.pop(key, None)
        self._instances[key] = obj

    def bound(self, key: str) -> bool:
        """Check whether anything is registered under key."""
        return key in self._factories or key in self._instances

    def resolve(self, key: str, args: list | tuple | None = None) -> Any:
        """
        Produce the object registered under key.

        Args:
            key: Registry key
            args: Positional arguments passed to a bound factory

        Returns:
            The shared instance, or the factory's return value

        Raises:
            KeyError: If nothing is registered under key
        """
        if key in self._instances:
            return self._instances[key]
        if key in self._factories:
            return self._factories[key](*(args or ()))
        raise KeyError(f"Nothing registered for key: {key}")

    def forget(self, key: str) -> None:
        """Remove any registration for key."""
        self._factories.pop(key, None)
        self._instances.pop(key, None)

    def keys(self) -> list[str]:
        """Return all registered keys."""
        return list(self._factories) + list(self._instances)
