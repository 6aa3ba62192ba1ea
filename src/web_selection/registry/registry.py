"""
Driver Registry - Central registry for driver adapters.

This module provides a registry pattern for registering driver adapters
by engine name, so that the configured engine can be looked up at runtime.

Example:
    >>> from web_selection.registry import register_driver, get_driver
    >>>
    >>> @register_driver("selenium")
    >>> class SeleniumDriver(IDriver):
    ...     pass
    >>>
    >>> driver_class = get_driver("selenium")
"""

from typing import Callable, Dict, List, Type

from web_selection.interfaces.driver import IDriver
from web_selection.exceptions.base import ConfigurationError


class DriverRegistry:
    """
    Central registry for driver adapters.

    Adapters are registered by engine name, either directly or through a
    factory that imports the adapter on first use.
    """

    _drivers: Dict[str, Type[IDriver]] = {}
    _driver_factories: Dict[str, Callable[[], Type[IDriver]]] = {}

    @classmethod
    def register_driver(cls, name: str) -> Callable[[Type[IDriver]], Type[IDriver]]:
        """
        Decorator to register a driver adapter.

        Args:
            name: Unique engine name (e.g., 'selenium', 'playwright')

        Returns:
            Decorator function
        """
        def decorator(driver_class: Type[IDriver]) -> Type[IDriver]:
            if name in cls._drivers:
                raise ValueError(f"Driver '{name}' is already registered")
            cls._drivers[name] = driver_class
            return driver_class
        return decorator

    @classmethod
    def register_driver_factory(
        cls,
        name: str,
        factory: Callable[[], Type[IDriver]],
    ) -> None:
        """
        Register a factory function for lazy-loading a driver adapter.

        Useful for avoiding import overhead when the backend might not be used.
        """
        cls._driver_factories[name] = factory

    @classmethod
    def get_driver(cls, name: str) -> Type[IDriver]:
        """
        Get a registered driver adapter class by engine name.

        Args:
            name: The registered engine name

        Returns:
            The driver adapter class

        Raises:
            ConfigurationError: If no adapter is registered under that name
        """
        if name in cls._drivers:
            return cls._drivers[name]

        if name in cls._driver_factories:
            driver_class = cls._driver_factories[name]()
            cls._drivers[name] = driver_class
            return driver_class

        available = sorted(cls.list_drivers())
        raise ConfigurationError(
            f"Unknown driver engine: '{name}'. Available engines: {available}"
        )

    @classmethod
    def list_drivers(cls) -> List[str]:
        """List all registered engine names."""
        return list(set(cls._drivers.keys()) | set(cls._driver_factories.keys()))

    @classmethod
    def clear_all(cls) -> None:
        """Clear all registrations (useful for testing)."""
        cls._drivers.clear()
        cls._driver_factories.clear()


def register_driver(name: str) -> Callable[[Type[IDriver]], Type[IDriver]]:
    """Convenience decorator for registering a driver adapter."""
    return DriverRegistry.register_driver(name)


def get_driver(name: str) -> Type[IDriver]:
    """Convenience function for getting a driver adapter class."""
    return DriverRegistry.get_driver(name)
