"""
Service Registry Module

Each application gets its own registry, so tests can build several apps
side by side or swap a service for a stub.
"""

from typing import Any, Callable, Dict


class ServiceRegistry:
    """Lazily builds services from factories and caches one instance per name."""

    def __init__(self) -> None:
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}

    def register_factory(self, service_name: str, factory_func: Callable[[], Any]) -> None:
        """
        Register a factory called on the first ``get`` for ``service_name``.

        Registering again replaces both the factory and any cached instance.
        """
        self._factories[service_name] = factory_func
        self._services.pop(service_name, None)

    def get(self, service_name: str) -> Any:
        """
        Get a service instance by name.

        Raises:
            KeyError: If no factory is registered under ``service_name``
        """
        if service_name not in self._services:
            if service_name not in self._factories:
                raise KeyError(f"Service '{service_name}' not registered")
            self._services[service_name] = self._factories[service_name]()
        return self._services[service_name]
