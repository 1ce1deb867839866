"""
Services Package

This package contains the service classes for the application.
"""

from .service_registry import ServiceRegistry
from .static_files import StaticFileService


def create_service_registry() -> ServiceRegistry:
    """
    Factory function to create a registry with the default services.

    Returns:
        ServiceRegistry: Registry with lazily created services
    """
    registry = ServiceRegistry()
    registry.register_factory("static_files", StaticFileService)
    return registry


__all__ = ["ServiceRegistry", "StaticFileService", "create_service_registry"]
