"""
Models Package

This package contains data models for the application.
"""

from .route import RouteEntry, ROOT_PATH

__all__ = ["RouteEntry", "ROOT_PATH"]
