"""
Routes Package

This package contains all route definitions for the application.
"""

from .static import static_bp
from .web import main_bp

__all__ = ["main_bp", "static_bp"]
