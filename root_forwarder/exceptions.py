"""
Custom Exceptions Module

This module defines the exceptions raised while resolving and serving static resources.
"""

from typing import Optional


class AppError(Exception):
    """Base exception class for all application errors"""

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response"""
        return {"success": False, "error": self.message}


class ResourceNotFoundError(AppError):
    """Exception raised when a static resource is missing from the content root"""

    status_code = 404

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, self.status_code)
