"""
Route Model

This module defines the RouteEntry model binding the root path to its static entry resource.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

ROOT_PATH = "/"


@dataclass(frozen=True)
class RouteEntry:
    """
    Immutable mapping from a URL path to the static resource forwarded to.

    Created once by the application factory and kept on the app for its lifetime.
    """

    resource: str = "index.html"
    path: str = ROOT_PATH
    methods: Tuple[str, ...] = field(default=("GET",))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the route entry to a dictionary for logging and diagnostics.

        Returns:
            Dict[str, Any]: Dictionary representation of the route entry
        """
        return {
            "path": self.path,
            "resource": self.resource,
            "methods": list(self.methods),
        }
