"""
Static File Service

Resolves resource names against the configured content root and serves them.
"""

import os
from typing import Optional

from flask import Response, current_app, send_from_directory
from werkzeug.security import safe_join

from ..exceptions import ResourceNotFoundError
from ..logging_config import get_logger

logger = get_logger(__name__)


class StaticFileService:
    """Service class to resolve and serve files from the content root"""

    def __init__(self, content_root: Optional[str] = None) -> None:
        # When unset, the content root is read from the app config per request
        self._content_root = content_root

    @property
    def content_root(self) -> Optional[str]:
        root = self._content_root
        if root is None:
            root = current_app.config.get("CONTENT_ROOT")
        # send_from_directory would resolve a relative root against the package
        return os.path.abspath(root) if root else root

    def resolve(self, filename: str) -> str:
        """
        Resolve a resource name to a file path under the content root.

        Args:
            filename (str): Resource name relative to the content root

        Returns:
            str: Absolute path of the resource

        Raises:
            ResourceNotFoundError: If the name escapes the content root or
                no regular file exists there
        """
        root = self.content_root
        if not root:
            raise ResourceNotFoundError("No content root configured")

        path = safe_join(root, filename)
        if path is None or not os.path.isfile(path):
            logger.info(f"Static resource not found: {filename} (content root: {root})")
            raise ResourceNotFoundError(f"Resource '{filename}' not found")

        return os.path.abspath(path)

    def exists(self, filename: str) -> bool:
        """Check whether a resource can be served"""
        try:
            self.resolve(filename)
        except ResourceNotFoundError:
            return False
        return True

    def serve(self, filename: str) -> Response:
        """
        Build the response for a static resource.

        Conditional and range requests are answered by send_from_directory
        using the current request's headers.
        """
        self.resolve(filename)
        return send_from_directory(self.content_root, filename)
