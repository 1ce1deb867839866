"""
Error handlers for the Flask application.
"""

from flask import Flask, jsonify, request
from werkzeug.exceptions import NotFound
from typing import Any, Tuple

from .exceptions import AppError, ResourceNotFoundError


def register_error_handlers(app: Flask) -> None:
    """
    Install handlers that turn application errors into JSON responses.

    AppError subclasses use their own status code; Werkzeug's NotFound is
    reported with the same body shape as ResourceNotFoundError.
    """

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> Tuple[Any, int]:
        app.logger.warning(f"Application error on {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound) -> Tuple[Any, int]:
        app.logger.info(f"No route for {request.path}")
        not_found = ResourceNotFoundError()
        return jsonify(not_found.to_dict()), not_found.status_code
