"""
Web Routes Module

This module forwards the root path to the single-page application's entry file.
"""

from flask import Blueprint, Response, current_app

from ..logging_config import get_logger
from ..models.route import ROOT_PATH
from .static import serve_static

logger = get_logger(__name__)

# Create blueprint for web routes
main_bp = Blueprint("main", __name__)


@main_bp.route(ROOT_PATH, methods=["GET"])
def index() -> Response:
    """Serve the entry file while the browser keeps "/" as its URL"""
    entry = current_app.root_route  # type: ignore
    logger.debug(f"Forwarding {entry.path} to {entry.resource}")
    # Internal forward, never a redirect
    return serve_static(entry.resource)
