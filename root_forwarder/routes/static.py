"""
Static Routes Module

This module serves files from the content root.
"""

from flask import Blueprint, Response, current_app

static_bp = Blueprint("static_files", __name__)


@static_bp.route("/<path:filename>", methods=["GET"])
def serve_static(filename: str) -> Response:
    """Serve a file from the content root"""
    static_files = current_app.service_registry.get("static_files")  # type: ignore
    return static_files.serve(filename)
