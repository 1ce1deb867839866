"""Application Factory Module

This module contains the application factory function for creating Flask app instances.
"""

from flask import Flask
from typing import Optional

from .config import get_config
from .logging_config import get_logger
from .models.route import RouteEntry
from .services import create_service_registry
from .utils import register_error_handlers

logger = get_logger(__name__)


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure a Flask application instance.

    Args:
        config_name: Configuration name to use, defaults to FLASK_ENV

    Returns:
        Flask: Configured Flask application
    """
    # The content root replaces Flask's built-in /static route
    app = Flask(__name__, static_folder=None)

    config_class = get_config(config_name)
    config_class.init_app(app)  # type: ignore

    registry = create_service_registry()
    root_route = RouteEntry(resource=app.config["ENTRY_RESOURCE"])
    app.service_registry = registry  # type: ignore
    app.root_route = root_route  # type: ignore

    from .routes import main_bp, static_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(static_bp)
    register_error_handlers(app)

    with app.app_context():
        if not registry.get("static_files").exists(root_route.resource):
            logger.warning(
                f"Entry resource '{root_route.resource}' is missing from "
                f"{app.config['CONTENT_ROOT']}; {root_route.path} will return 404"
            )

    logger.debug(f"Registered route entry {root_route.to_dict()}")
    return app
