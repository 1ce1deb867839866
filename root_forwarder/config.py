# config.py - Single source of truth for all configuration
import os
import secrets
from dotenv import load_dotenv
from flask import Flask
from typing import Any, Optional

from .logging_config import get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)


class Config:
    """Base configuration class - all config should be defined here"""

    # Server Configuration
    HOST = os.environ.get("HOST", "127.0.0.1")  # Default to localhost for security
    PORT = int(os.environ.get("PORT", 5000))
    # Generate a random secret key if not provided
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

    # Static content Configuration
    CONTENT_ROOT = os.environ.get("CONTENT_ROOT") or os.path.join(
        os.getcwd(), "static"
    )
    ENTRY_RESOURCE = os.environ.get("ENTRY_RESOURCE", "index.html")
    # Seconds for Cache-Control max-age on static responses, None leaves it unset
    STATIC_MAX_AGE = (
        int(os.environ["STATIC_MAX_AGE"]) if os.environ.get("STATIC_MAX_AGE") else None
    )

    # Logging Configuration
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE", "app.log")

    # Default values for subclasses
    DEBUG = False
    TESTING = False

    @classmethod
    def init_app(cls, app: Flask) -> None:
        """Initialize application with this config"""
        app.config.update(
            {
                "SECRET_KEY": cls.SECRET_KEY,
                "CONTENT_ROOT": os.path.abspath(cls.CONTENT_ROOT),
                "ENTRY_RESOURCE": cls.ENTRY_RESOURCE,
                "SEND_FILE_MAX_AGE_DEFAULT": cls.STATIC_MAX_AGE,
                "HOST": cls.HOST,
                "PORT": cls.PORT,
                "LOG_LEVEL": cls.LOG_LEVEL,
                "LOG_FILE": cls.LOG_FILE,
                "DEBUG": cls.DEBUG,
                "TESTING": cls.TESTING,
            }
        )

        # Call subclass-specific initialization
        cls._init_subclass_specific(app)

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        pass


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Development-specific initialization"""
        logger.info("Development mode active")
        logger.info(f"Content root: {app.config['CONTENT_ROOT']}")
        logger.info(f"Server will run on {cls.HOST}:{cls.PORT}")


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False
    TESTING = False
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

    # Production security headers
    SECURITY_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "X-XSS-Protection": "1; mode=block",
    }

    @classmethod
    def _init_subclass_specific(cls, app: Flask) -> None:
        """Production-specific initialization"""

        @app.after_request
        def set_security_headers(response: Any) -> Any:
            for header, value in cls.SECURITY_HEADERS.items():
                response.headers[header] = value
            return response


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DEBUG = True
    CONTENT_ROOT = os.path.join(os.getcwd(), "test_static")


# Configuration registry
config = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}


def get_config(config_name: Optional[str] = None) -> type:
    """Get configuration class by name"""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    return config.get(config_name, config["default"])
