"""
Centralized logging configuration for the Flask application.

Used by run.py both for the development server and for the WSGI app
that gunicorn imports.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional

# Flask names app.logger after the import name of the application package
APP_LOGGER_NAME = "root_forwarder"


def setup_logging(log_level: str = "INFO", log_file: str = "app.log") -> logging.Logger:
    """
    Send log records to stdout and to ``log_file``.

    Outside development the request log and the application logger are held
    at WARNING so every forwarded request does not produce a line.

    Args:
        log_level (str): Logging level name; unknown names fall back to INFO
        log_file (str): Path to the log file, parent directories are created
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout), logging.FileHandler(log_file)],
        force=True,
    )

    if os.environ.get("FLASK_ENV", "development") == "development":
        levels = {"werkzeug": logging.INFO, APP_LOGGER_NAME: numeric_level}
    else:
        levels = {"werkzeug": logging.WARNING, APP_LOGGER_NAME: logging.WARNING}
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)

    return logging.getLogger(APP_LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the named logger, or the application logger when no name is given"""
    return logging.getLogger(name or APP_LOGGER_NAME)
