#!/usr/bin/env python3
"""
Root Forwarder App Runner

This file handles starting the Flask application with proper configuration
for both development and production environments.
"""

import os
import sys
from root_forwarder import create_app
from root_forwarder.config import get_config
from root_forwarder.logging_config import setup_logging


def check_content_root(config_class: type) -> bool:
    """Check that the entry resource exists in the content root"""
    entry_path = os.path.join(config_class.CONTENT_ROOT, config_class.ENTRY_RESOURCE)
    if not os.path.isdir(config_class.CONTENT_ROOT):
        print(f"❌ Error: content root {config_class.CONTENT_ROOT} does not exist!")
        print("Set CONTENT_ROOT to the directory holding your built frontend.")
        return False
    if not os.path.isfile(entry_path):
        print(f"⚠️  Warning: {entry_path} not found, GET / will return 404")
    else:
        print(f"✅ Entry resource found: {entry_path}")
    return True


def main():
    """Main function to run the application"""
    print("🚀 Starting Root Forwarder...")

    # Always default to development locally unless FLASK_ENV is explicitly set
    config_name = os.environ.get("FLASK_ENV") or "development"
    # Keep FLASK_ENV in sync so logging_config can determine logger levels
    os.environ["FLASK_ENV"] = config_name
    config_class = get_config(config_name)

    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)

    if not check_content_root(config_class):
        sys.exit(1)

    if config_name == "production":
        print("❌ Refusing to start Flask dev server in production.")
        print("   Use gunicorn instead: gunicorn -c gunicorn.conf.py run:app")
        sys.exit(2)

    app = create_app(config_name)
    port = int(os.environ.get("PORT", config_class.PORT))

    print(f"🔧 Environment: {config_name}")
    print(f"🔧 Debug mode: {'ON' if config_class.DEBUG else 'OFF'}")
    print(f"📁 Serving files from: {app.config['CONTENT_ROOT']}")
    print(f"🌐 Server will listen on {config_class.HOST}:{port}")
    print("-" * 50)

    try:
        app.run(
            host=config_class.HOST,
            port=port,
            debug=config_class.DEBUG,
            threaded=True,  # Allow multiple concurrent requests
        )
    except KeyboardInterrupt:
        print("\n👋 Shutting down gracefully...")


# Create the app instance for WSGI servers (gunicorn)
app = None

if __name__ == "__main__":
    main()
else:
    config_name = os.environ.get("FLASK_ENV", "production")
    config_class = get_config(config_name)
    setup_logging(config_class.LOG_LEVEL, config_class.LOG_FILE)
    app = create_app(config_name)
