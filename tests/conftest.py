import logging
import pytest
from root_forwarder import create_app

INDEX_HTML = b"<html>OK</html>"


@pytest.fixture
def content_root(tmp_path):
    """Empty content root directory."""
    root = tmp_path / "static"
    root.mkdir()
    return root


@pytest.fixture
def index_html(content_root):
    """Write the entry file into the content root."""
    path = content_root / "index.html"
    path.write_bytes(INDEX_HTML)
    return path


@pytest.fixture
def app(content_root):
    """Create application for testing."""
    app = create_app("testing")
    app.config["CONTENT_ROOT"] = str(content_root)
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def restore_logging():
    """Put back the root handlers and logger levels changed by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    names = ("werkzeug", "root_forwarder")
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    for name, saved in levels.items():
        logging.getLogger(name).setLevel(saved)
