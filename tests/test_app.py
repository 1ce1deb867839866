from root_forwarder import create_app
from root_forwarder.models import RouteEntry
from root_forwarder.services import ServiceRegistry, StaticFileService


class TestAppFactory:
    """Test application factory."""

    def test_create_app(self):
        """Test app creation with the testing config."""
        app = create_app("testing")
        assert app is not None
        assert app.config["TESTING"] is True
        assert app.config["SECRET_KEY"] is not None
        assert app.config["ENTRY_RESOURCE"] == "index.html"

    def test_blueprints_registered(self, app):
        """Test that blueprints are registered."""
        assert "main" in app.blueprints
        assert "static_files" in app.blueprints

    def test_root_route_entry(self, app):
        """Test the route entry created at startup."""
        assert isinstance(app.root_route, RouteEntry)
        assert app.root_route.path == "/"
        assert app.root_route.resource == app.config["ENTRY_RESOURCE"]

    def test_root_path_registered_once(self, app):
        """Test that "/" has exactly one rule in the URL map."""
        rules = [rule for rule in app.url_map.iter_rules() if rule.rule == "/"]
        assert len(rules) == 1
        assert rules[0].endpoint == "main.index"

    def test_builtin_static_route_disabled(self, app):
        """Test that Flask's /static route is replaced by the content root."""
        endpoints = {rule.endpoint for rule in app.url_map.iter_rules()}
        assert "static" not in endpoints
        assert "static_files.serve_static" in endpoints

    def test_service_registry_initialization(self, app):
        """Test that the service registry provides the static file service."""
        assert isinstance(app.service_registry, ServiceRegistry)
        with app.app_context():
            assert isinstance(app.service_registry.get("static_files"), StaticFileService)

    def test_registry_is_per_app(self):
        """Test that separate apps do not share a registry."""
        first = create_app("testing")
        second = create_app("testing")
        assert first.service_registry is not second.service_registry

    def test_missing_entry_logged_at_startup(self, tmp_path, monkeypatch, caplog):
        """Test that a missing entry resource is reported when the app is built."""
        from root_forwarder.config import TestingConfig

        monkeypatch.setattr(TestingConfig, "CONTENT_ROOT", str(tmp_path))
        with caplog.at_level("WARNING", logger="root_forwarder"):
            create_app("testing")
        assert "index.html" in caplog.text
        assert "will return 404" in caplog.text


class TestProductionApp:
    """Test production-only behavior."""

    def test_security_headers(self, content_root, index_html):
        """Test that production responses carry security headers."""
        app = create_app("production")
        app.config["CONTENT_ROOT"] = str(content_root)
        response = app.test_client().get("/")
        assert response.status_code == 200
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
