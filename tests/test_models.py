import dataclasses
import pytest
from root_forwarder.models import RouteEntry, ROOT_PATH


class TestRouteEntry:
    """Test the route entry model."""

    def test_defaults(self):
        entry = RouteEntry()
        assert entry.path == ROOT_PATH == "/"
        assert entry.resource == "index.html"
        assert entry.methods == ("GET",)

    def test_immutable(self):
        entry = RouteEntry()
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.resource = "other.html"

    def test_to_dict(self):
        assert RouteEntry(resource="app.html").to_dict() == {
            "path": "/",
            "resource": "app.html",
            "methods": ["GET"],
        }
