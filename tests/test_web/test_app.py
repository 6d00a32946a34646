from __future__ import annotations

from stylecascade.config import CascadeConfig
from stylecascade.registry import ClassRegistry
from stylecascade.web.app import create_app


class TestCreateApp:
    def test_defaults(self):
        app = create_app()
        assert isinstance(app.extensions["registry"], ClassRegistry)
        assert app.extensions["cascade_config"] == CascadeConfig()
        assert app.extensions["theme"] is None

    def test_empty_registry_is_kept(self):
        registry = ClassRegistry()
        app = create_app(registry=registry)
        assert app.extensions["registry"] is registry

    def test_config_applies_to_routes(self):
        config = CascadeConfig(backdrop_vendor_property="-x-backdrop-filter")
        client = create_app(config=config).test_client()
        response = client.post("/api/render", json={
            "styling": {"backdropFilter": {"enabled": True, "blur": 4}},
        })
        assert response.get_json()["css"] == {
            "backdrop-filter": "blur(4px)",
            "-x-backdrop-filter": "blur(4px)",
        }

    def test_api_blueprint_registered(self):
        app = create_app()
        assert "api" in app.blueprints
