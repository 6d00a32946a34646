from __future__ import annotations

from flask import Flask

from stylecascade.config import CascadeConfig
from stylecascade.registry import ClassRegistry
from stylecascade.schema.model import GlobalTheme


def create_app(
    registry: ClassRegistry | None = None,
    config: CascadeConfig | None = None,
    theme: GlobalTheme | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)

    # Store the registry, config and theme on app for access in routes
    if registry is None:
        registry = ClassRegistry()

    app.extensions["registry"] = registry
    app.extensions["cascade_config"] = config or CascadeConfig()
    app.extensions["theme"] = theme

    # Register blueprints
    from stylecascade.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
