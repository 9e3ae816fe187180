from __future__ import annotations

from flask import Flask

from stylesweep.config import StylesweepConfig


def create_app(
    config: StylesweepConfig | None = None,
    overrides: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    config = config or StylesweepConfig.from_env()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.max_input_bytes
    app.config.update(overrides or {})

    # Store config on app for access in routes
    app.extensions["config"] = config

    # Register blueprints
    from stylesweep.web.routes.api import api_bp
    from stylesweep.web.routes.health import health_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(health_bp)

    return app
