"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from apycalc.app.api.routes import api_bp
from apycalc.app.pages import pages_bp
from apycalc.config import SETTINGS_KEY, Settings, settings as default_settings
from apycalc.observability import setup_logging


def create_app(app_settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    app_settings = app_settings or default_settings
    setup_logging(
        app_settings.log_level,
        json=app_settings.log_json,
        service_name=app_settings.service_name,
    )

    app = Flask(__name__)
    app.config[SETTINGS_KEY] = app_settings

    CORS(
        app,
        resources={r"/api/*": {"origins": app_settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(pages_bp)
    return app
