"""Application factory and app-wide configuration."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from deposit_calculator.app.api.routes import api_bp

DEFAULT_CONFIG = {
    "CORS_ORIGINS": ["http://localhost:5173", "http://127.0.0.1:5173"],
    "LOG_LEVEL": "INFO",
}


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance.

    Settings come from ``DEFAULT_CONFIG``, then ``DEPOSIT_CALCULATOR_*``
    environment variables, then ``config``.
    """
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("DEPOSIT_CALCULATOR")
    if config:
        app.config.from_mapping(config)

    level = app.config["LOG_LEVEL"]
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger("deposit_calculator").setLevel(level)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
