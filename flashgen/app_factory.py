from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from flashgen.api.error_mapping import ERRORS, map_exception
from flashgen.api.routes_generate import generate_bp
from flashgen.infrastructure.config import Settings, settings as default_settings
from flashgen.services.ai_client import TextGenerator
from flashgen.services.extractors import StructuredExtractor
from fg_utils.logger_utils import logger, set_log_level


def create_app(
    settings: Optional[Settings] = None,
    text_generator: Optional[TextGenerator] = None,
    extractor: Optional[StructuredExtractor] = None,
):
    """
    Application factory for Flask.

    `settings`, `text_generator` and `extractor` default to the environment
    configuration and the configured provider; tests pass their own.
    """
    if settings is None:
        settings = default_settings
    app = Flask(__name__)

    # --- Core Configuration ---
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    app.extensions['flashgen'] = {
        'settings': settings,
        'text_generator': text_generator,
        'extractor': extractor,
        'service': None,
    }
    cors_headers = settings.cors_headers()
    set_log_level(settings.LOG_LEVEL)

    # --- Blueprints Registration ---
    app.register_blueprint(generate_bp)

    # --- Error Handlers ---
    @app.errorhandler(405)
    def method_not_allowed(e):
        logger.warning(f"Method Not Allowed: {request.method} {request.path}")
        return jsonify({"error": ERRORS["method_not_allowed"]}), 405

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description or error.name}), error.code
        status, message = map_exception(error)
        logger.error(f"Unhandled exception for path {request.path}: {error}", exc_info=True)
        return jsonify({"error": message}), status

    # --- Request Hooks ---
    @app.after_request
    def add_cors_headers(response):
        response.headers.update(cors_headers)
        return response

    logger.info(f"Flashcard API ready (provider={settings.FG_PROVIDER}, extractor={settings.FG_EXTRACTOR})")
    return app
