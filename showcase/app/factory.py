from __future__ import annotations

import logging
from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException, NotFound

from showcase.app.config import Config
from showcase.app.extensions import cors, limiter
from showcase.app.common.errors import fault_envelope, http_error_envelope, route_not_found
from showcase.app.common.request_context import attach_request_id, init_request_id
from showcase.app.common.security import apply_security_headers
from showcase.app.api.register import register_api_blueprints
from showcase.app.ui import ui_bp
from showcase.app.cli import cli_bp
from showcase.modules.components.catalog import build_default_catalog
from showcase.modules.components.service import ComponentLookupService


def _wants_json() -> bool:
    return request.path == "/api" or request.path.startswith("/api/")


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})
    limiter.init_app(app)

    # Catalog is built once and shared read-only by every request
    app.extensions["component_service"] = ComponentLookupService(build_default_catalog())

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        attach_request_id(response)
        return apply_security_headers(response)

    # Health endpoint
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    # Register API blueprints
    register_api_blueprints(app)

    # Pages
    app.register_blueprint(ui_bp)

    # CLI (flask components)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if isinstance(err, NotFound):
            if _wants_json():
                return jsonify(route_not_found()), 404
            return render_template("errors/404.html", title="No encontrado"), 404
        if not _wants_json() and err.code == 400:
            return render_template("errors/400.html", title="Solicitud inválida"), 400
        status = err.code or 500
        payload = http_error_envelope(err.description or err.name, status, app.config["PRODUCTION"])
        return jsonify(payload), status

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        payload = fault_envelope(err, app.config["PRODUCTION"])
        return jsonify(payload), payload["error"]["status"]

    return app
