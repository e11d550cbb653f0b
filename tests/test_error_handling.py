import pytest
from flask import abort

from showcase.app.common.errors import error_status
from showcase.app.config import TestingConfig
from showcase.app.factory import create_app


class ExplodingService:
    catalog = None

    def resolve(self, raw):
        raise RuntimeError("catalog unavailable")


def _app_with_boom(config=TestingConfig):
    app = create_app(config)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret detail")

    return app


# ERR-001: unknown API route
def test_unknown_api_route(client):
    r = client.get("/api/nothing-here")

    assert r.status_code == 404
    assert r.json == {"success": False, "error": "route not found"}


# ERR-002: unknown page route renders HTML
def test_unknown_page_route(client):
    r = client.get("/nothing-here")

    assert r.status_code == 404
    assert "text/html" in r.content_type


# ERR-003: fault inside the lookup route
def test_lookup_fault_returns_500(app):
    app.extensions["component_service"] = ExplodingService()
    with app.test_client() as c:
        r = c.get("/api/component/botones")

    assert r.status_code == 500
    assert r.json["success"] == False
    assert "catalog unavailable" in r.json["error"]


# ERR-004: lookup fault detail hidden in production
def test_lookup_fault_hidden_in_production():
    class ProductionConfig(TestingConfig):
        PRODUCTION = True

    app = create_app(ProductionConfig)
    app.extensions["component_service"] = ExplodingService()
    with app.test_client() as c:
        r = c.get("/api/component/botones")

    assert r.status_code == 500
    assert r.json == {"success": False, "error": "internal server error"}


# ERR-005: unhandled exception envelope
def test_unhandled_exception_envelope():
    with _app_with_boom().test_client() as c:
        r = c.get("/boom")

    assert r.status_code == 500
    assert r.json == {"success": False, "error": {"message": "secret detail", "status": 500}}


# ERR-006: unhandled exception detail suppressed in production
def test_unhandled_exception_production():
    class ProductionConfig(TestingConfig):
        PRODUCTION = True

    with _app_with_boom(ProductionConfig).test_client() as c:
        r = c.get("/boom")

    assert r.status_code == 500
    assert r.json["error"] == {"message": "internal server error", "status": 500}


# ERR-006b: aborted 5xx description suppressed in production
def test_http_5xx_description_hidden_in_production():
    class ProductionConfig(TestingConfig):
        PRODUCTION = True

    app = create_app(ProductionConfig)

    @app.get("/aborted")
    def aborted():
        abort(500, description="db password is hunter2")

    with app.test_client() as c:
        r = c.get("/aborted")

    assert r.status_code == 500
    assert r.json == {"success": False, "error": {"message": "internal server error", "status": 500}}


# ERR-006c: aborted 5xx description kept outside production
def test_http_5xx_description_shown_in_development():
    app = create_app(TestingConfig)

    @app.get("/aborted")
    def aborted():
        abort(503, description="maintenance window")

    with app.test_client() as c:
        r = c.get("/aborted")

    assert r.status_code == 503
    assert r.json["error"] == {"message": "maintenance window", "status": 503}


# ERR-007: declared status on the exception is kept
def test_declared_status_is_used():
    class Teapot(Exception):
        status = 418

    app = create_app(TestingConfig)

    @app.get("/teapot")
    def teapot():
        raise Teapot("short and stout")

    with app.test_client() as c:
        r = c.get("/teapot")

    assert r.status_code == 418
    assert r.json["error"]["status"] == 418


# ERR-008: method not allowed uses the envelope
def test_method_not_allowed(client):
    r = client.post("/api/component/botones")

    assert r.status_code == 405
    assert r.json["success"] == False
    assert r.json["error"]["status"] == 405


@pytest.mark.parametrize("path", ["/", "/api/component/cards"])
def test_security_headers(client, path):
    r = client.get(path)

    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert "default-src 'self'" in r.headers["Content-Security-Policy"]


def test_request_id_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"

    generated = client.get("/health").headers["X-Request-ID"]
    assert len(generated) == 32

    blank = client.get("/health", headers={"X-Request-ID": "   "}).headers["X-Request-ID"]
    assert blank.strip() and len(blank) == 32


def test_rate_limit():
    class LimitedConfig(TestingConfig):
        RATELIMIT_ENABLED = True
        RATELIMIT_DEFAULT = "2 per minute"

    app = create_app(LimitedConfig)
    with app.test_client() as c:
        assert c.get("/api/component/cards").status_code == 200
        assert c.get("/api/component/cards").status_code == 200
        r = c.get("/api/component/cards")

    assert r.status_code == 429
    assert r.json["error"]["status"] == 429


# ERR-009: non-numeric code does not hide a numeric status
def test_error_status_skips_non_int_code():
    class Coded(Exception):
        code = "E_TEAPOT"
        status = 418

    class Flagged(Exception):
        code = True
        status_code = 409

    assert error_status(Coded()) == 418
    assert error_status(Flagged()) == 409
    assert error_status(RuntimeError("x")) == 500
