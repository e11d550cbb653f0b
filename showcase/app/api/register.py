from flask import Flask

from showcase.modules.components.routes import bp as components_bp


def register_api_blueprints(app: Flask) -> None:
    app.register_blueprint(components_bp, url_prefix="/api")

    # Root API document
    @app.get("/api")
    def api_index():
        return {
            "name": "Showcase API",
            "version": "0.1.0",
            "endpoints": {
                "components": ["/components", "/component/<id>"],
            },
        }, 200
