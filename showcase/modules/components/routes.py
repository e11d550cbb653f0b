from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from showcase.modules.components.presenter import present, present_fault
from showcase.modules.components.service import ComponentLookupService, NotFound

bp = Blueprint("components", __name__)


def get_service() -> ComponentLookupService:
    return current_app.extensions["component_service"]


@bp.get("/components")
def list_components():
    """GET /api/components - Keys and names of every catalog entry."""
    catalog = get_service().catalog
    return {
        "success": True,
        "data": [{"id": c.key, "name": c.name, "description": c.description} for c in catalog],
    }, 200


@bp.get("/component/", defaults={"component_id": ""})
@bp.get("/component/<component_id>")
def get_component(component_id: str):
    """GET /api/component/<id> - Name, description and snippet of one component.

    Always answers JSON: 200, 400 (invalid/empty id), 404 (unknown id) or 500.
    """
    try:
        result = get_service().resolve(component_id)
        if isinstance(result, NotFound):
            current_app.logger.info("Component not found: %s", result.key)
        status, body = present(result)
    except Exception as err:
        current_app.logger.exception("Error resolving component %r", component_id)
        status, body = present_fault(err, current_app.config["PRODUCTION"])
    return jsonify(body), status
