"""Server-rendered pages.

Templates are autoescaped; the component detail fragment is escaped by the
presenter before it reaches the template.
"""

from flask import Blueprint, abort, current_app, render_template

from showcase.modules.components.presenter import render_component_html
from showcase.modules.components.service import Found, Invalid

ui_bp = Blueprint("ui", __name__)


@ui_bp.get("/")
def home():
    return render_template(
        "pages/index.html",
        title="Inicio",
        description="Tu plataforma de gestión empresarial",
    )


@ui_bp.get("/components")
def components_page():
    catalog = current_app.extensions["component_service"].catalog
    return render_template(
        "pages/components.html",
        title="Componentes",
        description="Biblioteca de componentes de interfaz",
        components=list(catalog),
    )


@ui_bp.get("/components/<component_id>")
def component_detail_page(component_id: str):
    result = current_app.extensions["component_service"].resolve(component_id)
    if isinstance(result, Invalid):
        abort(400)
    if not isinstance(result, Found):
        abort(404)
    return render_template(
        "pages/component_detail.html",
        title=result.detail.name,
        description=result.detail.description,
        fragment=render_component_html(result.detail),
    )
