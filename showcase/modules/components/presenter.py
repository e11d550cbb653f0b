"""Turn lookup results into HTTP status + body.

JSON bodies carry catalog text verbatim. Anything inserted into an HTML
document goes through ``escape_html`` first, independently of the
sanitizer that already ran on the lookup key.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, Tuple

from markupsafe import Markup, escape

from showcase.app.common.errors import INTERNAL_ERROR
from showcase.modules.components.catalog import ComponentDetail
from showcase.modules.components.service import (
    EMPTY_AFTER_SANITIZATION,
    NOT_A_STRING,
    Found,
    Invalid,
    LookupResult,
    NotFound,
)

COMPONENT_NOT_FOUND = "component not found"

INVALID_COMPONENT_ID = "invalid component id"

_INVALID_MESSAGES = {
    NOT_A_STRING: INVALID_COMPONENT_ID,
    EMPTY_AFTER_SANITIZATION: "empty component id",
}


def invalid_message(result: Invalid) -> str:
    return _INVALID_MESSAGES.get(result.reason, INVALID_COMPONENT_ID)


def present(result: LookupResult) -> Tuple[int, Dict[str, Any]]:
    if isinstance(result, Found):
        return 200, {"success": True, "data": asdict(result.detail)}
    if isinstance(result, NotFound):
        return 404, {"success": False, "error": COMPONENT_NOT_FOUND}
    if isinstance(result, Invalid):
        return 400, {"success": False, "error": invalid_message(result)}
    raise TypeError(f"unknown lookup result: {result!r}")


def present_fault(err: Exception, production: bool) -> Tuple[int, Dict[str, Any]]:
    """500 body for a fault raised while resolving or presenting."""
    message = INTERNAL_ERROR if production else f"{INTERNAL_ERROR}: {err}"
    return 500, {"success": False, "error": message}


def escape_html(text: str) -> Markup:
    """Escape ``& < > " '`` for insertion into an HTML document."""
    return escape(text)


def render_component_html(detail: ComponentDetail) -> Markup:
    # Markup.format escapes every argument.
    return Markup(
        '<article class="component-detail">'
        "<h2>{name}</h2>"
        "<p>{description}</p>"
        '<div class="code-block"><pre><code>{snippet}</code></pre></div>'
        "</article>"
    ).format(
        name=escape_html(detail.name),
        description=escape_html(detail.description),
        snippet=escape_html(detail.snippet),
    )
