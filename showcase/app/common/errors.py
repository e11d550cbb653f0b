from __future__ import annotations

from typing import Any, Dict

ROUTE_NOT_FOUND = "route not found"
INTERNAL_ERROR = "internal server error"

_STATUS_ATTRS = ("code", "status", "status_code")


def route_not_found() -> Dict[str, Any]:
    return {"success": False, "error": ROUTE_NOT_FOUND}


def error_status(err: Exception) -> int:
    """Status declared on the exception, 500 when there is none."""
    for attr in _STATUS_ATTRS:
        status = getattr(err, attr, None)
        if isinstance(status, int) and not isinstance(status, bool) and 400 <= status <= 599:
            return status
    return 500


def error_envelope(message: str, status: int) -> Dict[str, Any]:
    return {"success": False, "error": {"message": message, "status": status}}


def http_error_envelope(message: str, status: int, production: bool) -> Dict[str, Any]:
    """Envelope for a werkzeug HTTP error; 5xx detail only outside production."""
    if production and status >= 500:
        message = INTERNAL_ERROR
    return error_envelope(message, status)


def fault_envelope(err: Exception, production: bool) -> Dict[str, Any]:
    """Envelope for an unhandled exception; detail only outside production."""
    status = error_status(err)
    message = INTERNAL_ERROR if production else (str(err) or err.__class__.__name__)
    return error_envelope(message, status)
