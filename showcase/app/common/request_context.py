import uuid
from flask import g, request

REQUEST_ID_HEADER = "X-Request-ID"


def init_request_id() -> str:
    """Use the caller's request id, or mint one, and keep it on `g` for logging."""
    g.request_id = request.headers.get(REQUEST_ID_HEADER, "").strip() or uuid.uuid4().hex
    return g.request_id


def attach_request_id(response):
    """Mirror the request id in the response header."""
    rid = g.get("request_id")
    if rid:
        response.headers[REQUEST_ID_HEADER] = rid
    return response
