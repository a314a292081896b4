import base64
import binascii
import json


def _reject_constant(token):
    raise ValueError(f"Invalid JSON token: {token}")


def http_method(event):
    """REST API events carry httpMethod, HTTP API (v2) events nest it in requestContext."""
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return (method or "").upper()


def header(event, name, default=None):
    wanted = name.lower()
    for key, value in (event.get("headers") or {}).items():
        if key.lower() == wanted:
            return value
    return default


def json_body(event):
    """
    Parse the request body as a JSON object.
    Anything that is not a JSON object (missing, garbage, a list, NaN/Infinity...) becomes {}.
    """
    raw = event.get("body")
    if not raw:
        return {}

    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return {}

    try:
        body = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError):
        return {}

    return body if isinstance(body, dict) else {}
