"""http_utils.py — API Gateway response building and request extraction.

Handles both REST API (v1) and HTTP API (v2) proxy event shapes.
"""
from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, Optional, Tuple

from todo_api.config import CORS_ORIGIN
from todo_api.models import InvalidRequestError

__all__ = [
    "_cors_headers",
    "_empty",
    "_error",
    "_path_method",
    "_query_param",
    "_raw_body",
    "_response",
]

# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


def _cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Accept, Content-Type",
    }


def _response(status_code: int, payload: Any) -> Dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {**_cors_headers(), "Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def _empty(status_code: int = 204) -> Dict[str, Any]:
    """Build a bodiless response (204 No Content, CORS preflight)."""
    return {
        "statusCode": status_code,
        "headers": _cors_headers(),
        "body": "",
    }


def _error(status_code: int, message: str) -> Dict[str, Any]:
    return _response(status_code, {"error": message})


def _path_method(event: Dict[str, Any]) -> Tuple[str, str]:
    rc = event.get("requestContext") or {}
    http = rc.get("http") or {}
    method = (http.get("method") or event.get("httpMethod") or "").upper()
    path = event.get("rawPath") or event.get("path") or "/"
    return method, path


def _query_param(event: Dict[str, Any], name: str) -> Optional[str]:
    """Return a query string parameter as sent, or None when missing/blank.

    API Gateway sends ``queryStringParameters: null`` when the query string
    is empty, so a missing map is treated the same as a missing key.
    """
    params = event.get("queryStringParameters") or {}
    value = params.get(name)
    if value is None:
        return None
    value = str(value)
    if not value.strip():
        return None
    return value


def _raw_body(event: Dict[str, Any]) -> Optional[str]:
    """Return the request body as text, decoding base64 payloads."""
    raw = event.get("body")
    if raw is None:
        return None
    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise InvalidRequestError("Invalid base64 body") from exc
    return raw
