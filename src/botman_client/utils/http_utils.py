"""
HTTP utility functions.

Helpers for status codes, request payloads and trace dumps used by the
session and the Bot Manager operations.
"""

import json
from typing import Any, Optional, Union

import httpx

JsonPayload = Union[str, bytes, bytearray, dict, list]


def get_status_category(status_code: Optional[int]) -> Optional[str]:
    """
    Categorize an HTTP status code into a human-readable category.

    Categories:
        - '2xx_success': Successful responses (200-299)
        - '3xx_redirect': Redirection messages (300-399)
        - '4xx_client_error': Client errors (400-499)
        - '5xx_server_error': Server errors (500-599)

    Args:
        status_code: HTTP status code (e.g., 200, 404, 500)

    Returns:
        Category string, or None if status_code is None or invalid

    Examples:
        >>> get_status_category(200)
        '2xx_success'
        >>> get_status_category(404)
        '4xx_client_error'
    """
    if status_code is None:
        return None

    if 200 <= status_code < 300:
        return "2xx_success"
    elif 300 <= status_code < 400:
        return "3xx_redirect"
    elif 400 <= status_code < 500:
        return "4xx_client_error"
    elif 500 <= status_code < 600:
        return "5xx_server_error"
    else:
        return None


def encode_json_payload(payload: Optional[JsonPayload]) -> Optional[bytes]:
    """
    Turn a request payload into the bytes sent on the wire.

    Raw JSON (str or bytes) is passed through untouched. Dicts and lists
    are serialized with ``json.dumps``.

    Args:
        payload: Raw JSON text, bytes, or a JSON-compatible object

    Returns:
        Encoded body, or None when there is no payload
    """
    if payload is None:
        return None
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return json.dumps(payload).encode("utf-8")


def _body_text(content: bytes, limit: int) -> str:
    text = content.decode("utf-8", errors="replace")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def dump_request(request: httpx.Request, limit: int = 2000) -> str:
    """Render a request for trace logging."""
    lines = [f"{request.method} {request.url}"]
    lines.extend(f"{name}: {value}" for name, value in request.headers.items())
    if request.content:
        lines.append("")
        lines.append(_body_text(request.content, limit))
    return "\n".join(lines)


def dump_response(response: httpx.Response, limit: int = 2000) -> str:
    """Render a response (body already read) for trace logging."""
    lines = [f"HTTP {response.status_code} {response.reason_phrase}"]
    lines.extend(f"{name}: {value}" for name, value in response.headers.items())
    if response.content:
        lines.append("")
        lines.append(_body_text(response.content, limit))
    return "\n".join(lines)


def decode_json_object(response: httpx.Response) -> dict[str, Any]:
    """
    Decode a response body into a generic mapping.

    Raises:
        ValueError: If the body is not valid JSON or not a JSON object
    """
    data = json.loads(response.content)
    if not isinstance(data, dict):
        raise ValueError(
            f"expected a JSON object, got {type(data).__name__}"
        )
    return data
