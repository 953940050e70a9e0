"""Utility functions for the Bot Manager client."""

from .http_utils import (
    JsonPayload,
    decode_json_object,
    dump_request,
    dump_response,
    encode_json_payload,
    get_status_category,
)
from .logging_utils import setup_logging

__all__ = [
    # Status codes
    "get_status_category",
    # Payloads and trace dumps
    "JsonPayload",
    "encode_json_payload",
    "decode_json_object",
    "dump_request",
    "dump_response",
    # Logging
    "setup_logging",
]
