"""
HTTP session layer for Bot Manager API calls.

Usage:
    from botman_client.session import RequestOptions, Session

    with Session(base_url="https://akab-xxxx.luna.akamaiapis.net", auth=signer) as s:
        response = s.exec("GET", "/appsec/v1/bot-analytics-cookie/values")
"""

from .session import RequestOptions, Session, close_response

__all__ = [
    "Session",
    "RequestOptions",
    "close_response",
]
