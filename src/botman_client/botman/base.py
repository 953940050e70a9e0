"""
Shared request pipeline for Bot Manager operations.

Every operation runs the same steps: trace, build the request, execute
it through the session, check the status and decode the body into a
generic mapping. The response is released on every exit path.
"""

import logging
from typing import Any, Optional

import httpx

from ..session import RequestOptions, Session, close_response
from ..utils.http_utils import JsonPayload, decode_json_object
from .exceptions import RemoteAPIError, TransportError

logger = logging.getLogger(__name__)


def format_uri(template: str, **params: Any) -> str:
    """
    Substitute path parameters into an endpoint template.

    Integers are formatted in decimal and strings are inserted verbatim.

    Examples:
        >>> format_uri("/configs/{config_id}/versions/{version}", config_id=43253, version=15)
        '/configs/43253/versions/15'
    """
    return template.format(**{name: str(value) for name, value in params.items()})


class BaseClient:
    """Base class holding the session and the request pipeline."""

    def __init__(self, session: Session):
        self.session = session

    def _request(
        self,
        operation: str,
        method: str,
        uri: str,
        payload: Optional[JsonPayload] = None,
        options: Optional[RequestOptions] = None,
        params: Optional[Any] = None,
    ) -> dict[str, Any]:
        """
        Execute one API call and return the decoded JSON object.

        Args:
            operation: Operation name used in log events and errors
            method: HTTP method
            uri: Request path
            payload: JSON body for write operations
            options: Per-call options
            params: Request object whose validate() runs before any network call

        Returns:
            Decoded response body

        Raises:
            ValidationError: If params fail required-field validation
            TransportError: If the request fails or the body is not a JSON object
            RemoteAPIError: If the API answers with a non-200 status
        """
        log = self.session.log(options)
        log.debug(operation)

        if params is not None:
            params.validate()

        try:
            request = self.session.build_request(method, uri, payload, options)
        except (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError) as e:
            raise TransportError(
                f"failed to create {operation} request: {e}", operation=operation
            ) from e

        try:
            response = self.session.send(request, options)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(
                f"{operation} request failed: {e}", operation=operation
            ) from e

        try:
            if response.status_code != httpx.codes.OK:
                raise RemoteAPIError.from_response(response, log)

            try:
                return decode_json_object(response)
            except ValueError as e:
                raise TransportError(
                    f"{operation} request failed: could not decode response: {e}",
                    operation=operation,
                ) from e
        finally:
            close_response(response)
