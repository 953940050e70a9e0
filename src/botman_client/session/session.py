"""
HTTP session used by the Bot Manager client.

Wraps an ``httpx.Client`` with the API base URL, user agent, optional
account switch key and request tracing. Request signing is supplied by
the caller as an ``httpx.Auth`` instance.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from ..config.constants import (
    ACCOUNT_SWITCH_KEY_PARAM,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from ..config.settings import Settings
from ..utils.http_utils import (
    JsonPayload,
    dump_request,
    dump_response,
    encode_json_payload,
)

logger = logging.getLogger(__name__)


@dataclass
class RequestOptions:
    """
    Per-call options.

    Attributes:
        timeout: Deadline for this call in seconds (session default if None)
        headers: Extra headers sent with this call only
        logger: Logger used for this call instead of the session logger
    """

    timeout: Optional[float] = None
    headers: dict[str, str] = field(default_factory=dict)
    logger: Optional[logging.Logger] = None


class Session:
    """
    Executes Bot Manager API requests.

    The session is safe to share between threads as long as the
    underlying ``httpx.Client`` is.
    """

    def __init__(
        self,
        base_url: str = "",
        client: Optional[httpx.Client] = None,
        auth: Optional[httpx.Auth] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        account_key: str = "",
        trace: bool = False,
        log: Optional[logging.Logger] = None,
    ):
        """
        Initialize the session.

        Args:
            base_url: API base URL (ignored when client is given)
            client: Pre-configured httpx client; one is created if None
            auth: Request signer applied to every call
            user_agent: User-Agent header value
            timeout: Default timeout in seconds for created clients
            account_key: Account switch key added to every request
            trace: Log request and response dumps at DEBUG
            log: Session logger (module logger if None)
        """
        if not user_agent:
            raise ValueError("user agent should not be empty")

        self._owns_client = client is None
        if client is None:
            client = httpx.Client(base_url=base_url, timeout=timeout)
        self._client = client
        self._auth = auth
        self.user_agent = user_agent
        self.account_key = account_key
        self.trace = trace
        self._logger = log or logger

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: Optional[httpx.Client] = None,
        auth: Optional[httpx.Auth] = None,
    ) -> "Session":
        """Create a session from client settings."""
        return cls(
            base_url=settings.base_url,
            client=client,
            auth=auth,
            user_agent=settings.user_agent,
            timeout=settings.timeout_seconds,
            account_key=settings.account_key,
            trace=settings.http_trace,
        )

    @property
    def client(self) -> httpx.Client:
        """The underlying httpx client."""
        return self._client

    def log(self, options: Optional[RequestOptions] = None) -> logging.Logger:
        """Return the call logger if one was supplied, else the session logger."""
        if options is not None and options.logger is not None:
            return options.logger
        return self._logger

    def build_request(
        self,
        method: str,
        path: str,
        payload: Optional[JsonPayload] = None,
        options: Optional[RequestOptions] = None,
    ) -> httpx.Request:
        """
        Build a request without sending it.

        Raises:
            httpx.HTTPError / httpx.InvalidURL: If the request cannot be built
            TypeError / ValueError: If the payload cannot be encoded
        """
        options = options or RequestOptions()

        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }
        content = encode_json_payload(payload)
        if content is not None:
            headers["Content-Type"] = "application/json"
        headers.update(options.headers)

        params = None
        if self.account_key:
            params = {ACCOUNT_SWITCH_KEY_PARAM: self.account_key}

        timeout = (
            options.timeout
            if options.timeout is not None
            else httpx.USE_CLIENT_DEFAULT
        )

        return self._client.build_request(
            method,
            path,
            content=content,
            headers=headers,
            params=params,
            timeout=timeout,
        )

    def exec(
        self,
        method: str,
        path: str,
        payload: Optional[JsonPayload] = None,
        options: Optional[RequestOptions] = None,
    ) -> httpx.Response:
        """
        Build, sign and send a request, then read the response body.

        The caller owns the returned response and must close it.

        Args:
            method: HTTP method
            path: Request path relative to the base URL
            payload: Optional JSON body
            options: Per-call options

        Returns:
            Response with its body already read

        Raises:
            httpx.HTTPError: If the request cannot be sent or completed
        """
        request = self.build_request(method, path, payload, options)
        return self.send(request, options)

    def send(
        self, request: httpx.Request, options: Optional[RequestOptions] = None
    ) -> httpx.Response:
        """
        Sign and send a built request, then read the response body.

        The caller owns the returned response and must close it.

        Raises:
            httpx.HTTPError: If the request cannot be sent or completed
        """
        log = self.log(options)

        if self.trace:
            log.debug(f"HTTP request:\n{dump_request(request)}")

        auth = self._auth if self._auth is not None else httpx.USE_CLIENT_DEFAULT
        response = self._client.send(request, auth=auth, stream=True)
        try:
            response.read()
        except BaseException:
            response.close()
            raise

        if self.trace:
            log.debug(f"HTTP response:\n{dump_response(response)}")

        return response

    def close(self) -> None:
        """Close the underlying client if this session created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def close_response(response: httpx.Response) -> None:
    """Release a response, ignoring errors raised while closing."""
    try:
        response.close()
    except httpx.HTTPError as e:
        logger.debug(f"Error closing response: {e}")
