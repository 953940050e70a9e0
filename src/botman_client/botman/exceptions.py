"""
Custom exceptions for the Bot Manager client.

Provides specialized exception classes for the three ways an operation
can fail: request validation, transport, and remote API errors.
"""

import json
import logging
from typing import Any, Optional

import httpx

from ..utils.http_utils import get_status_category

logger = logging.getLogger(__name__)

# Title used when an error body cannot be parsed as JSON
UNPARSEABLE_ERROR_TITLE = (
    "Failed to unmarshal error body. Bot Manager API failed. "
    "Check details for more information."
)


class BotmanError(Exception):
    """
    Base exception for all Bot Manager client errors.

    All other client exceptions inherit from this class,
    allowing for broad exception catching when needed.
    """

    pass


class ValidationError(BotmanError):
    """
    Raised when a request fails required-field validation.

    No network call is made when this is raised.

    Attributes:
        fields: Mapping of offending field name to reason
        message: Detailed error message
    """

    def __init__(self, fields: dict[str, str], message: str = "struct validation"):
        self.fields = dict(fields)
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message listing every offending field."""
        if not self.fields:
            return self.message
        details = "; ".join(
            f"{name}: {reason}" for name, reason in sorted(self.fields.items())
        )
        return f"{self.message}: {details}."


class TransportError(BotmanError):
    """
    Raised when a request cannot be built, dispatched or completed.

    Also covers a successful response whose body is not a JSON object.
    The underlying exception is chained as ``__cause__``.

    Attributes:
        operation: Name of the operation that failed
        message: Detailed error message
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        self.message = message
        super().__init__(message)


class RemoteAPIError(BotmanError):
    """
    Raised when the API answers with a non-200 status.

    Two errors compare equal when their type, title, detail and
    status code match.

    Attributes:
        type: Problem type reported by the API
        title: Short summary
        detail: Longer explanation
        status_code: HTTP status of the response
        instance: Problem instance identifier (optional)
        errors: Nested error objects (optional)
    """

    def __init__(
        self,
        type: str = "",
        title: str = "",
        detail: str = "",
        status_code: int = 0,
        instance: str = "",
        errors: Optional[list[Any]] = None,
    ):
        self.type = type
        self.title = title
        self.detail = detail
        self.status_code = status_code
        self.instance = instance
        self.errors = errors or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Render the error the way the API reported it."""
        category = get_status_category(self.status_code) or "unknown_status"
        return f"API error ({self.status_code} {category}): \n" + json.dumps(
            self.to_dict(), indent="\t"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        result: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "detail": self.detail,
            "statusCode": self.status_code,
        }
        if self.instance:
            result["instance"] = self.instance
        if self.errors:
            result["errors"] = self.errors
        return result

    def _key(self) -> tuple:
        return (self.type, self.title, self.detail, self.status_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RemoteAPIError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"RemoteAPIError(type={self.type!r}, title={self.title!r}, "
            f"detail={self.detail!r}, status_code={self.status_code!r})"
        )

    @classmethod
    def from_response(
        cls, response: httpx.Response, log: Optional[logging.Logger] = None
    ) -> "RemoteAPIError":
        """
        Build an error from a non-success response.

        The status code always comes from the response itself, even when
        the body carries its own ``status`` field.

        Args:
            response: Response whose body has already been read
            log: Logger for parse failures (module logger if None)

        Returns:
            RemoteAPIError populated from the body
        """
        log = log or logger

        try:
            body = response.text
        except httpx.HTTPError as e:
            log.error(f"reading error response body: {e}")
            return cls(
                title="Failed to read error body",
                detail=str(e),
                status_code=response.status_code,
            )

        try:
            data = json.loads(body)
        except ValueError as e:
            log.error(f"could not unmarshal API error: {e}")
            data = None

        fields = {}
        if isinstance(data, dict):
            for name in ("type", "title", "detail", "instance"):
                value = data.get(name)
                # null reads as an empty string
                if value is None:
                    fields[name] = ""
                elif isinstance(value, str):
                    fields[name] = value
                else:
                    log.error(
                        f"could not unmarshal API error: field {name!r} is a "
                        f"{type(value).__name__}, expected a string"
                    )
                    data = None
                    break

        if not isinstance(data, dict):
            return cls(
                title=UNPARSEABLE_ERROR_TITLE,
                detail=body,
                status_code=response.status_code,
            )

        errors = data.get("errors")
        return cls(
            errors=errors if isinstance(errors, list) else None,
            status_code=response.status_code,
            **fields,
        )
