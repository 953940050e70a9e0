"""
Bot analytics cookie operations.

Reads the cookie values the Bot Manager analytics cookie can take, and
reads or updates the analytics cookie settings of a configuration version.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..config.constants import (
    BOT_ANALYTICS_COOKIE_PATH,
    BOT_ANALYTICS_COOKIE_VALUES_PATH,
)
from ..session import RequestOptions
from ..utils.http_utils import JsonPayload
from .base import format_uri
from .validation import check_required


@dataclass(frozen=True)
class GetBotAnalyticsCookieRequest:
    """Request for the analytics cookie settings of a configuration version."""

    config_id: int = 0
    version: int = 0

    def validate(self) -> None:
        check_required({"ConfigID": self.config_id, "Version": self.version})


@dataclass(frozen=True)
class UpdateBotAnalyticsCookieRequest:
    """Request to replace the analytics cookie settings of a configuration version."""

    config_id: int = 0
    version: int = 0
    json_payload: Optional[JsonPayload] = None

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "JsonPayload": self.json_payload,
            }
        )


class AnalyticsCookieOperations:
    """Bot analytics cookie endpoints."""

    def get_bot_analytics_cookie_values(
        self, options: Optional[RequestOptions] = None
    ) -> dict[str, Any]:
        """
        Fetch the values available for the bot analytics cookie.

        Returns:
            Response mapping, e.g. ``{"values": [...]}``
        """
        return self._request(
            "GetBotAnalyticsCookieValues",
            "GET",
            BOT_ANALYTICS_COOKIE_VALUES_PATH,
            options=options,
        )

    def get_bot_analytics_cookie(
        self,
        params: GetBotAnalyticsCookieRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Fetch the analytics cookie settings of a configuration version."""
        uri = format_uri(
            BOT_ANALYTICS_COOKIE_PATH,
            config_id=params.config_id,
            version=params.version,
        )
        return self._request(
            "GetBotAnalyticsCookie", "GET", uri, options=options, params=params
        )

    def update_bot_analytics_cookie(
        self,
        params: UpdateBotAnalyticsCookieRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Replace the analytics cookie settings of a configuration version."""
        uri = format_uri(
            BOT_ANALYTICS_COOKIE_PATH,
            config_id=params.config_id,
            version=params.version,
        )
        return self._request(
            "UpdateBotAnalyticsCookie",
            "PUT",
            uri,
            payload=params.json_payload,
            options=options,
            params=params,
        )
