"""
Bot category exception operations.

A bot category exception overrides how Bot Manager treats a category for
the transactional endpoints of one security policy.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..config.constants import BOT_CATEGORY_EXCEPTION_PATH
from ..session import RequestOptions
from ..utils.http_utils import JsonPayload
from .base import format_uri
from .validation import check_required


@dataclass(frozen=True)
class GetBotCategoryExceptionRequest:
    """Request for the bot category exception of a security policy."""

    config_id: int = 0
    version: int = 0
    security_policy_id: str = ""

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "SecurityPolicyID": self.security_policy_id,
            }
        )


@dataclass(frozen=True)
class UpdateBotCategoryExceptionRequest:
    """Request to replace the bot category exception of a security policy."""

    config_id: int = 0
    version: int = 0
    security_policy_id: str = ""
    json_payload: Optional[JsonPayload] = None

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "SecurityPolicyID": self.security_policy_id,
                "JsonPayload": self.json_payload,
            }
        )


def _exception_uri(
    params: "GetBotCategoryExceptionRequest | UpdateBotCategoryExceptionRequest",
) -> str:
    return format_uri(
        BOT_CATEGORY_EXCEPTION_PATH,
        config_id=params.config_id,
        version=params.version,
        security_policy_id=params.security_policy_id,
    )


class BotCategoryExceptionOperations:
    """Bot category exception endpoints."""

    def get_bot_category_exception(
        self,
        params: GetBotCategoryExceptionRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Fetch the bot category exception of a security policy."""
        return self._request(
            "GetBotCategoryException",
            "GET",
            _exception_uri(params),
            options=options,
            params=params,
        )

    def update_bot_category_exception(
        self,
        params: UpdateBotCategoryExceptionRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Replace the bot category exception of a security policy."""
        return self._request(
            "UpdateBotCategoryException",
            "PUT",
            _exception_uri(params),
            payload=params.json_payload,
            options=options,
            params=params,
        )
