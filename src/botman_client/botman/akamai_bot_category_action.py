"""
Akamai bot category action operations.

Lists, reads and updates the action a security policy applies to each
Akamai-defined bot category.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..config.constants import (
    AKAMAI_BOT_CATEGORY_ACTION_PATH,
    AKAMAI_BOT_CATEGORY_ACTIONS_PATH,
)
from ..session import RequestOptions
from ..utils.http_utils import JsonPayload
from .base import format_uri
from .exceptions import TransportError
from .validation import check_required


@dataclass(frozen=True)
class GetAkamaiBotCategoryActionListRequest:
    """
    Request for the category actions of a security policy.

    When category_id is set, only the matching action is returned.
    """

    config_id: int = 0
    version: int = 0
    security_policy_id: str = ""
    category_id: str = ""

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "SecurityPolicyID": self.security_policy_id,
            }
        )


@dataclass(frozen=True)
class GetAkamaiBotCategoryActionRequest:
    """Request for the action of one Akamai bot category."""

    config_id: int = 0
    version: int = 0
    security_policy_id: str = ""
    category_id: str = ""

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "SecurityPolicyID": self.security_policy_id,
                "CategoryID": self.category_id,
            }
        )


@dataclass(frozen=True)
class UpdateAkamaiBotCategoryActionRequest:
    """Request to replace the action of one Akamai bot category."""

    config_id: int = 0
    version: int = 0
    security_policy_id: str = ""
    category_id: str = ""
    json_payload: Optional[JsonPayload] = None

    def validate(self) -> None:
        check_required(
            {
                "ConfigID": self.config_id,
                "Version": self.version,
                "SecurityPolicyID": self.security_policy_id,
                "CategoryID": self.category_id,
                "JsonPayload": self.json_payload,
            }
        )


def filter_actions(actions: list[Any], category_id: str) -> list[Any]:
    """Keep the actions whose categoryId matches."""
    return [
        action
        for action in actions
        if isinstance(action, dict) and action.get("categoryId") == category_id
    ]


class AkamaiBotCategoryActionOperations:
    """Akamai bot category action endpoints."""

    def get_akamai_bot_category_action_list(
        self,
        params: GetAkamaiBotCategoryActionListRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """
        List the category actions of a security policy.

        Returns:
            Mapping with an ``actions`` list, filtered to params.category_id
            when one is given
        """
        uri = format_uri(
            AKAMAI_BOT_CATEGORY_ACTIONS_PATH,
            config_id=params.config_id,
            version=params.version,
            security_policy_id=params.security_policy_id,
        )
        result = self._request(
            "GetAkamaiBotCategoryActionList",
            "GET",
            uri,
            options=options,
            params=params,
        )

        actions = result.get("actions") or []
        if not isinstance(actions, list):
            raise TransportError(
                "GetAkamaiBotCategoryActionList request failed: "
                f"'actions' is a {type(actions).__name__}, expected a list",
                operation="GetAkamaiBotCategoryActionList",
            )

        if not params.category_id:
            return {"actions": actions}
        return {"actions": filter_actions(actions, params.category_id)}

    def get_akamai_bot_category_action(
        self,
        params: GetAkamaiBotCategoryActionRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Fetch the action of one Akamai bot category."""
        uri = format_uri(
            AKAMAI_BOT_CATEGORY_ACTION_PATH,
            config_id=params.config_id,
            version=params.version,
            security_policy_id=params.security_policy_id,
            category_id=params.category_id,
        )
        return self._request(
            "GetAkamaiBotCategoryAction", "GET", uri, options=options, params=params
        )

    def update_akamai_bot_category_action(
        self,
        params: UpdateAkamaiBotCategoryActionRequest,
        options: Optional[RequestOptions] = None,
    ) -> dict[str, Any]:
        """Replace the action of one Akamai bot category."""
        uri = format_uri(
            AKAMAI_BOT_CATEGORY_ACTION_PATH,
            config_id=params.config_id,
            version=params.version,
            security_policy_id=params.security_policy_id,
            category_id=params.category_id,
        )
        return self._request(
            "UpdateAkamaiBotCategoryAction",
            "PUT",
            uri,
            payload=params.json_payload,
            options=options,
            params=params,
        )
