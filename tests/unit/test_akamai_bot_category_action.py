"""
Unit tests for Akamai bot category action operations.
"""

import pytest

from botman_client.botman import (
    GetAkamaiBotCategoryActionListRequest,
    GetAkamaiBotCategoryActionRequest,
    RemoteAPIError,
    TransportError,
    UpdateAkamaiBotCategoryActionRequest,
    ValidationError,
)
from tests.unit.conftest import INTERNAL_ERROR_BODY

ACTIONS_PATH = (
    "/appsec/v1/configs/43253/versions/15/security-policies/AAAA_81230"
    "/akamai-bot-category-actions"
)
CATEGORY_ID = "cc9c3f89-e179-4892-89cf-d5e623ba9dc7"

ACTIONS_BODY = """
{
    "actions": [
        {"categoryId": "b85e3eaa-d334-466d-857e-33308ce416be", "testKey": "testValue1"},
        {"categoryId": "69acad64-7459-4c1d-9bad-672600150127", "testKey": "testValue2"},
        {"categoryId": "cc9c3f89-e179-4892-89cf-d5e623ba9dc7", "testKey": "testValue3"},
        {"categoryId": "10c54ea3-e3cb-4fc0-b0e0-fa3658aebd7b", "testKey": "testValue4"},
        {"categoryId": "4d64d85a-a07f-485a-bbac-24c60658a1b8", "testKey": "testValue5"}
    ]
}"""


class TestGetAkamaiBotCategoryActionList:
    """Tests for get_akamai_bot_category_action_list."""

    def test_200_ok(self, mock_api):
        api = mock_api(status=200, body=ACTIONS_BODY)

        result = api.client.get_akamai_bot_category_action_list(
            GetAkamaiBotCategoryActionListRequest(
                config_id=43253, version=15, security_policy_id="AAAA_81230"
            )
        )

        assert len(result["actions"]) == 5
        assert result["actions"][0]["testKey"] == "testValue1"
        assert api.last_request.url.path == ACTIONS_PATH

    def test_200_ok_filtered_to_one_category(self, mock_api):
        api = mock_api(status=200, body=ACTIONS_BODY)

        result = api.client.get_akamai_bot_category_action_list(
            GetAkamaiBotCategoryActionListRequest(
                config_id=43253,
                version=15,
                security_policy_id="AAAA_81230",
                category_id=CATEGORY_ID,
            )
        )

        assert result == {
            "actions": [{"categoryId": CATEGORY_ID, "testKey": "testValue3"}]
        }
        # The filter is applied locally, not as part of the path
        assert api.last_request.url.path == ACTIONS_PATH

    def test_actions_not_a_list(self, mock_api):
        api = mock_api(status=200, body='{"actions": {"categoryId": "x"}}')

        with pytest.raises(TransportError):
            api.client.get_akamai_bot_category_action_list(
                GetAkamaiBotCategoryActionListRequest(
                    config_id=43253, version=15, security_policy_id="AAAA_81230"
                )
            )

    def test_500_internal_server_error(self, mock_api):
        api = mock_api(status=500, body=INTERNAL_ERROR_BODY)

        with pytest.raises(RemoteAPIError) as exc_info:
            api.client.get_akamai_bot_category_action_list(
                GetAkamaiBotCategoryActionListRequest(
                    config_id=43253, version=15, security_policy_id="AAAA_81230"
                )
            )

        assert exc_info.value.status_code == 500

    def test_category_id_not_required(self, mock_api):
        api = mock_api()

        with pytest.raises(ValidationError) as exc_info:
            api.client.get_akamai_bot_category_action_list(
                GetAkamaiBotCategoryActionListRequest(config_id=43253, version=15)
            )

        assert list(exc_info.value.fields) == ["SecurityPolicyID"]
        assert api.requests == []


class TestGetAkamaiBotCategoryAction:
    """Tests for get_akamai_bot_category_action."""

    def test_200_ok(self, mock_api):
        body = f'{{"categoryId": "{CATEGORY_ID}", "testKey": "testValue3"}}'
        api = mock_api(status=200, body=body)

        result = api.client.get_akamai_bot_category_action(
            GetAkamaiBotCategoryActionRequest(
                config_id=43253,
                version=15,
                security_policy_id="AAAA_81230",
                category_id=CATEGORY_ID,
            )
        )

        assert result == {"categoryId": CATEGORY_ID, "testKey": "testValue3"}
        assert api.last_request.url.path == f"{ACTIONS_PATH}/{CATEGORY_ID}"

    def test_missing_category_id(self, mock_api):
        api = mock_api()

        with pytest.raises(ValidationError) as exc_info:
            api.client.get_akamai_bot_category_action(
                GetAkamaiBotCategoryActionRequest(
                    config_id=43253, version=15, security_policy_id="AAAA_81230"
                )
            )

        assert "CategoryID" in str(exc_info.value)
        assert api.requests == []


class TestUpdateAkamaiBotCategoryAction:
    """Tests for update_akamai_bot_category_action."""

    def test_200_ok(self, mock_api):
        payload = f'{{"categoryId":"{CATEGORY_ID}","action":"monitor"}}'
        api = mock_api(status=200, body=payload)

        result = api.client.update_akamai_bot_category_action(
            UpdateAkamaiBotCategoryActionRequest(
                config_id=43253,
                version=15,
                security_policy_id="AAAA_81230",
                category_id=CATEGORY_ID,
                json_payload=payload,
            )
        )

        assert result == {"categoryId": CATEGORY_ID, "action": "monitor"}
        assert api.last_request.method == "PUT"
        assert api.last_request.url.path == f"{ACTIONS_PATH}/{CATEGORY_ID}"
        assert api.last_request.content == payload.encode("utf-8")

    def test_missing_payload(self, mock_api):
        api = mock_api()

        with pytest.raises(ValidationError):
            api.client.update_akamai_bot_category_action(
                UpdateAkamaiBotCategoryActionRequest(
                    config_id=43253,
                    version=15,
                    security_policy_id="AAAA_81230",
                    category_id=CATEGORY_ID,
                )
            )

        assert api.requests == []
