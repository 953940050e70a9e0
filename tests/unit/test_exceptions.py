"""
Unit tests for the client exception classes.
"""

import httpx
import pytest

from botman_client.botman import (
    BotmanError,
    RemoteAPIError,
    TransportError,
    ValidationError,
)
from botman_client.botman.exceptions import UNPARSEABLE_ERROR_TITLE


def make_response(status: int, body: str) -> httpx.Response:
    request = httpx.Request("GET", "https://akab-test.luna.akamaiapis.net/test")
    return httpx.Response(status, content=body.encode("utf-8"), request=request)


class TestHierarchy:
    """All client errors share a base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError({"ConfigID": "cannot be blank"}),
            TransportError("GetBotCategoryException request failed"),
            RemoteAPIError(status_code=500),
        ],
    )
    def test_inherits_from_base(self, error):
        assert isinstance(error, BotmanError)


class TestValidationError:
    """Tests for ValidationError formatting."""

    def test_message_lists_fields_sorted(self):
        error = ValidationError(
            {"Version": "cannot be blank", "ConfigID": "cannot be blank"}
        )

        assert str(error) == (
            "struct validation: ConfigID: cannot be blank; Version: cannot be blank."
        )
        assert error.fields == {
            "Version": "cannot be blank",
            "ConfigID": "cannot be blank",
        }

    def test_no_fields(self):
        assert str(ValidationError({})) == "struct validation"


class TestRemoteAPIErrorEquality:
    """RemoteAPIError compares by value."""

    def test_equal_fields_are_equal(self):
        a = RemoteAPIError("internal_error", "Internal Server Error", "boom", 500)
        b = RemoteAPIError("internal_error", "Internal Server Error", "boom", 500)

        assert a == b
        assert a is not b
        assert hash(a) == hash(b)

    def test_different_status_not_equal(self):
        a = RemoteAPIError("internal_error", "Internal Server Error", "boom", 500)
        b = RemoteAPIError("internal_error", "Internal Server Error", "boom", 503)

        assert a != b

    def test_instance_ignored_in_comparison(self):
        a = RemoteAPIError("t", "x", "y", 404, instance="/a")
        b = RemoteAPIError("t", "x", "y", 404, instance="/b")

        assert a == b

    def test_not_equal_to_other_types(self):
        assert RemoteAPIError(status_code=500) != ValueError("500")


class TestRemoteAPIErrorFromResponse:
    """Tests for building errors from HTTP responses."""

    def test_parses_structured_body(self):
        response = make_response(
            403,
            '{"type": "forbidden", "title": "Forbidden", '
            '"detail": "No access", "instance": "/appsec/x", '
            '"errors": [{"title": "nested"}]}',
        )

        error = RemoteAPIError.from_response(response)

        assert error.type == "forbidden"
        assert error.title == "Forbidden"
        assert error.detail == "No access"
        assert error.instance == "/appsec/x"
        assert error.errors == [{"title": "nested"}]
        assert error.status_code == 403

    def test_status_comes_from_response(self):
        """The body's own status field never overrides the HTTP status."""
        response = make_response(502, '{"type": "t", "status": 500}')

        assert RemoteAPIError.from_response(response).status_code == 502

    def test_unparseable_body(self, caplog):
        response = make_response(500, "<html>Bad Gateway</html>")

        error = RemoteAPIError.from_response(response)

        assert error.title == UNPARSEABLE_ERROR_TITLE
        assert error.detail == "<html>Bad Gateway</html>"
        assert error.status_code == 500
        assert "could not unmarshal API error" in caplog.text

    def test_null_fields_read_as_empty(self):
        response = make_response(
            404, '{"type": null, "title": "Not Found", "detail": null}'
        )

        error = RemoteAPIError.from_response(response)

        assert error.type == ""
        assert error.title == "Not Found"
        assert error.detail == ""
        assert error.instance == ""
        assert error == RemoteAPIError("", "Not Found", "", 404)

    @pytest.mark.parametrize(
        "body",
        [
            '{"type": "t", "title": {"a": 1}, "detail": "d"}',
            '{"type": 7, "title": "x", "detail": "d"}',
            '{"type": "t", "title": "x", "detail": ["d"]}',
        ],
    )
    def test_wrong_field_type_is_unparseable(self, body, caplog):
        error = RemoteAPIError.from_response(make_response(400, body))

        assert error.title == UNPARSEABLE_ERROR_TITLE
        assert error.type == ""
        assert error.detail == body
        assert error.status_code == 400
        assert "could not unmarshal API error" in caplog.text

    def test_non_object_body(self):
        response = make_response(500, '["not", "an", "object"]')

        error = RemoteAPIError.from_response(response)

        assert error.title == UNPARSEABLE_ERROR_TITLE
        assert error.status_code == 500

    def test_str_contains_fields(self):
        error = RemoteAPIError("internal_error", "Internal Server Error", "boom", 500)

        text = str(error)
        assert "5xx_server_error" in text
        assert "Internal Server Error" in text
        assert '"statusCode": 500' in text
