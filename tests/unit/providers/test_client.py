"""Tests for the Assets REST client."""

import json
from unittest.mock import Mock

import pytest
import requests

from jiraassets.exceptions import AssetsApiError
from jiraassets.models.assets import ObjectPayload, PayloadAttribute, PayloadAttributeValue
from jiraassets.providers.assets.client import ATTRIBUTE_LISTING_PARAMS, AssetsClient

BASE = "https://api.atlassian.com/jsm/assets/workspace/ws-1/v1"


def make_response(status_code=200, body=None, url=BASE):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.headers["Content-Type"] = "application/json"
    response._content = b"" if body is None else json.dumps(body).encode()
    return response


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.headers = {}
    return session


@pytest.fixture
def client(session):
    return AssetsClient("ws-1", "admin@example.com", "token", session=session)


class TestAssetsClient:
    """Test request construction and response parsing."""

    def test_session_setup(self, client, session):
        """Test basic auth and JSON headers are installed on the session."""
        assert session.auth == ("admin@example.com", "token")
        assert session.headers["Accept"] == "application/json"
        assert client.base_url == BASE

    def test_custom_api_url(self, session):
        client = AssetsClient("ws-9", "u", "p", api_url="https://gateway.example.com/", session=session)
        assert client.base_url == "https://gateway.example.com/jsm/assets/workspace/ws-9/v1"

    def test_create_object_sends_payload(self, client, session):
        session.request.return_value = make_response(
            201, {"id": "42", "objectKey": "ITSM-42", "objectType": {"id": "10", "name": "Host"}}
        )
        payload = ObjectPayload(
            object_type_id="10",
            attributes=[
                PayloadAttribute(
                    object_type_attribute_id="101",
                    object_attribute_values=[PayloadAttributeValue(value="1")],
                )
            ],
        )

        obj = client.create_object(payload)

        session.request.assert_called_once_with(
            "POST",
            f"{BASE}/object/create",
            params=None,
            json={
                "objectTypeId": "10",
                "attributes": [
                    {"objectTypeAttributeId": "101", "objectAttributeValues": [{"value": "1"}]}
                ],
                "hasAvatar": False,
            },
            timeout=None,
        )
        assert obj.id == "42"
        assert obj.object_type_name == "Host"

    def test_avatar_uuid_alias(self):
        payload = ObjectPayload(object_type_id="10", has_avatar=True, avatar_uuid="abc-123")
        assert payload.to_payload()["avatarUUID"] == "abc-123"

    def test_list_object_type_attributes_query(self, client, session):
        session.request.return_value = make_response(
            200, [{"id": "100", "name": "Name", "type": 0, "objectType": {"id": 10, "name": "Host"}}]
        )

        attributes = client.list_object_type_attributes("10")

        session.request.assert_called_once_with(
            "GET",
            f"{BASE}/objecttype/10/attributes",
            params=ATTRIBUTE_LISTING_PARAMS,
            json=None,
            timeout=None,
        )
        assert attributes[0].object_type_name == "Host"
        assert attributes[0].object_type.id == "10"
        assert ATTRIBUTE_LISTING_PARAMS["onlyValueEditable"] == "true"
        assert ATTRIBUTE_LISTING_PARAMS["includeChildren"] == "true"

    def test_list_status_types_scoped_to_schema(self, client, session):
        session.request.return_value = make_response(200, [{"id": "1", "name": "Enabled", "category": 1}])

        statuses = client.list_status_types("3")

        assert session.request.call_args.kwargs["params"] == {"objectSchemaId": "3"}
        assert statuses[0].name == "Enabled"

    def test_delete_with_empty_body(self, client, session):
        session.request.return_value = make_response(204)

        assert client.delete_object("42") is None
        assert session.request.call_args.args == ("DELETE", f"{BASE}/object/42")

    def test_error_response_keeps_request_context(self, client, session):
        session.request.return_value = make_response(
            404, {"errorMessages": ["Object not found"]}, url=f"{BASE}/object/42"
        )

        with pytest.raises(AssetsApiError) as exc_info:
            client.get_object("42")

        error = exc_info.value
        assert error.status_code == 404
        assert error.url == f"{BASE}/object/42"
        assert error.method == "GET"
        assert "Object not found" in error.body
        assert error.headers["Content-Type"] == "application/json"

    def test_transport_error_is_wrapped(self, client, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(AssetsApiError, match="connection refused") as exc_info:
            client.get_object_attributes("42")

        assert exc_info.value.status_code is None

    def test_no_retry_on_failure(self, client, session):
        session.request.return_value = make_response(503, {"message": "unavailable"})

        with pytest.raises(AssetsApiError):
            client.list_object_types("3")

        assert session.request.call_count == 1

    def test_empty_success_body_is_an_api_error(self, client, session):
        """Test a 2xx response without the expected object keeps the request context."""
        session.request.return_value = make_response(200, url=f"{BASE}/object/create")
        payload = ObjectPayload(object_type_id="10")

        with pytest.raises(AssetsApiError, match="unexpected body") as exc_info:
            client.create_object(payload)

        error = exc_info.value
        assert error.method == "POST"
        assert error.status_code == 200
        assert error.url == f"{BASE}/object/create"
        assert error.body == ""

    def test_wrongly_shaped_listing_is_an_api_error(self, client, session):
        session.request.return_value = make_response(200, {"values": []})

        with pytest.raises(AssetsApiError, match="expected a list"):
            client.list_status_types("3")

    def test_close_releases_session(self, client, session):
        client.close()
        session.close.assert_called_once_with()
