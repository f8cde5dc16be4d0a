"""Unit tests for core.hubspot_client: wire format and error mapping."""
import json

import httpx
import pytest

from core.config import DEFAULT_BASE_URL
from core.errors import RemoteCallError
from core.hubspot_client import HubSpotClient
from core.models import SearchRequest, SortSpec


def _client(handler, seen=None):
    def _record(request):
        if seen is not None:
            seen.append(request)
        return handler(request)
    return HubSpotClient(
        api_key="test-token",
        base_url="https://api.test",
        transport=httpx.MockTransport(_record),
    )


class TestRequests:
    def test_create_posts_properties_with_bearer_token(self):
        seen = []
        client = _client(lambda r: httpx.Response(201, json={"id": "101", "properties": {}}), seen)

        record = client.create_contact({"email": "a@b.com"})

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/crm/v3/objects/contacts"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"properties": {"email": "a@b.com"}}
        assert record.id == "101"

    def test_get_page_query_parameters(self):
        seen = []
        body = {"results": [{"id": "1", "properties": {"email": "x@y.com"}}]}
        client = _client(lambda r: httpx.Response(200, json=body), seen)

        records = client.get_page(limit=10, properties=["firstname", "email"])

        params = seen[0].url.params
        assert seen[0].method == "GET"
        assert params["limit"] == "10"
        assert params["properties"] == "firstname,email"
        assert params["archived"] == "false"
        assert [r.id for r in records] == ["1"]

    def test_update_patches_contact(self):
        seen = []
        client = _client(lambda r: httpx.Response(200, json={"id": "42", "properties": {}}), seen)

        client.update_contact("42", {})

        assert seen[0].method == "PATCH"
        assert seen[0].url.path == "/crm/v3/objects/contacts/42"
        assert json.loads(seen[0].content) == {"properties": {}}

    def test_archive_handles_no_content(self):
        seen = []
        client = _client(lambda r: httpx.Response(204), seen)

        assert client.archive_contact("42") is None
        assert seen[0].method == "DELETE"
        assert seen[0].url.path == "/crm/v3/objects/contacts/42"

    def test_search_posts_payload(self):
        seen = []
        client = _client(lambda r: httpx.Response(200, json={"total": 0, "results": []}), seen)
        request = SearchRequest(properties=["email"], limit=2, sorts=[SortSpec("createdate")])

        records = client.search_contacts(request)

        assert seen[0].url.path == "/crm/v3/objects/contacts/search"
        assert json.loads(seen[0].content) == request.to_payload()
        assert records == []


class TestErrors:
    def test_http_error_uses_hubspot_message(self):
        body = {"status": "error", "message": "Contact already exists. Existing ID: 7"}
        client = _client(lambda r: httpx.Response(409, json=body))

        with pytest.raises(RemoteCallError) as excinfo:
            client.create_contact({"email": "a@b.com"})

        assert excinfo.value.message == "Contact already exists. Existing ID: 7"
        assert excinfo.value.status_code == 409

    def test_http_error_without_body(self):
        client = _client(lambda r: httpx.Response(500, text="oops"))

        with pytest.raises(RemoteCallError) as excinfo:
            client.archive_contact("42")

        assert excinfo.value.message == "HTTP 500"

    def test_transport_error_becomes_remote_call_error(self):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(_fail)

        with pytest.raises(RemoteCallError, match="connection refused"):
            client.get_page(limit=10, properties=["email"])

    def test_invalid_json_becomes_remote_call_error(self):
        client = _client(lambda r: httpx.Response(200, text="<html>"))

        with pytest.raises(RemoteCallError):
            client.search_contacts(SearchRequest())


def test_default_base_url_is_hubspot_api():
    seen = []
    client = HubSpotClient(
        api_key="test-token",
        transport=httpx.MockTransport(lambda r: seen.append(r) or httpx.Response(204)),
    )

    client.archive_contact("42")

    assert f"{seen[0].url.scheme}://{seen[0].url.host}" == DEFAULT_BASE_URL
