"""Tests for CustomerIoClient using an httpx mock transport."""

import base64
import json

import httpx
import pytest

from customerio_node.client import CustomerIoClient
from customerio_node.credentials import CustomerIoCredentials
from customerio_node.errors import CustomerIoApiError
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant
from customerio_node.models.settings import Settings


def _client(credentials: CustomerIoCredentials, handler, settings: Settings | None = None) -> CustomerIoClient:
    return CustomerIoClient(
        credentials,
        settings=settings,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


class TestCustomerIoClientRouting:
    """Base URL and authentication per API variant."""

    def test_tracking_uses_basic_auth(self, credentials: CustomerIoCredentials) -> None:
        """Track API requests go to track.customer.io with site id:key basic auth."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        client = _client(credentials, handler)
        client.request("PUT", "/customers/1", {"email": "a@example.com"}, ApiVariant.TRACKING)

        request = seen[0]
        assert str(request.url) == "https://track.customer.io/api/v1/customers/1"
        expected = base64.b64encode(b"site-123:track-key").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert json.loads(request.content) == {"email": "a@example.com"}

    def test_api_uses_bearer(self, credentials: CustomerIoCredentials) -> None:
        """App API requests carry the bearer app key."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": 3})

        client = _client(credentials, handler)
        result = client.request("POST", "/campaigns/2/triggers", {"data": {}}, ApiVariant.API)
        assert result == {"id": 3}
        assert str(seen[0].url) == "https://api.customer.io/v1/api/campaigns/2/triggers"
        assert seen[0].headers["Authorization"] == "Bearer app-key"

    def test_empty_body_not_sent(self, credentials: CustomerIoCredentials) -> None:
        """GET with an empty body sends no content."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"t": 1}])

        client = _client(credentials, handler)
        result = client.send(RequestSpec(method="GET", endpoint="/campaigns/1/triggers/2", api_variant=ApiVariant.API))
        assert result == [{"t": 1}]
        assert seen[0].content == b""

    def test_settings_override_base_url(self, credentials: CustomerIoCredentials) -> None:
        """Custom base URLs from settings are used."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        settings = Settings(tracking_base_url="https://track-eu.customer.io/api/v1")
        client = _client(credentials, handler, settings)
        client.request("POST", "/events", {"name": "x"}, ApiVariant.TRACKING)
        assert str(seen[0].url) == "https://track-eu.customer.io/api/v1/events"


class TestCustomerIoClientResponses:
    """Response decoding and error handling."""

    def test_empty_response_is_empty_dict(self, credentials: CustomerIoCredentials) -> None:
        """An empty 200 body decodes to {}."""
        client = _client(credentials, lambda request: httpx.Response(200))
        assert client.request("DELETE", "/customers/1", {"id": 1}, ApiVariant.TRACKING) == {}

    def test_error_raises_with_status_and_message(self, credentials: CustomerIoCredentials) -> None:
        """Non-2xx raises CustomerIoApiError with the upstream message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"meta": {"error": "Unauthorized request"}})

        client = _client(credentials, handler)
        with pytest.raises(CustomerIoApiError) as exc_info:
            client.request("POST", "/events", {"name": "x"}, ApiVariant.TRACKING)
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Unauthorized request"
        assert "[401]" in str(exc_info.value)

    def test_error_list_joined(self, credentials: CustomerIoCredentials) -> None:
        """meta.errors lists are joined into one message."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"meta": {"errors": ["bad id", "bad email"]}})

        client = _client(credentials, handler)
        with pytest.raises(CustomerIoApiError, match="bad id; bad email"):
            client.request("PUT", "/customers/1", {"email": "x"}, ApiVariant.TRACKING)

    def test_error_without_body_uses_reason(self, credentials: CustomerIoCredentials) -> None:
        """Falls back to the HTTP reason phrase."""
        client = _client(credentials, lambda request: httpx.Response(503))
        with pytest.raises(CustomerIoApiError, match="Service Unavailable"):
            client.request("POST", "/events", {"name": "x"}, ApiVariant.TRACKING)
