"""Pytest fixtures for customerio-node tests."""

from typing import Any

import pytest

from customerio_node.client.base import ApiRequester
from customerio_node.credentials import CustomerIoCredentials
from customerio_node.models.selectors import ApiVariant
from customerio_node.parameters import NodeParameters


class RecordingRequester(ApiRequester):
    """ApiRequester that records calls and replays queued responses."""

    def __init__(self, responses: list[Any] | None = None):
        self.calls: list[tuple[str, str, dict[str, Any], ApiVariant]] = []
        self._responses = list(responses or [])

    def request(self, method, endpoint, body, api_variant):
        self.calls.append((method, endpoint, body, api_variant))
        if self._responses:
            return self._responses.pop(0)
        return {}


@pytest.fixture
def requester() -> RecordingRequester:
    """Requester returning {} for every call."""
    return RecordingRequester()


@pytest.fixture
def make_params():
    """Factory for NodeParameters from keyword arguments."""

    def _make(per_item: list[dict[str, Any]] | None = None, **values: Any) -> NodeParameters:
        return NodeParameters(values, per_item)

    return _make


@pytest.fixture
def credentials() -> CustomerIoCredentials:
    """Sample customerIoApi credential values."""
    return CustomerIoCredentials(
        tracking_api_key="track-key",
        tracking_site_id="site-123",
        app_api_key="app-key",
    )
