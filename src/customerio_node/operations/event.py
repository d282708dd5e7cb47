"""Event requests (Track API)."""

from typing import Any

from customerio_node.models.fields import RawJsonFields
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant
from customerio_node.parameters import ParameterSource

from .common import read_additional_input


def _event_body(params: ParameterSource, i: int, *, allow_type: bool) -> dict[str, Any]:
    body: dict[str, Any] = {"name": params.get("name", i)}
    additional = read_additional_input(params, i)
    if isinstance(additional, RawJsonFields):
        body.update(additional.payload)
        return body

    data = additional.key_value_pairs("customAttributes", "customAttribute")
    if allow_type and additional.get("type"):
        data["type"] = additional.get("type")
    body["data"] = data
    return body


def build_track(params: ParameterSource, i: int) -> RequestSpec:
    """POST /customers/{id}/events for an identified customer."""
    customer_id = params.get("id", i)
    return RequestSpec(
        method="POST",
        endpoint=f"/customers/{customer_id}/events",
        body=_event_body(params, i, allow_type=True),
        api_variant=ApiVariant.TRACKING,
    )


def build_track_anonymous(params: ParameterSource, i: int) -> RequestSpec:
    """POST /events without a customer id."""
    return RequestSpec(
        method="POST",
        endpoint="/events",
        body=_event_body(params, i, allow_type=False),
        api_variant=ApiVariant.TRACKING,
    )
