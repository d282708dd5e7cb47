"""Customer requests (Track API): identify/update and delete people."""

from typing import Any

from customerio_node.models.fields import AdditionalInput, RawJsonFields
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant
from customerio_node.parameters import ParameterSource

from .common import read_additional_input, to_epoch_seconds


def _apply_custom_properties(body: dict[str, Any], additional: AdditionalInput) -> None:
    if isinstance(additional, RawJsonFields):
        body.update(additional.payload)
        return
    if additional.get("customProperties"):
        body["data"] = additional.key_value_pairs("customProperties", "customProperty")


def build_create(params: ParameterSource, i: int) -> RequestSpec:
    """PUT /customers/{id} with email, created_at and attributes."""
    customer_id = params.get("id", i)
    body: dict[str, Any] = {
        "email": params.get("email", i),
        "created_at": to_epoch_seconds(params.get("createdAt", i)),
    }
    _apply_custom_properties(body, read_additional_input(params, i))
    return RequestSpec(
        method="PUT",
        endpoint=f"/customers/{customer_id}",
        body=body,
        api_variant=ApiVariant.TRACKING,
    )


def build_update(params: ParameterSource, i: int) -> RequestSpec:
    """PUT /customers/{id}; only the supplied fields are sent."""
    customer_id = params.get("id", i)
    additional = read_additional_input(params, i)
    body: dict[str, Any] = {}
    _apply_custom_properties(body, additional)
    if not isinstance(additional, RawJsonFields):
        if additional.get("email"):
            body["email"] = additional.get("email")
        if additional.get("createdAt"):
            body["created_at"] = to_epoch_seconds(additional.get("createdAt"))
    return RequestSpec(
        method="PUT",
        endpoint=f"/customers/{customer_id}",
        body=body,
        api_variant=ApiVariant.TRACKING,
    )


def build_delete(params: ParameterSource, i: int) -> RequestSpec:
    customer_id = params.get("id", i)
    return RequestSpec(
        method="DELETE",
        endpoint=f"/customers/{customer_id}",
        body={"id": customer_id},
        api_variant=ApiVariant.TRACKING,
    )
