"""Campaign requests (App API): read a trigger, fire an API-triggered broadcast."""

import json
from typing import Any

from customerio_node.errors import InvalidJSONError
from customerio_node.models.fields import RawJsonFields, StructuredFields
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant
from customerio_node.parameters import ParameterSource

from .common import read_additional_input, split_list, validate_json


def build_get(params: ParameterSource, i: int) -> RequestSpec:
    """GET /campaigns/{campaignId}/triggers/{triggerId}."""
    campaign_id = params.get("campaignId", i)
    trigger_id = params.get("triggerId", i)
    return RequestSpec(
        method="GET",
        endpoint=f"/campaigns/{campaign_id}/triggers/{trigger_id}",
        api_variant=ApiVariant.API,
    )


def encode_recipients(recipients: list[str]) -> str:
    """
    Encode segment recipients in the API-triggered data format.
    Recipients are always wrapped in an "or" array, one segment per entry;
    the filter is sent JSON-encoded.
    """
    audience = {"or": [{"segment": {"id": r}} for r in recipients]}
    return json.dumps(audience, separators=(",", ":"))


def _structured_body(fields: StructuredFields) -> dict[str, Any]:
    body: dict[str, Any] = {}
    data = fields.key_value_pairs("customProperties", "customProperty")

    recipients = split_list(fields.get("recipients"))
    if recipients:
        data["recipients"] = encode_recipients(recipients)

    if fields.get("ids"):
        body["ids"] = split_list(fields.get("ids"))
    if fields.get("idIgnoreMissing"):
        body["id_ignore_missing"] = bool(fields.get("idIgnoreMissing"))
    if fields.get("emails"):
        body["emails"] = split_list(fields.get("emails"))
    if fields.get("emailIgnoreMissing"):
        body["email_ignore_missing"] = bool(fields.get("emailIgnoreMissing"))
    if fields.get("emailAddDuplicates"):
        body["email_add_duplicates"] = bool(fields.get("emailAddDuplicates"))

    per_user_data = fields.get("perUserData")
    if per_user_data:
        if isinstance(per_user_data, str) and not validate_json(per_user_data):
            raise InvalidJSONError(
                "Per user data property of Additional Fields must be a valid JSON.",
                parameter="perUserData",
            )
        body["per_user_data"] = per_user_data

    if fields.get("dataFileUrl"):
        body["data_file_url"] = fields.get("dataFileUrl")

    body["data"] = data
    return body


def build_trigger(params: ParameterSource, i: int) -> RequestSpec:
    """POST /campaigns/{id}/triggers with data, recipients and targeting options."""
    campaign_id = params.get("id", i)
    additional = read_additional_input(params, i)

    if isinstance(additional, RawJsonFields):
        body = dict(additional.payload)
    else:
        body = _structured_body(additional)

    return RequestSpec(
        method="POST",
        endpoint=f"/campaigns/{campaign_id}/triggers",
        body=body,
        api_variant=ApiVariant.API,
    )
