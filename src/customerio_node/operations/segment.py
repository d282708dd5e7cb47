"""Manual segment membership requests (Track API)."""

from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant
from customerio_node.parameters import ParameterSource

from .common import split_list


def _membership(params: ParameterSource, i: int, action: str) -> RequestSpec:
    segment_id = params.get("id", i)
    ids = split_list(params.get("ids", i))
    return RequestSpec(
        method="POST",
        endpoint=f"/segments/{segment_id}/{action}",
        body={"id": segment_id, "ids": ids},
        api_variant=ApiVariant.TRACKING,
    )


def build_add(params: ParameterSource, i: int) -> RequestSpec:
    return _membership(params, i, "add_customers")


def build_remove(params: ParameterSource, i: int) -> RequestSpec:
    return _membership(params, i, "remove_customers")
