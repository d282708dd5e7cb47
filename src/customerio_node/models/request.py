"""Request specification handed from the builders to the HTTP client."""

from typing import Any

from pydantic import BaseModel, Field

from customerio_node.models.selectors import ApiVariant


class RequestSpec(BaseModel):
    """One HTTP call: method, endpoint path, JSON body and target API."""

    method: str = Field(..., description="HTTP method, e.g. 'POST'")
    endpoint: str = Field(..., description="Path relative to the variant base URL")
    body: dict[str, Any] = Field(default_factory=dict)
    api_variant: ApiVariant = ApiVariant.TRACKING
