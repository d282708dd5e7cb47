"""Input record of the host execution loop."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class InputItem(BaseModel):
    """
    One item flowing into the node.
    Only the JSON payload is carried; binary data is not used by this node.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")
