"""Node metadata and the UI-visible fields per resource/operation."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from customerio_node.credentials import CUSTOMER_IO_API
from customerio_node.models.selectors import OPERATIONS_BY_RESOURCE, Operation, Resource


class NodeField(BaseModel):
    """One parameter shown for a resource/operation."""

    name: str
    display_name: str
    type: str = "string"
    required: bool = False
    default: Any = None
    description: Optional[str] = None


class NodeDescription(BaseModel):
    """Static description of the node as registered with the host."""

    name: str = "customerio"
    display_name: str = "Customer.io"
    description: str = "Consume Customer.io API"
    version: int = 1
    subtitle: str = '={{$parameter["operation"] + ": " + $parameter["resource"]}}'
    group: list[str] = Field(default_factory=lambda: ["output"])
    credentials: list[dict[str, Any]] = Field(
        default_factory=lambda: [{"name": CUSTOMER_IO_API.name, "required": True}]
    )
    default_resource: Resource = Resource.CUSTOMER


_JSON_TOGGLE = [
    NodeField(name="jsonParameters", display_name="JSON Parameters", type="boolean", default=False),
    NodeField(
        name="additionalFieldsJson",
        display_name="Additional Fields (JSON)",
        type="json",
        default="",
        description="Object merged into the request body; used when JSON Parameters is on",
    ),
]


def _additional(*options: str) -> NodeField:
    return NodeField(
        name="additionalFields",
        display_name="Additional Fields",
        type="collection",
        default={},
        description="Options: " + ", ".join(options),
    )


FIELDS: dict[tuple[Resource, Operation], list[NodeField]] = {
    (Resource.CAMPAIGN, Operation.GET): [
        NodeField(name="campaignId", display_name="Campaign ID", type="number", required=True),
        NodeField(name="triggerId", display_name="Trigger ID", type="number", required=True),
    ],
    (Resource.CAMPAIGN, Operation.TRIGGER): [
        NodeField(name="id", display_name="Campaign ID", type="number", required=True),
        *_JSON_TOGGLE,
        _additional(
            "customProperties", "recipients", "ids", "idIgnoreMissing", "emails",
            "emailIgnoreMissing", "emailAddDuplicates", "perUserData", "dataFileUrl",
        ),
    ],
    (Resource.CUSTOMER, Operation.CREATE): [
        NodeField(name="id", display_name="Customer ID", required=True),
        NodeField(name="email", display_name="Email", required=True),
        NodeField(name="createdAt", display_name="Created At", type="dateTime", required=True),
        *_JSON_TOGGLE,
        _additional("customProperties"),
    ],
    (Resource.CUSTOMER, Operation.UPDATE): [
        NodeField(name="id", display_name="Customer ID", required=True),
        *_JSON_TOGGLE,
        _additional("customProperties", "email", "createdAt"),
    ],
    (Resource.CUSTOMER, Operation.DELETE): [
        NodeField(name="id", display_name="Customer ID", required=True),
    ],
    (Resource.EVENT, Operation.TRACK): [
        NodeField(name="id", display_name="Customer ID", required=True),
        NodeField(name="name", display_name="Event Name", required=True),
        *_JSON_TOGGLE,
        _additional("customAttributes", "type"),
    ],
    (Resource.EVENT, Operation.TRACK_ANONYMOUS): [
        NodeField(name="name", display_name="Event Name", required=True),
        *_JSON_TOGGLE,
        _additional("customAttributes"),
    ],
    (Resource.SEGMENT, Operation.ADD): [
        NodeField(name="id", display_name="Segment ID", type="number", required=True),
        NodeField(name="ids", display_name="Customer IDs", required=True, description="Comma-separated"),
    ],
    (Resource.SEGMENT, Operation.REMOVE): [
        NodeField(name="id", display_name="Segment ID", type="number", required=True),
        NodeField(name="ids", display_name="Customer IDs", required=True, description="Comma-separated"),
    ],
}


def describe(resource: Optional[Resource] = None) -> dict[str, Any]:
    """Node description plus operations and fields, optionally for one resource."""
    node = NodeDescription()
    resources = [resource] if resource else list(Resource)
    return {
        **node.model_dump(mode="json"),
        "resources": {
            res.value: {
                op.value: [f.model_dump(mode="json", exclude_none=True) for f in FIELDS[(res, op)]]
                for op in OPERATIONS_BY_RESOURCE[res]
            }
            for res in resources
        },
    }
