"""Resource / operation selectors and the API variant they target."""

from enum import Enum


class Resource(str, Enum):
    """Top-level Customer.io entity a node run acts on."""

    CUSTOMER = "customer"
    EVENT = "event"
    CAMPAIGN = "campaign"
    SEGMENT = "segment"


class Operation(str, Enum):
    """Action performed on a resource. Valid pairs: OPERATIONS_BY_RESOURCE."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    TRACK = "track"
    TRACK_ANONYMOUS = "trackAnonymous"
    GET = "get"
    TRIGGER = "trigger"
    ADD = "add"
    REMOVE = "remove"


class ApiVariant(str, Enum):
    """Customer.io base endpoint: App API or Track API."""

    API = "api"
    TRACKING = "tracking"


OPERATIONS_BY_RESOURCE: dict[Resource, tuple[Operation, ...]] = {
    Resource.CUSTOMER: (Operation.CREATE, Operation.UPDATE, Operation.DELETE),
    Resource.EVENT: (Operation.TRACK, Operation.TRACK_ANONYMOUS),
    Resource.CAMPAIGN: (Operation.GET, Operation.TRIGGER),
    Resource.SEGMENT: (Operation.ADD, Operation.REMOVE),
}
