"""Registry mapping (resource, operation) pairs to request builders."""

from typing import Callable

from customerio_node.errors import UnsupportedOperationError
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import OPERATIONS_BY_RESOURCE, Operation, Resource
from customerio_node.parameters import ParameterSource

from . import campaign, customer, event, segment

RequestBuilder = Callable[[ParameterSource, int], RequestSpec]


class OperationRegistry:
    """Looks up the request builder for a resource/operation pair."""

    _builders: dict[tuple[Resource, Operation], RequestBuilder] = {
        (Resource.CAMPAIGN, Operation.GET): campaign.build_get,
        (Resource.CAMPAIGN, Operation.TRIGGER): campaign.build_trigger,
        (Resource.CUSTOMER, Operation.CREATE): customer.build_create,
        (Resource.CUSTOMER, Operation.UPDATE): customer.build_update,
        (Resource.CUSTOMER, Operation.DELETE): customer.build_delete,
        (Resource.EVENT, Operation.TRACK): event.build_track,
        (Resource.EVENT, Operation.TRACK_ANONYMOUS): event.build_track_anonymous,
        (Resource.SEGMENT, Operation.ADD): segment.build_add,
        (Resource.SEGMENT, Operation.REMOVE): segment.build_remove,
    }

    @classmethod
    def resolve(cls, resource: str | Resource, operation: str | Operation) -> tuple[Resource, Operation]:
        """Coerce raw selector strings; raise UnsupportedOperationError on unknown values."""
        try:
            res = Resource(resource)
        except ValueError:
            raise UnsupportedOperationError(
                f"Unknown resource: {resource}. Available: {[r.value for r in Resource]}"
            )
        try:
            op = Operation(operation)
        except ValueError:
            op = None
        if op is None or op not in OPERATIONS_BY_RESOURCE[res]:
            raise UnsupportedOperationError(
                f"Operation '{operation}' is not supported for resource '{res.value}'. "
                f"Available: {[o.value for o in OPERATIONS_BY_RESOURCE[res]]}"
            )
        return res, op

    @classmethod
    def get(cls, resource: str | Resource, operation: str | Operation) -> RequestBuilder:
        """Return the builder for the pair."""
        return cls._builders[cls.resolve(resource, operation)]

    @classmethod
    def available(cls) -> list[tuple[Resource, Operation]]:
        return list(cls._builders.keys())
