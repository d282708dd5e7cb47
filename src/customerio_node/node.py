"""Customer.io node: build one request per input item, dispatch, collect results."""

import logging
from typing import Any, Iterable, Optional, Union

from customerio_node.client.base import ApiRequester
from customerio_node.models.item import InputItem
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import Operation, Resource
from customerio_node.operations import OperationRegistry
from customerio_node.parameters import ParameterSource

logger = logging.getLogger(__name__)

ItemLike = Union[InputItem, dict[str, Any]]


class CustomerIoNode:
    """
    Runs the node over a batch of input items.
    Items are processed in order, one request per item, each awaited before
    the next. The first error (bad JSON, missing parameter, API failure)
    stops the run and propagates.
    """

    def __init__(self, params: ParameterSource, client: Optional[ApiRequester] = None):
        self._params = params
        self._client = client

    def _selectors(self) -> tuple[Resource, Operation]:
        resource = self._params.get("resource", 0, Resource.CUSTOMER.value)
        operation = self._params.get("operation", 0)
        return OperationRegistry.resolve(resource, operation)

    def build_requests(self, items: Iterable[ItemLike]) -> list[RequestSpec]:
        """Build the request for every item without sending anything."""
        items = _as_items(items)
        builder = OperationRegistry.get(*self._selectors())
        return [builder(self._params, i) for i in range(len(items))]

    def execute(self, items: Iterable[ItemLike]) -> list[Any]:
        """
        Build and send one request per item.
        List responses are flattened into the output; anything else is
        appended as a single element.
        """
        if self._client is None:
            raise RuntimeError("CustomerIoNode.execute requires an ApiRequester")

        items = _as_items(items)
        resource, operation = self._selectors()
        builder = OperationRegistry.get(resource, operation)
        logger.debug("Running %s:%s over %d item(s)", resource.value, operation.value, len(items))

        results: list[Any] = []
        for i in range(len(items)):
            spec = builder(self._params, i)
            response = self._client.send(spec)
            if isinstance(response, list):
                results.extend(response)
            else:
                results.append(response)
        return results


def _as_items(items: Iterable[ItemLike]) -> list[InputItem]:
    return [item if isinstance(item, InputItem) else InputItem.model_validate(item) for item in items]
