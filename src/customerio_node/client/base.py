"""Abstract HTTP requester the node dispatches request specs through."""

from abc import ABC, abstractmethod
from typing import Any

from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import ApiVariant


class ApiRequester(ABC):
    """
    Standard interface for the authenticated Customer.io transport.
    Implementations resolve the base URL and credentials for the API
    variant, send the request and raise on non-2xx responses.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        endpoint: str,
        body: dict[str, Any],
        api_variant: ApiVariant,
    ) -> Any:
        """
        Send one request; returns the decoded JSON response.
        """
        pass

    def send(self, spec: RequestSpec) -> Any:
        """Dispatch a RequestSpec. Default: unpack and call request()."""
        return self.request(spec.method, spec.endpoint, spec.body, spec.api_variant)
