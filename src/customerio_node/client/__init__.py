"""HTTP transport for Customer.io."""

from customerio_node.client.base import ApiRequester
from customerio_node.client.customerio import CustomerIoClient

__all__ = ["ApiRequester", "CustomerIoClient"]
