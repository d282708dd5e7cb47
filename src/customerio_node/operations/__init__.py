"""Request builders per resource/operation."""

from customerio_node.operations.registry import OperationRegistry, RequestBuilder

__all__ = ["OperationRegistry", "RequestBuilder"]
