"""Node parameter access, injected into the request builders."""

from typing import Any, Optional, Protocol

from customerio_node.errors import MissingParameterError

MISSING: Any = object()


class ParameterSource(Protocol):
    """Capability the host provides to read a node parameter for one item."""

    def get(self, name: str, item_index: int, default: Any = MISSING) -> Any:
        ...


class NodeParameters:
    """
    Parameters configured on the node, with optional per-item overrides.
    `per_item[i]` (when given) shadows node-level values for item i; this is
    where a host would put expression results evaluated against the item.
    """

    def __init__(
        self,
        values: Optional[dict[str, Any]] = None,
        per_item: Optional[list[dict[str, Any]]] = None,
    ):
        self._values = dict(values or {})
        self._per_item = list(per_item or [])

    def get(self, name: str, item_index: int, default: Any = MISSING) -> Any:
        """Return the parameter value; raise MissingParameterError if absent with no default."""
        if item_index < len(self._per_item) and name in self._per_item[item_index]:
            return self._per_item[item_index][name]
        if name in self._values:
            return self._values[name]
        if default is MISSING:
            raise MissingParameterError(name, item_index)
        return default

    def with_values(self, **values: Any) -> "NodeParameters":
        """Copy with extra node-level values (used by the CLI for flags)."""
        merged = {**self._values, **values}
        return NodeParameters(merged, self._per_item)
