"""Additional-fields input modes.

A node run supplies optional extra body fields in exactly one of two
modes: structured sub-fields picked in the UI, or a raw JSON blob. The
variant type keeps the two from ever being merged for the same item.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, Field

from customerio_node.errors import InvalidParameterError


class StructuredFields(BaseModel):
    """Structured sub-fields (custom properties, recipients, flags, ...)."""

    mode: Literal["structured"] = "structured"
    values: dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def key_value_pairs(self, collection: str, entry: str) -> dict[str, Any]:
        """
        Flatten a fixed collection such as customProperties.customProperty
        into a plain {key: value} mapping. Entries without a key are skipped;
        a single entry given as a dict is treated as a one-element list.
        """
        group = self.values.get(collection) or {}
        if not isinstance(group, dict):
            return {}
        entries = group.get(entry) or []
        if isinstance(entries, dict):
            entries = [entries]
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise InvalidParameterError(
                f"{collection}.{entry} must be a list of key/value entries"
            )
        pairs: dict[str, Any] = {}
        for item in entries:
            key = item.get("key")
            if key:
                pairs[key] = item.get("value")
        return pairs


class RawJsonFields(BaseModel):
    """Parsed raw JSON object; its keys become top-level body keys."""

    mode: Literal["json"] = "json"
    payload: dict[str, Any] = Field(default_factory=dict)


AdditionalInput = Union[StructuredFields, RawJsonFields]
