"""Data models for selectors, request specs and node input."""

from customerio_node.models.fields import AdditionalInput, RawJsonFields, StructuredFields
from customerio_node.models.item import InputItem
from customerio_node.models.request import RequestSpec
from customerio_node.models.selectors import (
    OPERATIONS_BY_RESOURCE,
    ApiVariant,
    Operation,
    Resource,
)
from customerio_node.models.settings import Settings

__all__ = [
    "AdditionalInput",
    "ApiVariant",
    "InputItem",
    "OPERATIONS_BY_RESOURCE",
    "Operation",
    "RawJsonFields",
    "RequestSpec",
    "Resource",
    "Settings",
    "StructuredFields",
]
