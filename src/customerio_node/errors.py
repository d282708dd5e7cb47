"""Exceptions raised while building or dispatching Customer.io requests."""

from typing import Any, Optional


class CustomerIoNodeError(Exception):
    """Base class for all node errors."""


class InvalidJSONError(CustomerIoNodeError, ValueError):
    """A raw-JSON parameter did not parse (or did not parse to an object)."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class MissingParameterError(CustomerIoNodeError, ValueError):
    """A required parameter or credential field was not supplied."""

    def __init__(self, name: str, item_index: Optional[int] = None):
        where = f" (item {item_index})" if item_index is not None else ""
        super().__init__(f"Missing required parameter: {name}{where}")
        self.name = name
        self.item_index = item_index


class UnsupportedOperationError(CustomerIoNodeError, ValueError):
    """The resource/operation pair has no request builder."""


class CustomerIoApiError(CustomerIoNodeError):
    """Customer.io answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__(f"Customer.io error response [{status_code}]: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


class InvalidParameterError(CustomerIoNodeError, ValueError):
    """A parameter was present but could not be interpreted (e.g. a bad date)."""
