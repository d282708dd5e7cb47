"""Helpers shared by the per-resource request builders."""

import json
from datetime import datetime, timezone
from typing import Any, Optional

from customerio_node.errors import InvalidJSONError, InvalidParameterError, MissingParameterError
from customerio_node.models.fields import AdditionalInput, RawJsonFields, StructuredFields
from customerio_node.parameters import ParameterSource


def validate_json(text: str) -> bool:
    """True if `text` parses as JSON (any value, including null)."""
    try:
        json.loads(text)
    except (TypeError, ValueError):
        return False
    return True


def parse_json_object(text: str, message: str, parameter: Optional[str] = None) -> dict[str, Any]:
    """Parse `text` as a JSON object or raise InvalidJSONError with `message`."""
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError):
        raise InvalidJSONError(message, parameter=parameter)
    if not isinstance(parsed, dict):
        raise InvalidJSONError(message, parameter=parameter)
    return parsed


def read_additional_input(params: ParameterSource, i: int) -> AdditionalInput:
    """
    Resolve the additional-fields mode for item i.
    jsonParameters=true reads additionalFieldsJson (empty string means nothing
    to merge); otherwise the structured additionalFields collection is used.
    """
    if params.get("jsonParameters", i, False):
        raw = params.get("additionalFieldsJson", i, "")
        if raw in ("", None):
            return RawJsonFields()
        if isinstance(raw, dict):
            return RawJsonFields(payload=raw)
        payload = parse_json_object(
            str(raw),
            "Additional fields must be a valid JSON",
            parameter="additionalFieldsJson",
        )
        return RawJsonFields(payload=payload)
    return StructuredFields(values=params.get("additionalFields", i, {}) or {})


def split_list(value: Any) -> list[str]:
    """Split a comma-separated parameter into trimmed, non-empty entries."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [part.strip() for part in str(value).split(",") if part.strip()]


def to_epoch_seconds(value: Any, name: str = "createdAt") -> int | float:
    """
    Convert a datetime parameter to Unix epoch seconds.
    Accepts ISO-8601 strings (a trailing 'Z' is UTC), datetimes and numbers.
    Numbers are epoch milliseconds. Naive values are taken as UTC.
    """
    if value is None or value == "":
        raise MissingParameterError(name)
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} is not a date: {value!r}")
    if isinstance(value, (int, float)):
        seconds = value / 1000
        return int(seconds) if float(seconds).is_integer() else seconds
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidParameterError(f"{name} is not a valid ISO-8601 date: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    seconds = dt.timestamp()
    return int(seconds) if seconds.is_integer() else seconds
