"""Entity ↔ stored-record conversion.

Stored records use camelCase keys (``clientId``, ``createdAt``, ``isRead``),
ISO-8601 timestamps and plain enum values.
"""

from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic.alias_generators import to_camel


def encode_value(value: Any) -> Any:
    """Convert a Python value into its JSON-ready stored form."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_record(value)
    if isinstance(value, list):
        return [encode_value(item) for item in value]
    if isinstance(value, dict):
        return {to_camel(k): encode_value(v) for k, v in value.items()}
    return value


def to_record(entity: Any) -> dict[str, Any]:
    """Map a dataclass entity → stored record."""
    return {to_camel(f.name): encode_value(getattr(entity, f.name)) for f in fields(entity)}


def encode_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Map a snake_case patch → camelCase record fragment."""
    return {to_camel(name): encode_value(value) for name, value in changes.items()}


def parse_datetime(raw: str) -> datetime:
    return datetime.fromisoformat(raw)


def required(record: dict[str, Any], name: str) -> Any:
    """Read a mandatory field; a missing key or a null value is a ValueError."""
    value = record.get(name)
    if value is None:
        raise ValueError(f"'{name}' is required")
    return value
