"""Custom field value adaptation.

Custom fields may be declared either as a plain value or as a
``{type, value}`` mapping. Tagged values are transformed by the adapter
registered for their type before they reach the identity store; values
with an unknown tag, or without a tag, pass through unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from dateutil import parser as date_parser

from fixture_users.domain.value_objects import FieldType

FieldAdapterFn = Callable[[Any], Any]


def to_timestamp(value: Any) -> int:
    """Convert a date/time declaration into an integer Unix timestamp.

    Accepts ISO 8601 strings, other human-readable date/time strings
    (``January 1, 2024``, ``01/15/2024``, ``2024-01-01 10:30 UTC``),
    ``date``/``datetime`` objects and integers (returned unchanged). Values
    without a timezone are read as UTC.

    Raises:
        ValueError: If a string value is not a recognizable date/time
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a date/time value: {value!r}")
    if isinstance(value, int):
        return value

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    elif isinstance(value, str):
        moment = _parse_date_string(value)
    else:
        raise ValueError(f"Not a date/time value: {value!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp())


def _parse_date_string(value: str) -> datetime:
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    try:
        return date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Not a date/time value: {value!r}") from e


DEFAULT_FIELD_ADAPTERS: Mapping[str, FieldAdapterFn] = {
    FieldType.DATE: to_timestamp,
}


class FieldValueAdapter:
    """Registry of field type tags and their value transformations."""

    def __init__(self, adapters: Mapping[str, FieldAdapterFn] | None = None) -> None:
        self._adapters: dict[str, FieldAdapterFn] = dict(
            DEFAULT_FIELD_ADAPTERS if adapters is None else adapters
        )

    def register(self, type_tag: FieldType | str, adapter: FieldAdapterFn) -> None:
        """Register (or replace) the transformation for a type tag."""
        self._adapters[str(type_tag)] = adapter

    def is_registered(self, type_tag: FieldType | str) -> bool:
        """Check whether a transformation exists for the type tag."""
        return str(type_tag) in self._adapters

    def adapt(self, value: Any, type_tag: FieldType | str | None = None) -> Any:
        """Apply the transformation registered for ``type_tag`` to ``value``.

        Unknown or missing tags return the value unchanged.
        """
        if type_tag is None:
            return value
        adapter = self._adapters.get(str(type_tag))
        if adapter is None:
            return value
        return adapter(value)

    def prepare(self, raw: Any) -> Any:
        """Turn a declared custom field value into the value to store."""
        if isinstance(raw, Mapping) and raw.get("type") is not None:
            return self.adapt(raw.get("value"), raw["type"])
        return raw
