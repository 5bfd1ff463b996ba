"""Partial-update merging and conversion of input values to column values."""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from village.core import numeric
from village.records.descriptors import EntityDescriptor


def changed_fields(changes: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Return only the fields the caller actually supplied.

    For pydantic models this is ``model_fields_set``: a field sent as
    ``null`` is included with value ``None``, a field never sent is not.
    """
    if isinstance(changes, BaseModel):
        return changes.model_dump(exclude_unset=True)
    return {key: value for key, value in changes.items() if key != "id"}


def input_values(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Return every field of a create input, defaults included."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    return {key: value for key, value in data.items() if key != "id"}


def column_values(entity: EntityDescriptor, values: Mapping[str, Any]) -> dict[str, Any]:
    """Convert record-level values to what the row columns store.

    Raises:
        ValueError: On a field the entity does not have, or ``None`` for a
            field that is not nullable.
    """
    converted: dict[str, Any] = {}
    for name, value in values.items():
        if name not in entity.fields:
            raise ValueError(f"{entity.name} has no writable field {name!r}")
        if value is None:
            if name not in entity.nullable:
                raise ValueError(f"{entity.name} field {name!r} cannot be null")
            converted[name] = None
        elif name in entity.monetary:
            converted[name] = numeric.to_decimal(value)
        elif name in entity.flags:
            converted[name] = 1 if value else 0
        elif isinstance(value, Enum):
            converted[name] = value.value
        else:
            converted[name] = value
    return converted


def apply_changes(
    entity: EntityDescriptor,
    row: Any,
    changes: BaseModel | Mapping[str, Any],
    *,
    now: dt.datetime,
) -> dict[str, Any]:
    """Merge a sparse change set onto *row* in place.

    Fields absent from *changes* are left exactly as stored. ``updated_at``
    is set to *now* even when the change set is empty.

    Returns:
        The column values that were written.
    """
    values = column_values(entity, changed_fields(changes))
    for name, value in values.items():
        setattr(row, name, value)
    if entity.tracks_updated_at:
        row.updated_at = now
    return values
