"""Positional column layouts for each sheet variant.

A sheet row carries no headers, so column position is the contract. Each
layout is an explicit :class:`ColumnSchema` value instead of being inferred
from the shape of the row.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

ENTITY_FIELDS: Dict[str, Tuple[str, ...]] = {
    "orders": (
        "company",
        "value",
        "order_name",
        "link",
        "start_date",
        "due_date",
        "turnaround_days",
    ),
    "contacts": (
        "id",
        "company",
        "email",
        "phone",
        "phone_raw",
        "first_name",
        "last_name",
        "full_name",
    ),
    "notes": ("id", "company", "contact", "date", "author", "content"),
}

REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "orders": ("company",),
    "contacts": ("company",),
    "notes": ("company", "content"),
}


@dataclass(frozen=True)
class ColumnSchema:
    """Ordered column-to-field mapping for one entity; ``None`` skips a column."""

    entity: str
    columns: Tuple[Optional[str], ...]

    def __post_init__(self) -> None:
        if self.entity not in ENTITY_FIELDS:
            raise ValueError(f"unknown entity {self.entity!r}")
        allowed = ENTITY_FIELDS[self.entity]
        named = [column for column in self.columns if column is not None]
        unknown = [column for column in named if column not in allowed]
        if unknown:
            raise ValueError(f"unknown {self.entity} fields: {', '.join(unknown)}")
        duplicates = sorted({column for column in named if named.count(column) > 1})
        if duplicates:
            raise ValueError(f"duplicate {self.entity} fields: {', '.join(duplicates)}")
        missing = [column for column in REQUIRED_FIELDS[self.entity] if column not in named]
        if missing:
            raise ValueError(f"{self.entity} layout must include: {', '.join(missing)}")

    @property
    def fields(self) -> Tuple[str, ...]:
        return tuple(column for column in self.columns if column is not None)

    def bind(self, row: Sequence[Any]) -> Dict[str, Any]:
        """Return ``{field: raw cell}``; short rows yield ``None`` for missing cells."""

        bound: Dict[str, Any] = {}
        for index, column in enumerate(self.columns):
            if column is None:
                continue
            bound[column] = row[index] if index < len(row) else None
        return bound


ORDER_COLUMNS = ColumnSchema(
    "orders", ("company", "value", "order_name", "link", "start_date", "due_date")
)
ORDER_COLUMNS_WITH_TURNAROUND = ColumnSchema(
    "orders",
    ("company", "value", "order_name", "link", "start_date", "due_date", "turnaround_days"),
)
CONTACT_COLUMNS_FINAL_LIST = ColumnSchema(
    "contacts",
    ("email", "phone", "company", None, "first_name", "last_name", "full_name"),
)
CONTACT_COLUMNS_DIRECTORY = ColumnSchema(
    "contacts",
    ("id", "company", "first_name", "last_name", "full_name", "email", "phone", "phone_raw"),
)
NOTE_COLUMNS = ColumnSchema("notes", ("id", "company", "contact", "date", "author", "content"))

SCHEMA_PRESETS: Dict[str, ColumnSchema] = {
    "orders": ORDER_COLUMNS,
    "orders_turnaround": ORDER_COLUMNS_WITH_TURNAROUND,
    "contacts_final_list": CONTACT_COLUMNS_FINAL_LIST,
    "contacts_directory": CONTACT_COLUMNS_DIRECTORY,
    "notes": NOTE_COLUMNS,
}


def parse_schema(entity: str, text: str) -> ColumnSchema:
    """Resolve a preset name or a comma-separated field list into a schema.

    Empty entries in the list skip a column, e.g. ``"email,phone,company,,first_name"``.
    """

    key = text.strip()
    preset = SCHEMA_PRESETS.get(key)
    if preset is not None:
        if preset.entity != entity:
            raise ValueError(f"preset {key!r} describes {preset.entity}, not {entity}")
        return preset
    columns = tuple(part.strip() or None for part in key.split(","))
    return ColumnSchema(entity, columns)
