"""Row ingestion: cell normalizers, column layouts, and row mappers."""
from stoneledger.ingestion.common import clean_cell, parse_currency, parse_date, parse_days
from stoneledger.ingestion.mappers import map_contacts, map_notes, map_orders
from stoneledger.ingestion.schemas import SCHEMA_PRESETS, ColumnSchema, parse_schema

__all__ = [
    "SCHEMA_PRESETS",
    "ColumnSchema",
    "clean_cell",
    "map_contacts",
    "map_notes",
    "map_orders",
    "parse_currency",
    "parse_date",
    "parse_days",
    "parse_schema",
]
