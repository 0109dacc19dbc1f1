"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stoneledger.core.config import Settings, SourceSpec
from stoneledger.core.errors import SourceFetchError
from stoneledger.ingestion.schemas import CONTACT_COLUMNS_FINAL_LIST, NOTE_COLUMNS, ORDER_COLUMNS

SETTINGS_ENV_KEYS = [
    "ROW_SOURCE",
    "WORKBOOK_DIR",
    "GOOGLE_CREDENTIALS",
    "GOOGLE_SHEETS_SERVICE_ACCOUNT",
    "LOG_LEVEL",
] + [
    f"{prefix}_{suffix}"
    for prefix in ("ORDERS", "CONTACTS", "NOTES")
    for suffix in ("SHEET_ID", "RANGE", "DEBUG_RANGE", "COLUMNS")
]


class FakeRowSource:
    """In-memory row source keyed by ``(source_id, range_spec)``."""

    def __init__(self, ranges: Dict[Tuple[str, str], List[List[Any]]], failing=()):
        self.ranges = ranges
        self.failing = set(failing)
        self.calls: List[Tuple[str, str]] = []

    def fetch_rows(self, source_id: str, range_spec: str) -> List[List[Any]]:
        self.calls.append((source_id, range_spec))
        if (source_id, range_spec) in self.failing:
            raise SourceFetchError(
                f"boom fetching {range_spec}", source_id=source_id, range_spec=range_spec
            )
        return [list(row) for row in self.ranges.get((source_id, range_spec), [])]


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer env vars and secrets/sheets.env out of the tests."""

    for key in SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GOOGLE_SHEETS_ENV_FILE", str(tmp_path / "missing.env"))


@pytest.fixture
def order_rows() -> List[List[Any]]:
    return [
        ["Acme Inc", "$100.00", "Order1", "http://x", "1/2/24", "1/10/24"],
        ["acme inc", 50, "Order2", "", "1/5/24", "1/12/24"],
        ["Globex", "$1,250.00", "Gravel run", "https://app.clickup.com/t/abc", "12/30/2023", "1/15/24"],
        ["", "$999.00", "Orphan order", "", "2/1/24", ""],
    ]


@pytest.fixture
def contact_rows() -> List[List[Any]]:
    return [
        ["jane@example.com", "555-0100", "Acme Inc", "US", "Jane", "Doe", "Jane Doe"],
        ["", "555-0101", "Globex", "US", "Sam", "Smith"],
        ["", "", "Globex", "US", "Sam", "Smith"],
        ["nobody@example.com", "", "", "US", "No", "Company", ""],
    ]


@pytest.fixture
def note_rows() -> List[List[Any]]:
    return [
        ["N-1", "Acme Inc", "Jane Doe", "2/1/24", "Max Cannon", "Called about the spring order"],
        ["", "Initech", "", "3/1/24", "Max Cannon", "Intro call"],
        ["N-3", "Globex", "Sam Smith", "3/2/24", "Max Cannon", ""],
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        orders=SourceSpec("orders", "orders-sheet", "Orders!A2:F500", "Orders!A1:F10", ORDER_COLUMNS),
        contacts=SourceSpec(
            "contacts",
            "contacts-sheet",
            "Final List!A2:G500",
            "Final List!A1:G10",
            CONTACT_COLUMNS_FINAL_LIST,
        ),
        notes=SourceSpec("notes", "notes-sheet", "Notes!A2:F500", "Notes!A1:F10", NOTE_COLUMNS),
    )


@pytest.fixture
def row_source(order_rows, contact_rows, note_rows) -> FakeRowSource:
    return FakeRowSource(
        {
            ("orders-sheet", "Orders!A2:F500"): order_rows,
            ("contacts-sheet", "Final List!A2:G500"): contact_rows,
            ("notes-sheet", "Notes!A2:F500"): note_rows,
            ("orders-sheet", "Orders!A1:F10"): [
                ["Company", "Value", "Order ID", "Clickup Link", "Start Date", "Due Date"],
                *order_rows[:2],
            ],
        }
    )
