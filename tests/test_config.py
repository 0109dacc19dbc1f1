"""Settings are resolved from the environment and an optional env file."""
import json
from pathlib import Path

import pytest

from stoneledger.core.config import load_settings
from stoneledger.core.errors import ConfigurationError
from stoneledger.ingestion.schemas import CONTACT_COLUMNS_FINAL_LIST, ORDER_COLUMNS


@pytest.fixture
def sheet_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDERS_SHEET_ID", "orders-key")
    monkeypatch.setenv("CONTACTS_SHEET_ID", "contacts-key")


def test_defaults_follow_the_live_sheet_layout(sheet_ids) -> None:
    settings = load_settings()

    assert settings.row_source == "sheets"
    assert settings.orders.range_spec == "Orders!A2:F500"
    assert settings.orders.debug_range == "Orders!A1:F10"
    assert settings.orders.schema is ORDER_COLUMNS
    assert settings.contacts.range_spec == "Final List!A2:G500"
    assert settings.contacts.schema is CONTACT_COLUMNS_FINAL_LIST
    assert settings.notes is None
    assert [spec.entity for spec in settings.sources] == ["orders", "contacts"]


def test_missing_orders_sheet_id_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="ORDERS_SHEET_ID"):
        load_settings()


def test_env_file_values_load_without_overriding_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / "sheets.env"
    env_file.write_text(
        "# sheet ids\n"
        "ORDERS_SHEET_ID=from-file\n"
        "CONTACTS_SHEET_ID='contacts-from-file'\n"
        "NOTES_SHEET_ID=notes-from-file\n"
        "NOTES_COLUMNS=id,company,,date,author,content\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ORDERS_SHEET_ID", "from-env")

    settings = load_settings(env_file)

    assert settings.orders.source_id == "from-env"
    assert settings.contacts.source_id == "contacts-from-file"
    assert settings.notes is not None
    assert settings.notes.schema.columns == ("id", "company", None, "date", "author", "content")
    assert [spec.entity for spec in settings.sources] == ["orders", "contacts", "notes"]


def test_invalid_columns_are_reported(sheet_ids, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDERS_COLUMNS", "value,order_name")

    with pytest.raises(ConfigurationError, match="ORDERS_COLUMNS"):
        load_settings()


def test_google_credentials_json_is_parsed(sheet_ids, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CREDENTIALS", json.dumps({"type": "service_account"}))

    assert load_settings().credentials_info == {"type": "service_account"}


def test_google_credentials_must_be_json(sheet_ids, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOOGLE_CREDENTIALS", "not json")

    with pytest.raises(ConfigurationError, match="GOOGLE_CREDENTIALS"):
        load_settings()


def test_unknown_row_source_is_rejected(sheet_ids, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROW_SOURCE", "csv")

    with pytest.raises(ConfigurationError, match="ROW_SOURCE"):
        load_settings()
