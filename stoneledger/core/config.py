"""Settings for the row sources and column layouts, resolved from the environment."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from stoneledger.core.errors import ConfigurationError
from stoneledger.core.utils import get_config_value, load_env_file
from stoneledger.ingestion.schemas import ColumnSchema, parse_schema

DEFAULT_SERVICE_ACCOUNT_PATHS = [
    Path("secrets/service_account.json"),
    Path("credentials/service_account.json"),
]
DEFAULT_SHEETS_ENV_FILE = Path("secrets/sheets.env")
ROW_SOURCE_KINDS = ("sheets", "workbook")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceSpec:
    """Where one entity's rows live and how their columns are laid out."""

    entity: str
    source_id: str
    range_spec: str
    debug_range: str
    schema: ColumnSchema


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for a pipeline run."""

    orders: SourceSpec
    contacts: SourceSpec
    notes: Optional[SourceSpec] = None
    row_source: str = "sheets"
    workbook_dir: Path = Path(".")
    credentials_info: Optional[Dict[str, Any]] = None
    service_account_path: Optional[Path] = None

    @property
    def sources(self) -> List[SourceSpec]:
        """Configured sources in payload order; notes are optional."""

        configured = [self.orders, self.contacts]
        if self.notes is not None:
            configured.append(self.notes)
        return configured


def _default_service_account_path() -> Optional[Path]:
    for candidate in DEFAULT_SERVICE_ACCOUNT_PATHS:
        if candidate.exists():
            return candidate
    return None


def _source_spec(
    entity: str,
    prefix: str,
    default_range: str,
    default_debug_range: str,
    default_columns: str,
    required: bool = True,
) -> Optional[SourceSpec]:
    source_id = get_config_value(f"{prefix}_SHEET_ID")
    if not source_id:
        if required:
            raise ConfigurationError(
                f"{prefix}_SHEET_ID is required; set it in the environment or in {DEFAULT_SHEETS_ENV_FILE}"
            )
        logger.info("%s_SHEET_ID is not set; %s will be empty", prefix, entity)
        return None

    columns = get_config_value(f"{prefix}_COLUMNS", default_columns)
    try:
        schema = parse_schema(entity, columns)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {prefix}_COLUMNS: {exc}") from exc

    return SourceSpec(
        entity=entity,
        source_id=source_id,
        range_spec=get_config_value(f"{prefix}_RANGE", default_range),
        debug_range=get_config_value(f"{prefix}_DEBUG_RANGE", default_debug_range),
        schema=schema,
    )


def _credentials_info() -> Optional[Dict[str, Any]]:
    raw = get_config_value("GOOGLE_CREDENTIALS")
    if not raw:
        return None
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError("GOOGLE_CREDENTIALS must contain service account JSON") from exc
    if not isinstance(info, dict):
        raise ConfigurationError("GOOGLE_CREDENTIALS must be a JSON object")
    return info


def load_settings(env_file: Path | None = None) -> Settings:
    """Build :class:`Settings` from the environment and an optional env file."""

    env_path = env_file or Path(os.getenv("GOOGLE_SHEETS_ENV_FILE", DEFAULT_SHEETS_ENV_FILE))
    load_env_file(env_path)

    row_source = get_config_value("ROW_SOURCE", "sheets").lower()
    if row_source not in ROW_SOURCE_KINDS:
        raise ConfigurationError(
            f"ROW_SOURCE must be one of {', '.join(ROW_SOURCE_KINDS)}, got {row_source!r}"
        )

    account_env = get_config_value("GOOGLE_SHEETS_SERVICE_ACCOUNT")
    account_path = Path(account_env) if account_env else _default_service_account_path()

    return Settings(
        orders=_source_spec("orders", "ORDERS", "Orders!A2:F500", "Orders!A1:F10", "orders"),
        contacts=_source_spec(
            "contacts",
            "CONTACTS",
            "Final List!A2:G500",
            "Final List!A1:G10",
            "contacts_final_list",
        ),
        notes=_source_spec(
            "notes", "NOTES", "Notes!A2:F500", "Notes!A1:F10", "notes", required=False
        ),
        row_source=row_source,
        workbook_dir=Path(get_config_value("WORKBOOK_DIR", ".")),
        credentials_info=_credentials_info(),
        service_account_path=account_path,
    )
