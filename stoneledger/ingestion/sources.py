"""Row sources: the read-only providers behind ``fetch_rows(source_id, range_spec)``."""
from __future__ import annotations

import logging
import re
import threading
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol

import gspread
from google.auth.exceptions import GoogleAuthError
from gspread.exceptions import GSpreadException
from openpyxl import load_workbook
from openpyxl.utils.cell import range_boundaries
from openpyxl.utils.exceptions import InvalidFileException

from stoneledger.core.errors import ConfigurationError, SourceFetchError

if TYPE_CHECKING:
    from stoneledger.core.config import Settings

READONLY_SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    """Anything that can return the cell values of a sheet range."""

    def fetch_rows(self, source_id: str, range_spec: str) -> List[List[Any]]:
        ...


class GoogleSheetsRowSource:
    """Fetch sheet values through gspread with a service account."""

    def __init__(
        self,
        credentials_info: Optional[Dict[str, Any]] = None,
        service_account_path: Path | None = None,
        client: Any = None,
    ):
        if client is None and not credentials_info and not service_account_path:
            raise ConfigurationError(
                "Set GOOGLE_CREDENTIALS or GOOGLE_SHEETS_SERVICE_ACCOUNT to read Google Sheets"
            )
        self._credentials_info = credentials_info
        self._service_account_path = service_account_path
        self._client = client
        self._client_lock = threading.Lock()

    def _authorize(self) -> Any:
        if self._credentials_info:
            return gspread.service_account_from_dict(self._credentials_info, scopes=READONLY_SCOPES)
        return gspread.service_account(
            filename=str(self._service_account_path), scopes=READONLY_SCOPES
        )

    def _get_client(self) -> Any:
        # Ranges are fetched from worker threads; they must share one authorized client.
        with self._client_lock:
            if self._client is None:
                self._client = self._authorize()
            return self._client

    def fetch_rows(self, source_id: str, range_spec: str) -> List[List[Any]]:
        try:
            response = self._get_client().open_by_key(source_id).values_get(range_spec)
        except (GSpreadException, GoogleAuthError, OSError, ValueError) as exc:
            raise SourceFetchError(
                f"Failed to fetch {range_spec} from spreadsheet {source_id}: {exc}",
                source_id=source_id,
                range_spec=range_spec,
            ) from exc
        rows = [list(row) for row in response.get("values", [])]
        logger.debug("Fetched %d rows from spreadsheet %s (%s)", len(rows), source_id, range_spec)
        return rows


_RANGE_PATTERN = re.compile(r"^(?:'(?P<quoted>(?:[^']|'')+)'|(?P<plain>[^!]+))(?:!(?P<cells>.+))?$")


def split_range(range_spec: str) -> tuple[str, Optional[str]]:
    """Split ``'Final List'!A2:G500`` into the sheet title and the cell range."""

    match = _RANGE_PATTERN.match(range_spec.strip())
    if not match:
        raise ValueError(f"Unrecognized range {range_spec!r}")
    quoted = match.group("quoted")
    title = quoted.replace("''", "'") if quoted is not None else match.group("plain").strip()
    return title, match.group("cells")


def _sheet_value(value: Any) -> Any:
    if isinstance(value, date):
        return f"{value.month}/{value.day}/{value.year}"
    return value


def _trim_row(values: tuple) -> List[Any]:
    row = [_sheet_value(value) for value in values]
    while row and row[-1] in (None, ""):
        row.pop()
    return row


class WorkbookRowSource:
    """Read ranges from exported ``.xlsx`` files with openpyxl.

    Rows come back shaped like the Sheets API values: date cells use the
    sheet display form ``M/D/YYYY``, and trailing blank cells and trailing
    blank rows are dropped.
    """

    def __init__(self, base_dir: Path = Path(".")):
        self.base_dir = base_dir

    def fetch_rows(self, source_id: str, range_spec: str) -> List[List[Any]]:
        path = self.base_dir / source_id
        try:
            title, cells = split_range(range_spec)
            sheet = load_workbook(path, data_only=True)[title]
            if cells:
                min_col, min_row, max_col, max_row = range_boundaries(cells)
                raw_rows = sheet.iter_rows(
                    min_row=min_row,
                    max_row=max_row,
                    min_col=min_col,
                    max_col=max_col,
                    values_only=True,
                )
            else:
                raw_rows = sheet.iter_rows(values_only=True)
            rows = [_trim_row(row) for row in raw_rows]
        except (OSError, KeyError, ValueError, TypeError, InvalidFileException) as exc:
            raise SourceFetchError(
                f"Failed to read {range_spec} from workbook {path}: {exc}",
                source_id=source_id,
                range_spec=range_spec,
            ) from exc

        while rows and not rows[-1]:
            rows.pop()
        logger.debug("Read %d rows from workbook %s (%s)", len(rows), path, range_spec)
        return rows


def build_row_source(settings: Settings) -> RowSource:
    """Return the row source selected by ``ROW_SOURCE``."""

    if settings.row_source == "workbook":
        return WorkbookRowSource(settings.workbook_dir)
    return GoogleSheetsRowSource(
        credentials_info=settings.credentials_info,
        service_account_path=settings.service_account_path,
    )
