"""Sinks that write the dashboard payload to JSON or an Excel workbook."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict

from openpyxl import Workbook

from stoneledger.core.models import DashboardData
from stoneledger.reporting.templates import dashboard_to_tables


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_json(payload: Dict[str, Any], output_path: Path | str) -> None:
    """Write a JSON payload to ``output_path``; ``-`` writes to stdout."""

    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if str(output_path) == "-":
        sys.stdout.write(text + "\n")
        return

    output_path = Path(output_path)
    ensure_output_dir(output_path)
    output_path.write_text(text + "\n", encoding="utf-8")


def write_excel(data: DashboardData, output_path: Path) -> None:
    """Write one worksheet per collection using openpyxl."""

    ensure_output_dir(output_path)
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, (headers, rows) in dashboard_to_tables(data).items():
        sheet = workbook.create_sheet(title)
        sheet.append(headers)
        for row in rows:
            sheet.append([row.get(header, "") for header in headers])
    workbook.save(output_path)
