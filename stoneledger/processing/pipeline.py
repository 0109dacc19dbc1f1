"""Pipeline orchestration: fetch the configured ranges, map rows, roll up companies."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence

from stoneledger.core.config import Settings, SourceSpec
from stoneledger.core.errors import SourceFetchError
from stoneledger.core.models import DashboardData
from stoneledger.ingestion.mappers import map_contacts, map_notes, map_orders
from stoneledger.ingestion.schemas import ColumnSchema
from stoneledger.ingestion.sources import RowSource
from stoneledger.processing.aggregation import aggregate_companies

Rows = List[List[Any]]

logger = logging.getLogger(__name__)


def build_dashboard(
    order_rows: Sequence[Sequence[Any]] = (),
    contact_rows: Sequence[Sequence[Any]] = (),
    note_rows: Sequence[Sequence[Any]] = (),
    schemas: Optional[Dict[str, ColumnSchema]] = None,
) -> DashboardData:
    """Map raw rows into records and derive the company rollup.

    Pure and total: malformed cells become defaults, rows missing required
    fields are dropped, and an empty row set yields an empty collection.
    """

    schemas = schemas or {}
    orders = map_orders(order_rows, schemas.get("orders"))
    contacts = map_contacts(contact_rows, schemas.get("contacts"))
    notes = map_notes(note_rows, schemas.get("notes"))
    companies = aggregate_companies(orders)
    logger.info(
        "Mapped %d orders, %d contacts, %d notes into %d companies",
        len(orders),
        len(contacts),
        len(notes),
        len(companies),
    )
    return DashboardData(companies=companies, orders=orders, contacts=contacts, notes=notes)


def _fetch(source: RowSource, spec: SourceSpec, range_spec: str) -> Rows:
    try:
        rows = source.fetch_rows(spec.source_id, range_spec)
    except SourceFetchError as exc:
        exc.entity = spec.entity
        logger.error(
            "Failed to fetch %s from %s (%s): %s", spec.entity, spec.source_id, range_spec, exc
        )
        raise
    logger.info("Fetched %d %s rows from %s", len(rows), spec.entity, range_spec)
    return rows


def _fetch_all(source: RowSource, specs: List[SourceSpec], debug: bool) -> Dict[str, Rows]:
    """Fetch every source concurrently; the first failure fails the whole run."""

    with ThreadPoolExecutor(max_workers=max(len(specs), 1)) as executor:
        futures = {
            spec.entity: executor.submit(
                _fetch, source, spec, spec.debug_range if debug else spec.range_spec
            )
            for spec in specs
        }
        return {entity: future.result() for entity, future in futures.items()}


def run_pipeline(settings: Settings, source: RowSource) -> DashboardData:
    """Fetch the configured ranges and build the dashboard payload.

    Raises:
        SourceFetchError: a range could not be fetched; no partial data is returned.
    """

    specs = settings.sources
    logger.info("Pipeline starting for %s", ", ".join(spec.entity for spec in specs))
    rows = _fetch_all(source, specs, debug=False)
    return build_dashboard(
        rows.get("orders", []),
        rows.get("contacts", []),
        rows.get("notes", []),
        schemas={spec.entity: spec.schema for spec in specs},
    )


def fetch_raw_rows(settings: Settings, source: RowSource) -> Dict[str, Rows]:
    """Return the unmapped debug ranges, keyed ``rawOrders``, ``rawContacts``, ``rawNotes``."""

    rows = _fetch_all(source, settings.sources, debug=True)
    return {f"raw{entity.capitalize()}": values for entity, values in rows.items()}
