"""Normalize CRM spreadsheet rows into orders, contacts, notes and company rollups."""
from stoneledger.core import (
    Company,
    ConfigurationError,
    Contact,
    DashboardData,
    Note,
    Order,
    SourceFetchError,
    TimelineEvent,
    company_id,
    configure_logging,
    generate_id,
)
from stoneledger.ingestion import map_contacts, map_notes, map_orders, parse_currency, parse_date
from stoneledger.processing import (
    aggregate_companies,
    build_dashboard,
    company_timeline,
    fetch_raw_rows,
    run_pipeline,
)

__all__ = [
    "Company",
    "ConfigurationError",
    "Contact",
    "DashboardData",
    "Note",
    "Order",
    "SourceFetchError",
    "TimelineEvent",
    "aggregate_companies",
    "build_dashboard",
    "company_id",
    "company_timeline",
    "configure_logging",
    "fetch_raw_rows",
    "generate_id",
    "map_contacts",
    "map_notes",
    "map_orders",
    "parse_currency",
    "parse_date",
    "run_pipeline",
]
