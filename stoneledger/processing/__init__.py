"""Aggregation and orchestration over mapped records."""
from stoneledger.processing.aggregation import aggregate_companies
from stoneledger.processing.pipeline import build_dashboard, fetch_raw_rows, run_pipeline
from stoneledger.processing.timeline import company_timeline

__all__ = [
    "aggregate_companies",
    "build_dashboard",
    "company_timeline",
    "fetch_raw_rows",
    "run_pipeline",
]
