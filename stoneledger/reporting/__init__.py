"""Export destinations for the dashboard payload."""
from stoneledger.reporting.sinks import ensure_output_dir, write_excel, write_json
from stoneledger.reporting.templates import dashboard_to_tables, format_cents

__all__ = ["dashboard_to_tables", "ensure_output_dir", "format_cents", "write_excel", "write_json"]
