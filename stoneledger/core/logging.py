"""Log setup for the CLI and anything else that runs the dashboard pipeline."""
from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Attach a root handler so fetch and mapping messages reach the console.

    ``level`` wins over ``LOG_LEVEL``; with neither set the pipeline logs at
    ``INFO``, which shows per-range row counts and the company total.
    """

    resolved_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
