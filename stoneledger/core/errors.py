"""Typed exceptions raised at the pipeline boundaries."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Settings, credentials, or column schemas could not be resolved."""


class SourceFetchError(RuntimeError):
    """The row-source failed to return rows for a configured range.

    Attributes:
        source_id: Spreadsheet key or workbook path that was queried.
        range_spec: A1-style range requested from the source.
        entity: Entity the rows were meant for, when known.
    """

    def __init__(
        self,
        message: str,
        source_id: str,
        range_spec: str,
        entity: str | None = None,
    ):
        super().__init__(message)
        self.source_id = source_id
        self.range_spec = range_spec
        self.entity = entity
