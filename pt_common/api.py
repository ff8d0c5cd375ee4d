"""Public API surface for pt_common."""

from pt_common.errors import (
    IncompleteTableError,
    PTError,
    RowShapeMismatchError,
    SchemaFrozenError,
    TableDocumentError,
    error_to_payload,
)
from pt_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "error_to_payload",
    "IncompleteTableError",
    "PTError",
    "RowShapeMismatchError",
    "SchemaFrozenError",
    "TableDocumentError",
]
