"""Fixed-width ASCII tables with cached layout."""

from pt_table.api import (
    PrintTable,
    RecordingDiagnostics,
    RecordingSink,
    StreamSink,
    TableDocument,
)

__all__ = [
    "PrintTable",
    "RecordingDiagnostics",
    "RecordingSink",
    "StreamSink",
    "TableDocument",
]
