"""Public API surface for pt_table."""

from pt_table.diagnostics import DiagnosticSink, LoggingDiagnostics, RecordingDiagnostics
from pt_table.layout import RenderCache, build_render_cache, center, column_widths, padding, table_width
from pt_table.models import TableDocument
from pt_table.sinks import ConsoleSink, OutputSink, RecordingSink, StreamSink
from pt_table.table import PrintTable

__all__ = [
    "build_render_cache",
    "center",
    "column_widths",
    "ConsoleSink",
    "DiagnosticSink",
    "LoggingDiagnostics",
    "OutputSink",
    "padding",
    "PrintTable",
    "RecordingDiagnostics",
    "RecordingSink",
    "RenderCache",
    "StreamSink",
    "table_width",
    "TableDocument",
]
