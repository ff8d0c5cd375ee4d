import logging
from collections import defaultdict

import pytest

from pt_table.diagnostics import RecordingDiagnostics
from pt_table.sinks import RecordingSink, StreamSink
from pt_table.table import PrintTable

KNOWN_MARKERS = {"unit_table", "unit_common", "unit_ui"}


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()


@pytest.fixture
def gpu_table(sink: RecordingSink, diagnostics: RecordingDiagnostics) -> PrintTable:
    table = PrintTable(sink=sink, diagnostics=diagnostics)
    table.set_title("GPUs")
    table.add_column("Vendor")
    table.add_column("Model")
    table.add_row(["Nvidia", "GTX 1080"])
    table.add_row(["AMD", "RX 580"])
    return table


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made by configure_logging(force=True)."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0})

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = PrintTable("Test Statistics by Marker", sink=StreamSink(terminalreporter))
    for name in ("Marker", "Total", "Passed", "Failed", "Skipped", "Duration (s)", "Avg (s)"):
        table.add_column(name)

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            avg_duration = stats["duration"] / stats["total"]
            table.add_row(
                [
                    marker,
                    stats["total"],
                    stats["passed"],
                    stats["failed"],
                    stats["skipped"],
                    f"{stats['duration']:.2f}",
                    f"{avg_duration:.2f}",
                ]
            )

    terminalreporter.write("\n")
    table.render()
