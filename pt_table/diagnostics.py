"""Channel for non-fatal table errors."""

from __future__ import annotations

import logging
from typing import Protocol

from pt_common.errors import PTError, error_to_payload

logger = logging.getLogger("pt_table.table")


class DiagnosticSink(Protocol):
    def report(self, error: PTError) -> None: ...


class LoggingDiagnostics(DiagnosticSink):
    """Log each reported error as a warning with its structured payload."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def report(self, error: PTError) -> None:
        self._logger.warning("%s", error, extra=error_to_payload(error))


class RecordingDiagnostics(DiagnosticSink):
    """Keep reported errors, optionally forwarding them to another sink."""

    def __init__(self, forward: DiagnosticSink | None = None) -> None:
        self.errors: list[PTError] = []
        self._forward = forward

    def report(self, error: PTError) -> None:
        self.errors.append(error)
        if self._forward is not None:
            self._forward.report(error)

    def of_type(self, error_cls: type[PTError]) -> list[PTError]:
        return [err for err in self.errors if isinstance(err, error_cls)]

    def clear(self) -> None:
        self.errors.clear()
