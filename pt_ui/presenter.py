from __future__ import annotations

import logging
from typing import IO, Protocol

from rich.console import Console
from rich.markup import escape

from pt_common.errors import PTError, error_to_payload
from pt_table.diagnostics import DiagnosticSink
from pt_ui.theme import presenter_line

logger = logging.getLogger(__name__)


class PresenterSink(Protocol):
    def emit(self, level: str, message: str) -> None: ...


class Presenter:
    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink

    def info(self, message: str) -> None:
        self._sink.emit("info", message)

    def warning(self, message: str) -> None:
        self._sink.emit("warning", message)

    def error(self, message: str) -> None:
        self._sink.emit("error", message)

    def success(self, message: str) -> None:
        self._sink.emit("success", message)


class _RichPresenterSink(PresenterSink):
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: str, message: str) -> None:
        # Table titles and cells are user text: never interpret them as markup.
        self._console.print(presenter_line(level, escape(message)))


class RichPresenter(Presenter):
    def __init__(self, console: Console) -> None:
        super().__init__(_RichPresenterSink(console))


class _HeadlessPresenterSink(PresenterSink):
    def __init__(self, presenter: "HeadlessPresenter") -> None:
        self._presenter = presenter

    def emit(self, level: str, message: str) -> None:
        line = f"{level.upper()}: {message}"
        self._presenter.recorded_messages.append(line)
        if self._presenter.stream is not None:
            self._presenter.stream.write(line + "\n")


class HeadlessPresenter(Presenter):
    """Plain-text presenter that records every message."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.recorded_messages: list[str] = []
        self.stream = stream
        super().__init__(_HeadlessPresenterSink(self))


class PresenterDiagnostics(DiagnosticSink):
    """Show table diagnostics to the user as presenter warnings."""

    def __init__(self, presenter: Presenter) -> None:
        self._presenter = presenter
        self.errors: list[PTError] = []

    def report(self, error: PTError) -> None:
        self.errors.append(error)
        logger.debug("Table diagnostic", extra=error_to_payload(error))
        self._presenter.warning(str(error))
