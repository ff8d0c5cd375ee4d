"""Destinations for rendered table lines."""

from __future__ import annotations

import sys
from typing import IO, Protocol

from rich.console import Console


class OutputSink(Protocol):
    def write_line(self, line: str) -> None: ...


class StreamSink(OutputSink):
    """Write lines to a text stream, ``sys.stdout`` when none is given."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        # Resolved lazily so redirected stdout (pytest capture, CliRunner) is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        self.stream.write(line + "\n")


class RecordingSink(OutputSink):
    """Keep emitted lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


class ConsoleSink(OutputSink):
    """Write lines through a Rich console without any styling.

    Rich still expands tabs and drops control characters, so cells holding
    them come out narrower or wider than their measured width and the
    borders no longer line up. Use ``StreamSink`` for such content.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def write_line(self, line: str) -> None:
        self._console.print(
            line,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
