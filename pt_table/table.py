"""Mutable text table with a lazily rebuilt rendering.

Limitations the formatter does not check:

1. No title, column name or cell may contain a line break.
2. The title should not be longer than the table is wide; a longer title
   makes the title line wider than the divider.

Rendering builds the formatted lines once and keeps them until the table is
changed again, so printing an unchanged table repeatedly is cheap.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from pt_common.errors import (
    IncompleteTableError,
    RowShapeMismatchError,
    SchemaFrozenError,
)
from pt_table.diagnostics import DiagnosticSink, LoggingDiagnostics
from pt_table.layout import RenderCache, build_render_cache
from pt_table.sinks import OutputSink, StreamSink

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _as_cells(values: Iterable[Any]) -> list[str]:
    return [_as_text(value) for value in values]


class PrintTable:
    """Title, columns and rows rendered as a fixed-width ASCII table.

    Columns can only be added until the first row is accepted. Errors
    (adding a column too late, a row of the wrong length, rendering an
    incomplete table) never raise: they go to ``diagnostics`` and the call
    leaves the table untouched.
    """

    def __init__(
        self,
        title: Any = "",
        *,
        sink: OutputSink | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> None:
        self.sink: OutputSink = sink or StreamSink()
        self.diagnostics: DiagnosticSink = diagnostics or LoggingDiagnostics()
        self._title = _as_text(title)
        self._columns: list[str] = []
        self._rows: list[list[str]] = []
        self._rows_started = False
        self._cache: RenderCache | None = None

    def __repr__(self) -> str:
        return (
            f"PrintTable(title={self._title!r}, columns={len(self._columns)}, "
            f"rows={len(self._rows)})"
        )

    def __str__(self) -> str:
        if self._missing_data():
            return ""
        return self._ensure_cache().text()

    @property
    def title(self) -> str:
        return self._title

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._columns)

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    @property
    def rows_started(self) -> bool:
        return self._rows_started

    @property
    def dirty(self) -> bool:
        return self._cache is None

    @property
    def column_widths(self) -> tuple[int, ...]:
        """Widths from the last rendering; empty while the table is dirty."""
        if self._cache is None:
            return ()
        return self._cache.widths

    def _invalidate(self) -> None:
        self._cache = None

    def set_title(self, title: Any) -> None:
        self._title = _as_text(title)
        self._invalidate()

    def add_column(self, name: str) -> None:
        if self._rows_started:
            self.diagnostics.report(
                SchemaFrozenError(
                    f"Table '{self._title}' already has rows added: "
                    "additional columns cannot be added.",
                    context={"title": self._title, "column": name},
                )
            )
            return
        self._columns.append(_as_text(name))
        self._invalidate()
        logger.debug("Added column %r to table %r", name, self._title)

    def _shape_error(self, cells: Sequence[str], index: int | None = None) -> RowShapeMismatchError:
        context: dict[str, Any] = {
            "title": self._title,
            "row_length": len(cells),
            "column_count": len(self._columns),
        }
        if index is not None:
            context["index"] = index
        return RowShapeMismatchError(
            f"Trying to add row with {len(cells)} elements while table "
            f"'{self._title}' requires {len(self._columns)} elements per row.",
            context=context,
        )

    def add_row(self, cells: Iterable[Any]) -> None:
        row = _as_cells(cells)
        if len(row) != len(self._columns):
            self.diagnostics.report(self._shape_error(row))
            return
        self._rows.append(row)
        self._rows_started = True
        self._invalidate()

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """Append every well-formed row of ``rows``.

        Rows of the wrong length are reported with their position in the
        batch and skipped; the remaining rows keep their order.
        An empty or fully rejected batch leaves the table, and its cached
        layout, unchanged.
        """
        accepted = 0
        for index, cells in enumerate(rows):
            row = _as_cells(cells)
            if len(row) != len(self._columns):
                self.diagnostics.report(self._shape_error(row, index))
                continue
            self._rows.append(row)
            accepted += 1
        if accepted:
            self._rows_started = True
            self._invalidate()
        logger.debug("Added %d rows to table %r", accepted, self._title)

    def _missing_data(self) -> bool:
        return not self._title or not self._columns or not self._rows

    def _ensure_cache(self) -> RenderCache:
        if self._cache is None:
            self._cache = build_render_cache(self._title, self._columns, self._rows)
            logger.debug(
                "Rebuilt layout for table %r (%d columns, %d rows, width %d)",
                self._title,
                len(self._columns),
                len(self._rows),
                self._cache.width,
            )
        return self._cache

    def render(self) -> str | None:
        """Emit the table to the sink and return the emitted text.

        Returns ``None`` and emits nothing when the title, the columns or
        the rows are missing.
        """
        if self._missing_data():
            self.diagnostics.report(
                IncompleteTableError(
                    "Missing some necessary data to print table: "
                    f"title='{self._title}' (must not be empty), "
                    f"columns={len(self._columns)} (min=1), "
                    f"rows={len(self._rows)} (min=1)",
                    context={
                        "title": self._title,
                        "columns": len(self._columns),
                        "rows": len(self._rows),
                    },
                )
            )
            return None
        cache = self._ensure_cache()
        for line in cache.lines():
            self.sink.write_line(line)
        return cache.text()

    def reset(self) -> None:
        """Drop title, columns and rows so the table can be rebuilt."""
        self._title = ""
        self._columns = []
        self._rows = []
        self._rows_started = False
        self._invalidate()
