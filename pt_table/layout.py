"""Width computation and centering for box-drawn text tables.

Every field of a table (title, column names, cells) is centered with the same
rule: the width deficit is split in two, and the odd space goes after the
text. Widths are measured with ``len``, so a character always counts as one
column regardless of how a terminal displays it.

Layout of a rendered table::

    ---------------------
    |       GPUs        |
    ---------------------
    | Vendor |  Model   |
    ---------------------
    | Nvidia | GTX 1080 |
    |  AMD   |  RX 580  |
    ---------------------
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

DIVIDER_CHAR = "-"
CELL_PREFIX = "| "
CELL_SUFFIX = " "
ROW_END = "|"
# "| " before and " " after every cell, plus the closing "|".
CELL_OVERHEAD = len(CELL_PREFIX) + len(CELL_SUFFIX)
# The title line keeps "| " and " |" on its outer edges.
TITLE_OVERHEAD = 4


def padding(text_len: int, width: int) -> tuple[int, int]:
    """Return the ``(pre, post)`` space counts that center text in ``width``."""
    diff = width - text_len
    if diff <= 0:
        return 0, 0
    return diff // 2, (diff + 1) // 2


def center(text: str, width: int) -> str:
    """Center ``text`` in ``width`` columns, extra space going after the text."""
    pre, post = padding(len(text), width)
    return " " * pre + text + " " * post


def column_widths(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Longest of each column name and the cells stored under it."""
    widths = [len(name) for name in columns]
    for row in rows:
        for idx, cell in enumerate(row[: len(widths)]):
            if len(cell) > widths[idx]:
                widths[idx] = len(cell)
    return widths


def table_width(widths: Sequence[int]) -> int:
    return sum(width + CELL_OVERHEAD for width in widths) + len(ROW_END)


def _join_cells(cells: Sequence[str]) -> str:
    return "".join(CELL_PREFIX + cell + CELL_SUFFIX for cell in cells) + ROW_END


def format_title(title: str, total_width: int) -> str:
    return "| " + center(title, total_width - TITLE_OVERHEAD) + " |"


def format_header(columns: Sequence[str], widths: Sequence[int]) -> str:
    return _join_cells([center(name, width) for name, width in zip(columns, widths)])


def format_row(row: Sequence[str], widths: Sequence[int]) -> str:
    # zip stops at the shorter side: extra cells are dropped, missing ones
    # leave the line short.
    return _join_cells([center(cell, width) for cell, width in zip(row, widths)])


@dataclass(frozen=True)
class RenderCache:
    """Formatted lines of a table, valid until its content changes."""

    widths: tuple[int, ...]
    divider: str
    title_line: str
    header_line: str
    row_lines: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.divider)

    def lines(self) -> Iterator[str]:
        """Yield the lines in emission order."""
        yield self.divider
        yield self.title_line
        yield self.divider
        yield self.header_line
        yield self.divider
        yield from self.row_lines
        yield self.divider

    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines())


def build_render_cache(
    title: str,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> RenderCache:
    """Compute every formatted line of a table."""
    widths = column_widths(columns, rows)
    total = table_width(widths)
    return RenderCache(
        widths=tuple(widths),
        divider=DIVIDER_CHAR * total,
        title_line=format_title(title, total),
        header_line=format_header(columns, widths),
        row_lines=tuple(format_row(row, widths) for row in rows),
    )
