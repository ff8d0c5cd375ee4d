"""
Command-line interface for print-table-lib.

Renders tables from YAML/JSON documents, or the built-in demo table.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pt_common.errors import TableDocumentError
from pt_common.logging import configure_logging
from pt_table.models import TableDocument
from pt_table.sinks import ConsoleSink, OutputSink, StreamSink
from pt_table.table import PrintTable
from pt_ui.presenter import HeadlessPresenter, Presenter, PresenterDiagnostics, RichPresenter

DEMO_TITLE = "My Friends' Gaming GPUs"
DEMO_COLUMNS = ["Vendor", "GPU Name", "Release Year"]
DEMO_ROWS = [
    ["Nvidia", "GTX 980 Ti", "2015"],
    ["Nvidia", "GTX 1070", "2016"],
    ["Nvidia", "GTX 1080", "2016"],
    ["Nvidia", "RTX 2080", "2018"],
]


@dataclass
class CLIContext:
    """Output wiring shared by the commands of one invocation."""

    headless: bool = False
    _presenter: Optional[Presenter] = None

    @property
    def presenter(self) -> Presenter:
        if self._presenter is None:
            if self.headless:
                self._presenter = HeadlessPresenter(stream=sys.stderr)
            else:
                self._presenter = RichPresenter(Console(stderr=True))
        return self._presenter

    def output_sink(self) -> OutputSink:
        if self.headless:
            return StreamSink()
        return ConsoleSink(Console())

    def new_table(self) -> PrintTable:
        return PrintTable(
            sink=self.output_sink(),
            diagnostics=PresenterDiagnostics(self.presenter),
        )


app = typer.Typer(help="Render fixed-width ASCII tables.", no_args_is_help=True)


def _context(ctx: typer.Context) -> CLIContext:
    if ctx.obj is None:
        ctx.obj = CLIContext()
    return ctx.obj


@app.callback()
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Plain output without Rich styling (useful in CI).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to PT_LOG_LEVEL or WARNING).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Render log records as JSON (defaults to PT_LOG_JSON).",
    ),
) -> None:
    """Global options shared by every command."""
    configure_logging(level=log_level, json=json_logs or None, force=True)
    ctx.obj = CLIContext(headless=headless)


@app.command()
def demo(
    ctx: typer.Context,
    reset: bool = typer.Option(
        True,
        "--reset/--no-reset",
        help="Reset the table after printing and try to print it again.",
    ),
) -> None:
    """Print the GPU demo table."""
    table = _context(ctx).new_table()
    table.set_title(DEMO_TITLE)
    for name in DEMO_COLUMNS:
        table.add_column(name)
    table.add_rows(DEMO_ROWS)
    table.render()
    if reset:
        table.reset()
        # Reports the missing title, columns and rows.
        table.render()


@app.command()
def render(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="YAML or JSON table document."),
) -> None:
    """Print the table described by a document."""
    cli_ctx = _context(ctx)
    try:
        document = TableDocument.from_path(path)
    except TableDocumentError as exc:
        cli_ctx.presenter.error(str(exc))
        for message in exc.context.get("errors", []):
            cli_ctx.presenter.error(f"  {message}")
        raise typer.Exit(1)

    table = document.to_table(
        sink=cli_ctx.output_sink(),
        diagnostics=PresenterDiagnostics(cli_ctx.presenter),
    )
    if table.render() is None:
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
