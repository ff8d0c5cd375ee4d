"""Table documents loaded from YAML or JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pt_common.errors import TableDocumentError, wrap_error
from pt_table.diagnostics import DiagnosticSink
from pt_table.sinks import OutputSink
from pt_table.table import PrintTable

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def _scalar_to_str(value: Any) -> str:
    if isinstance(value, (list, dict)):
        raise ValueError("cells must be scalar values")
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class TableDocument(BaseModel):
    """Title, columns and rows describing one table.

    Row lengths are not validated here: shape errors are reported by the
    table itself when the rows are added.
    """

    title: str = ""
    columns: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        return _scalar_to_str(value)

    @field_validator("columns", mode="before")
    @classmethod
    def _coerce_columns(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_scalar_to_str(item) for item in value]
        return value

    @field_validator("rows", mode="before")
    @classmethod
    def _coerce_rows(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                [_scalar_to_str(cell) for cell in row] if isinstance(row, list) else row
                for row in value
            ]
        return value

    @classmethod
    def from_path(cls, path: Path) -> "TableDocument":
        """Load a document, YAML for ``.yaml``/``.yml`` files and JSON otherwise."""
        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise wrap_error(
                TableDocumentError,
                f"Cannot read table document {path}",
                context={"path": path},
                cause=exc,
            ) from exc
        except UnicodeDecodeError as exc:
            raise wrap_error(
                TableDocumentError,
                f"Cannot decode table document {path} as UTF-8",
                context={"path": path, "position": exc.start},
                cause=exc,
            ) from exc

        try:
            if path.suffix.lower() in _YAML_SUFFIXES:
                data = yaml.safe_load(raw_text) or {}
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise wrap_error(
                TableDocumentError,
                f"Cannot parse table document {path}: {exc}",
                context={"path": path},
                cause=exc,
            ) from exc

        if not isinstance(data, dict):
            raise wrap_error(
                TableDocumentError,
                f"Table document {path} must contain a mapping",
                context={"path": path, "type": type(data).__name__},
            )

        try:
            document = cls.model_validate(data)
        except ValidationError as exc:
            raise wrap_error(
                TableDocumentError,
                f"Invalid table document {path}",
                context={"path": path, "errors": [err["msg"] for err in exc.errors()]},
                cause=exc,
            ) from exc
        logger.debug(
            "Loaded table document %s (%d columns, %d rows)",
            path,
            len(document.columns),
            len(document.rows),
        )
        return document

    def to_table(
        self,
        *,
        sink: OutputSink | None = None,
        diagnostics: DiagnosticSink | None = None,
    ) -> PrintTable:
        table = PrintTable(sink=sink, diagnostics=diagnostics)
        table.set_title(self.title)
        for name in self.columns:
            table.add_column(name)
        table.add_rows(self.rows)
        return table
