"""Output dispatcher: renders API models as a table, JSON, YAML, or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from rich.console import Console

from vimeo_client.output.tables import kv_table, make_table

console = Console()

FORMATS = ("table", "json", "yaml", "csv")


def to_plain(data: Any) -> Any:
    """Convert models (or lists of models) to JSON-compatible data."""
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, list):
        return [to_plain(item) for item in data]
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(to_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    console.print(
        yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False), end="",
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows([[str(v) if v is not None else "" for v in row] for row in rows])
    console.print(buf.getvalue(), end="", markup=False, highlight=False)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
    caption: str | None = None,
) -> None:
    """Dispatch output to the appropriate formatter.

    Table and CSV output use *columns*/*rows* when given; a single model
    or dict without them is shown as a key/value table (or JSON for CSV).
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}")
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        if columns and rows is not None:
            output_csv(columns, rows)
        else:
            output_json(data)
    elif columns and rows is not None:
        console.print(make_table(title, columns, rows, caption=caption))
    else:
        plain = to_plain(data)
        if isinstance(plain, dict):
            console.print(kv_table(plain, title=title))
        else:
            console.print(plain)
