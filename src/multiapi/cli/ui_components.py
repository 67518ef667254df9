"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables por los comandos; la lógica de cada comando
vive en `cli.main`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from multiapi.core.domain.errors import MultiApiError


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    if value is None:
        return "null"
    return str(value)


def build_mapping_table(data: Mapping[str, Any], *, title: str) -> Table:
    """Tabla clave/valor para respuestas devueltas como mapping."""

    table = Table(title=title)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key in sorted(data):
        table.add_row(key, _cell(data[key]))
    return table


def build_urban_table(results: list[Any], *, query: str) -> Table:
    """Una fila por definición; entradas que no son objetos se muestran crudas."""

    table = Table(title=f"Urban Dictionary: {query}")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Definition", style="white")
    table.add_column("Example", style="magenta")
    for index, entry in enumerate(results, start=1):
        if isinstance(entry, dict):
            table.add_row(str(index), _cell(entry.get("definition", "")), _cell(entry.get("example", "")))
        else:
            table.add_row(str(index), _cell(entry), "")
    return table


def build_report_panel(report: str, *, title: str) -> Panel:
    """Panel para los reportes multilínea (`exec`, `translate`)."""

    return Panel(Text(report.strip()), title=Text(title, style="bold yellow"), border_style="yellow")


def print_error(console: Console, exc: MultiApiError) -> None:
    console.print(f"[red]Error ({exc.kind.label()}):[/red] {exc}")
