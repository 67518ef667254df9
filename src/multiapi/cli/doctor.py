"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from multiapi.core.config import AppSettings
from multiapi.core.domain.errors import MultiApiError
from multiapi.core.services.client import MultiApiClient

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Call `/execlangs`, the cheapest endpoint, to verify reachability and shape."""

    try:
        with MultiApiClient(settings) as api:
            langs = api.get_exec_langs()
        return True, f"{len(langs.split())} exec languages advertised"
    except MultiApiError as exc:
        return False, f"{exc.kind.label()}: {exc}"


@app.command()
def run(ctx: typer.Context) -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()

    table = Table(title="multiapi Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    if settings.http_timeout_seconds is None:
        table.add_row("Timeout", "WARN", "No timeout set -> calls may block indefinitely")
    else:
        table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Status checks", "OK", "enabled" if settings.raise_for_status else "disabled (bodies returned as-is)")
    table.add_row("JSON decoding", "OK", "strict" if settings.strict_json else "lenient (invalid JSON -> {})")

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        raise typer.Exit(code=1)
