"""CLI (Typer + Rich).

Un comando por endpoint más `doctor`. Las opciones globales construyen un
`AppSettings` que viaja en `ctx.obj` hasta cada comando.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from multiapi.adapters.json_exporter import export_bytes, export_json
from multiapi.cli import doctor
from multiapi.cli.ui_components import (
    build_mapping_table,
    build_report_panel,
    build_urban_table,
    print_error,
)
from multiapi.core.config import AppSettings
from multiapi.core.domain.errors import MultiApiError
from multiapi.core.services.client import MultiApiClient

T = TypeVar("T")

app = typer.Typer(
    no_args_is_help=True,
    help="Command line client for the api.itayki.com multi-service API.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _settings(ctx: typer.Context) -> AppSettings:
    return ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()


def _call(ctx: typer.Context, operation: Callable[[MultiApiClient], T]) -> T:
    """Ejecuta `operation` con un cliente efímero; errores del cliente -> exit 1."""

    try:
        with MultiApiClient(_settings(ctx)) as api:
            return operation(api)
    except MultiApiError as exc:
        logger.debug("command failed", exc_info=exc)
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc


def _emit_mapping(data: Any, *, title: str, as_json: bool, output: Path | None) -> None:
    if output is not None:
        path = export_json(payload=data, output_path=output)
        _console.print(f"[green]Saved JSON to:[/green] {path}")
        return
    if as_json:
        typer.echo(json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True))
        return
    _console.print(build_mapping_table(data, title=title))


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Override the API host."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Request timeout in seconds."),
    strict_json: bool = typer.Option(False, "--strict-json", help="Fail on undecodable JSON bodies."),
    raise_for_status: bool = typer.Option(False, "--check-status", help="Fail on non-2xx HTTP responses."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log built URLs and HTTP exchanges."),
) -> None:
    _configure_logging(verbose)

    overrides: dict[str, Any] = {}
    if base_url:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    if strict_json:
        overrides["strict_json"] = True
    if raise_for_status:
        overrides["raise_for_status"] = True
    try:
        ctx.obj = AppSettings(**overrides)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise typer.BadParameter(f"{field}: {first.get('msg', 'invalid value')}", ctx=ctx) from exc


@app.command()
def langs(ctx: typer.Context) -> None:
    """List the languages supported by `exec`."""

    typer.echo(_call(ctx, lambda api: api.get_exec_langs()))


@app.command(name="exec")
def exec_(
    ctx: typer.Context,
    lang: str = typer.Argument(..., help="Language name, see `multiapi langs`."),
    code: Optional[str] = typer.Argument(None, help="Source code to run."),
    file: Optional[Path] = typer.Option(None, "--file", "-f", exists=True, dir_okay=False, help="Read the code from a file."),
) -> None:
    """Run a snippet remotely and print the execution report."""

    if file is not None:
        code = file.read_text(encoding="utf-8")
    if not code:
        raise typer.BadParameter("provide CODE or --file")

    report = _call(ctx, lambda api: api.exec_code(lang, code))
    _console.print(build_report_panel(report, title=f"exec: {lang}"))


@app.command()
def ocr(ctx: typer.Context, url: str = typer.Argument(..., help="Public image URL.")) -> None:
    """Extract text from an image."""

    typer.echo(_call(ctx, lambda api: api.ocr(url)))


@app.command()
def translate(
    ctx: typer.Context,
    text: str = typer.Argument(...),
    from_lang: str = typer.Option("auto", "--from", help="Source language code."),
    to_lang: str = typer.Option("en", "--to", help="Target language code."),
) -> None:
    """Translate a text."""

    report = _call(ctx, lambda api: api.translate(text, from_lang, to_lang))
    _console.print(build_report_panel(report, title="translate"))


@app.command()
def urban(
    ctx: typer.Context,
    query: str = typer.Argument(...),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save results as JSON."),
) -> None:
    """Look up a term on Urban Dictionary."""

    results = _call(ctx, lambda api: api.urban_dictionary(query))
    if output is not None or as_json:
        _emit_mapping(results, title=query, as_json=as_json, output=output)
        return
    _console.print(build_urban_table(results, query=query))


@app.command()
def webshot(
    ctx: typer.Context,
    url: str = typer.Argument(...),
    width: str = typer.Option("1280", "--width"),
    height: str = typer.Option("720", "--height"),
    output: Path = typer.Option(Path("webshot.png"), "--output", "-o", help="Destination image file."),
) -> None:
    """Take a screenshot of a web page."""

    data = _call(ctx, lambda api: api.webshot(url, width, height))
    path = export_bytes(data=data, output_path=output)
    _console.print(f"[green]Saved {len(data)} bytes to:[/green] {path}")


@app.command(name="random")
def random_(ctx: typer.Context, minimum: int = typer.Argument(...), maximum: int = typer.Argument(...)) -> None:
    """Draw a random integer between MINIMUM and MAXIMUM."""

    typer.echo(_call(ctx, lambda api: api.random_number(minimum, maximum)))


@app.command()
def pypi(
    ctx: typer.Context,
    package: str = typer.Argument(...),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the response as JSON."),
) -> None:
    """Show PyPI metadata for a package."""

    data = _call(ctx, lambda api: api.pypi_search(package))
    _emit_mapping(data, title=f"PyPI: {package}", as_json=as_json, output=output)


@app.command()
def paste(
    ctx: typer.Context,
    content: str = typer.Argument(...),
    title: str = typer.Option("", "--title"),
    author: str = typer.Option("", "--author"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the response as JSON."),
) -> None:
    """Create a paste."""

    data = _call(ctx, lambda api: api.paste(content, title, author))
    _emit_mapping(data, title="paste", as_json=as_json, output=output)


@app.command(name="get-paste")
def get_paste(
    ctx: typer.Context,
    paste_id: str = typer.Argument(...),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the response as JSON."),
) -> None:
    """Fetch a paste by id."""

    data = _call(ctx, lambda api: api.get_paste(paste_id))
    _emit_mapping(data, title=f"paste {paste_id}", as_json=as_json, output=output)


def run() -> None:
    app()
