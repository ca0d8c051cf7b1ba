from __future__ import annotations

import pathlib
from typing import List, Optional
from enum import Enum

import typer
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, LuhnConfig
from .engine.pipeline import Pipeline, ScanResult
from .errors import LuhnError

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="luhnkit — Luhn check digits for cards, IMEI and ISIN")

class Engine(str, Enum):
    decimal = "decimal"
    alphanum = "alphanum"
    expanded = "expanded"


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"luhnkit {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .luhnkit.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else LuhnConfig()}
    if verbose:
        log.info("verbose_enabled")


def _pipeline(ctx: typer.Context, engine: Optional[Engine]) -> Pipeline:
    cfg: LuhnConfig = ctx.obj["config"]
    return Pipeline(cfg, engine=engine.value if engine else None)


@app.command()
def check(
    ctx: typer.Context,
    values: List[str] = typer.Argument(..., help="Numbers or identifiers ending in their check digit"),
    engine: Optional[Engine] = typer.Option(None, "--engine", "-e", help="Engine (default from config)", case_sensitive=False),
):
    """Validate check digits. Exits 1 if any value is invalid."""
    pipeline = _pipeline(ctx, engine)
    table = Table("Value", "Result", "Reason")
    failed = 0
    for value in values:
        f = pipeline.check_value(value)
        if f.valid:
            table.add_row(escape(f.normalized), "[green]valid[/green]", "")
        else:
            failed += 1
            table.add_row(escape(f.normalized), "[red]invalid[/red]", escape(f.reason or ""))
    console.print(table)
    if failed:
        raise typer.Exit(code=1)


@app.command()
def checksum(
    ctx: typer.Context,
    bodies: List[str] = typer.Argument(..., help="Values without their check digit"),
    engine: Optional[Engine] = typer.Option(None, "--engine", "-e", help="Engine (default from config)", case_sensitive=False),
):
    """Print each body with its check digit appended."""
    pipeline = _pipeline(ctx, engine)
    failed = False
    for body in bodies:
        try:
            console.print(pipeline.checksum_value(body))
        except LuhnError as e:
            failed = True
            log.warning("checksum_failed", body=body, error=str(e))
            console.print(f"[red]{escape(repr(body))}: {escape(str(e))}[/red]")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def scan(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., help="File or directory with one candidate per line"),
    engine: Optional[Engine] = typer.Option(None, "--engine", "-e", help="Engine (default from config)", case_sensitive=False),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write HTML report to this path"),
):
    """Check every line of a file or directory tree."""
    if not src.exists():
        raise typer.BadParameter(f"{src} does not exist")
    pipeline = _pipeline(ctx, engine)
    result: ScanResult = pipeline.scan_path(src)
    console.print(f"Scanned {result.files} files, {result.candidates} candidates, {result.invalid} invalid")
    for ff in result.findings:
        for f in ff.findings:
            if not f.valid:
                console.print(f"[red]{escape(ff.path)}:{f.line}[/red] {escape(f.normalized)} ({escape(f.reason or '')})")
    if report:
        from .reporting.html import write_report
        write_report(result, report, engine=pipeline.engine_name)
        console.print(f"[green]Report written:[/green] {report}")
