"""latestdoc CLI — run the latest-document pipeline from a terminal.

Usage:
    python cli/main.py --help

Commands:
    resolve   → print the newest document on the listing page
    download  → download it and write it in the chosen format
    formats   → list the available output formats
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from latestdoc.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import logging

import typer

from latestdoc.config import settings
from latestdoc.convert import CONVERTERS, get_converter
from latestdoc.errors import PipelineError
from latestdoc.pipeline import LatestDocumentPipeline
from latestdoc.scraper.selector import date_token_text

app = typer.Typer(
    name="latestdoc",
    help="Fetch the newest listed document and convert it.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable INFO logging."),
) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("formats")
def formats() -> None:
    """List the available output formats."""
    for name, cls in CONVERTERS.items():
        typer.echo(f"  {name:<11} .{cls.extension:<5} {cls.mime_type}")


@app.command("resolve")
def resolve() -> None:
    """Print the newest document on the listing page (no download)."""
    pipeline = LatestDocumentPipeline(settings)
    typer.echo(f"[resolve] Fetching {settings.listing_url!r} …")
    try:
        ref = asyncio.run(pipeline.resolve())
    except PipelineError as exc:
        typer.echo(f"[resolve] Error: {exc.message}")
        raise typer.Exit(1)

    typer.echo(f"[resolve] Name  : {ref.display_name}")
    typer.echo(f"[resolve] URL   : {ref.url}")
    typer.echo(f"[resolve] Date  : {date_token_text(ref.display_name) or '(none)'}")


@app.command("download")
def download(
    format: str = typer.Option("pdf", "--format", "-f", help="Output format (see `formats`)."),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Directory to write into."),
) -> None:
    """Download the newest document and write it in the chosen format."""
    try:
        converter = get_converter(format, settings)
    except KeyError as exc:
        typer.echo(f"[download] {exc.args[0]}")
        raise typer.Exit(1)

    pipeline = LatestDocumentPipeline(settings)
    typer.echo(f"[download] Resolving latest document as {format!r} …")
    try:
        payload = asyncio.run(pipeline.run(converter))
    except PipelineError as exc:
        typer.echo(f"[download] Error: {exc.message}")
        raise typer.Exit(1)

    output.mkdir(parents=True, exist_ok=True)
    target = output / payload.filename
    target.write_bytes(payload.content)
    typer.echo(f"[download] Wrote {target} ({len(payload.content)} bytes, {payload.mime_type})")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
