"""Gradients CLI — builds and inspects the palette dataset.

Usage:
    python cli/main.py --help

Commands:
    fetch   → download palettes from the remote API and save the dataset
    show    → print the palettes stored in an existing dataset
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from gradients.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from functools import partial
from typing import Optional

import httpx
import typer

from gradients.config import settings
from gradients.fetcher import (
    MalformedPageError,
    PipelineConfig,
    fetch_page,
    read_dataset,
    run,
)
from gradients.fetcher.client import make_client

logger = logging.getLogger("gradients.cli")

app = typer.Typer(
    name="gradients",
    help="Palette dataset builder for the gradients UI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every page fetched."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.INFO if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
        force=True,
    )


@app.command("fetch")
def fetch(
    total: Optional[int] = typer.Argument(
        None, help="Number of palettes to request (default: PALETTES_TOTAL)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination JSON file (default: PALETTES_OUTPUT)."
    ),
    min_colors: Optional[int] = typer.Option(None, help="Fewest colours a palette may have."),
    max_colors: Optional[int] = typer.Option(None, help="Most colours a palette may have."),
) -> None:
    """Fetch palettes page by page, filter them, and save the dataset."""
    destination = output or settings.output_path
    try:
        config = PipelineConfig.build(
            total=total, min_colors=min_colors, max_colors=max_colors
        )
        with make_client() as client:
            summary = run(config, partial(fetch_page, client=client), destination)
    except (httpx.HTTPError, MalformedPageError, OSError, ValueError) as exc:
        logger.debug("Palette fetch failed", exc_info=True)
        typer.echo(f"[fetch] Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(summary.message())


@app.command("show")
def show(
    path: Optional[Path] = typer.Option(None, "--path", help="Dataset file to read."),
) -> None:
    """Print the palettes stored in a dataset file."""
    source = path or settings.output_path
    if not source.exists():
        typer.echo(f"[show] No dataset at {source}", err=True)
        raise typer.Exit(code=1)

    try:
        palettes = read_dataset(source)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        typer.echo(f"[show] Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"[show] {len(palettes)} palettes in {source}")
    for i, palette in enumerate(palettes):
        swatches = "  ".join(
            f"#{color} {width:.0%}"
            for color, width in zip(palette.colors, palette.color_widths)
        )
        typer.echo(f"  {i:>4}  {swatches}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
