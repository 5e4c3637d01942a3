"""
Command-line interface for Steam Feed.

Uses Typer to run the news pipeline outside the game overlay: fetch the live
feed, or replay a saved API response, and print or export the laid-out list.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console

from .config import AppConfig, load_config
from .core.metrics import FixedWidthMetrics
from .logging_utils import setup_logging
from .output.renderer import render_console, render_html
from .view import NewsFeedView

app = typer.Typer(add_completion=False)
console = Console()


def _build_config(
    config: Path | None,
    log_level: str | None,
    width: float | None,
    utc: bool,
) -> AppConfig:
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if width is not None:
        cfg.display.viewport_width = width
    if utc:
        cfg.display.timezone = "utc"
    setup_logging(cfg.logging)
    return cfg


def _load_saved(path: Path, cfg: AppConfig) -> NewsFeedView:
    view = NewsFeedView(cfg, FixedWidthMetrics())
    view.load(path.read_text(encoding="utf-8"))
    return view


@app.command()
def show(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    width: float | None = typer.Option(None, "--width", help="Viewport width."),
    utc: bool = typer.Option(False, "--utc", help="Show published dates in UTC."),
):
    """Fetch the live news feed once and print it."""
    cfg = _build_config(config, log_level, width, utc)
    view = NewsFeedView(cfg, FixedWidthMetrics())
    asyncio.run(view.open())
    if view.layout is None:
        console.print("[red]News feed could not be loaded.[/red]")
        raise typer.Exit(code=1)
    render_console(view.layout, console)


@app.command()
def parse(
    input: Path = typer.Argument(..., exists=True, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    width: float | None = typer.Option(None, "--width", help="Viewport width."),
    utc: bool = typer.Option(False, "--utc", help="Show published dates in UTC."),
):
    """Run a saved GetNewsForApp response through the pipeline and print it."""
    cfg = _build_config(config, log_level, width, utc)
    view = _load_saved(input, cfg)
    render_console(view.layout, console)
    console.print(f"{len(view.articles)} articles, content height {view.layout.total_height:.0f}")


@app.command()
def export(
    input: Path = typer.Argument(..., exists=True, readable=True),
    output: Path = typer.Option(Path("news.html"), "--output", "-o"),
    title: str = typer.Option("Steam News", "--title"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    width: float | None = typer.Option(None, "--width", help="Viewport width."),
    utc: bool = typer.Option(False, "--utc", help="Show published dates in UTC."),
):
    """Render a saved GetNewsForApp response to an HTML page."""
    cfg = _build_config(config, log_level, width, utc)
    view = _load_saved(input, cfg)
    render_html(view.layout, output, title)
    console.print(f"Feed written: {output}")


if __name__ == "__main__":
    app()
