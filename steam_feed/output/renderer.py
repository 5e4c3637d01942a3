"""
Feed rendering for the console and HTML output.

The overlay itself is drawn by the host; these renderers give the CLI a way
to look at a laid-out feed. Both walk the blocks top-down, i.e. in reverse
of the stacking order.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from ..core.types import FeedLayout


def render_html(layout: FeedLayout, output_path: Path, title: str) -> None:
    """Render a laid-out feed as an HTML page using a Jinja2 template.

    Args:
        layout: Blocks produced by ``layout_articles``
        output_path: Where to write the HTML file
        title: Page heading
    """
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("feed.html")
    html = template.render(
        title=title,
        blocks=layout.display_order(),
        generated_at=datetime.now().strftime("%Y-%m-%d %H:%M"),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")


def render_console(layout: FeedLayout, console: Console) -> None:
    """Print each block as a rich panel, newest content first."""
    if not layout.blocks:
        console.print("[dim]No news.[/dim]")
        return

    for block in layout.display_order():
        heading = Text(block.wrapped_title, style="bold yellow")
        body = Text(block.article.content)
        console.print(
            Panel(
                Group(heading, Text(""), body),
                subtitle=block.article.published_date,
                subtitle_align="right",
            )
        )
