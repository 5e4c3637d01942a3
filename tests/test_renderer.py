from pathlib import Path

from rich.console import Console

from steam_feed.core.types import Article, FeedLayout, RenderBlock
from steam_feed.output.renderer import render_console, render_html


def _layout() -> FeedLayout:
    older = Article(id="1", title="Older post", content="First", published_date="2023-11-13")
    newer = Article(id="2", title="Newer <script>", content="Second", published_date=None)
    return FeedLayout(
        blocks=[
            RenderBlock(article=older, wrapped_title="Older post", y=0, block_height=70, spacing=25),
            RenderBlock(article=newer, wrapped_title="Newer\n<script>", y=95, block_height=70, spacing=25),
        ],
        total_height=190,
    )


def test_render_html_newest_first_and_escaped(tmp_path: Path) -> None:
    output_path = tmp_path / "feed.html"

    render_html(_layout(), output_path, title="Steam News")
    html = output_path.read_text(encoding="utf-8")

    assert "<h1>Steam News</h1>" in html
    assert "&lt;script&gt;" in html
    assert "<script>" not in html
    assert html.index("news-2") < html.index("news-1")
    assert "2023-11-13" in html


def test_render_html_empty_feed(tmp_path: Path) -> None:
    output_path = tmp_path / "empty.html"

    render_html(FeedLayout(), output_path, title="Steam News")

    assert "No news." in output_path.read_text(encoding="utf-8")


def test_render_console_prints_blocks() -> None:
    console = Console(record=True, width=80)

    render_console(_layout(), console)
    text = console.export_text()

    assert "Older post" in text
    assert "Second" in text
    assert text.index("Newer") < text.index("Older post")
