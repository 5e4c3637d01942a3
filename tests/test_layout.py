"""Tests for vertical list layout."""

import pytest

from steam_feed.config import LayoutConfig
from steam_feed.core.layout import layout_articles, spacing_for
from steam_feed.core.metrics import FixedWidthMetrics, FontSize
from steam_feed.core.types import Article


def _article(gid: str, title: str = "Patch Notes", content: str = "short") -> Article:
    return Article(id=gid, title=title, content=content)


def test_empty_layout():
    layout = layout_articles([], 500, FixedWidthMetrics())

    assert layout.blocks == []
    assert layout.total_height == 0


def test_blocks_stack_from_zero():
    # "short" fits one chatFont line (20) at width 500; base height 50.
    layout = layout_articles([_article("1"), _article("2")], 500, FixedWidthMetrics())

    assert [b.y for b in layout.blocks] == [0, 95]
    assert [b.block_height for b in layout.blocks] == [70, 70]
    assert [b.spacing for b in layout.blocks] == [25, 25]
    assert layout.total_height == 190


def test_block_height_grows_with_content():
    metrics = FixedWidthMetrics()
    content = "x" * 120  # 55 chars per line at width 500 -> 3 lines

    block = layout_articles([_article("1", content=content)], 500, metrics).blocks[0]

    assert block.block_height == 50 + 3 * 20


def test_title_wrapped_inside_padding():
    metrics = FixedWidthMetrics(fonts={"goldFont.fnt": FontSize(char_width=100, line_height=30)})

    block = layout_articles([_article("1", title="aa bb cc")], 380, metrics).blocks[0]

    assert block.wrapped_title == "aa bb\ncc"
    assert block.title_lines == 2


@pytest.mark.parametrize(
    ("newlines", "expected"),
    [(0, 25), (1, 25), (2, 40), (4, 40), (5, 90), (9, 90), (10, 125), (30, 125)],
)
def test_spacing_steps(newlines, expected):
    content = "line\n" * newlines

    assert spacing_for(content, LayoutConfig()) == expected


def test_spacing_never_decreases_with_newlines():
    cfg = LayoutConfig()
    values = [spacing_for("\n" * n, cfg) for n in range(20)]

    assert values == sorted(values)


def test_decreasing_spacing_table_rejected():
    with pytest.raises(ValueError):
        LayoutConfig(spacing_steps=[[10, 40.0], [5, 90.0]])
    with pytest.raises(ValueError):
        LayoutConfig(spacing_steps=[[2, 40.0], [5, 90.0]])


def test_initial_offset_shows_top_of_content():
    layout = layout_articles([_article("1"), _article("2")], 500, FixedWidthMetrics())

    assert layout.initial_offset(720) == 720 - 190
    assert [b.article.id for b in layout.display_order()] == ["2", "1"]


def test_content_offset_follows_title_lines():
    metrics = FixedWidthMetrics(fonts={"goldFont.fnt": FontSize(char_width=100, line_height=30)})
    articles = [_article("1", title="aa"), _article("2", title="aa bb cc")]

    blocks = layout_articles(articles, 380, metrics).blocks

    assert blocks[0].content_offset == 40
    assert blocks[1].title_lines == 2
    assert blocks[1].content_offset == 40 + 20


def test_content_offset_uses_configured_constants():
    metrics = FixedWidthMetrics(fonts={"goldFont.fnt": FontSize(char_width=100, line_height=30)})
    cfg = LayoutConfig(padding=10.0, title_line_height=32.0)

    # title width 360 wraps into "aa bb", "cc dd", "ee"
    block = layout_articles([_article("1", title="aa bb cc dd ee")], 380, metrics, cfg).blocks[0]

    assert block.wrapped_title == "aa bb\ncc dd\nee"
    assert block.content_offset == 10 + 2 * 32
