"""
Vertical layout of the news list.

Blocks are stacked bottom-to-top in list order starting at ``y=0``, so the
first article sits at the bottom of the scroll content and the last one at
the top. The host positions nodes from the returned ``RenderBlock``s.
"""

from __future__ import annotations

from typing import Iterable

from ..config import LayoutConfig
from .metrics import TextMetrics
from .types import Article, FeedLayout, RenderBlock
from .wrap import wrap_text


def spacing_for(content: str, cfg: LayoutConfig) -> float:
    """Gap after a block, stepped on the number of newlines in its content."""
    newlines = content.count("\n")
    for threshold, spacing in cfg.spacing_steps:
        if newlines >= threshold:
            return spacing
    return cfg.default_spacing


def layout_articles(
    articles: Iterable[Article],
    width: float,
    metrics: TextMetrics,
    cfg: LayoutConfig | None = None,
) -> FeedLayout:
    """Place articles in a vertical list.

    Args:
        articles: Articles in list order
        width: Width of one block; titles wrap at ``width - 2 * padding``
        metrics: Font measurement supplied by the host
        cfg: Layout constants (defaults when None)

    Returns:
        FeedLayout with one block per article and the accumulated height
    """
    cfg = cfg or LayoutConfig()
    title_measure = metrics.word_measure(cfg.title_font)
    title_width = width - 2 * cfg.padding

    blocks: list[RenderBlock] = []
    total_height = 0.0
    for article in articles:
        wrapped_title = wrap_text(article.title, title_width, title_measure, cfg.wrap_buffer)
        block_height = cfg.base_height + metrics.measure_height(
            article.content, cfg.content_font, width
        )
        spacing = spacing_for(article.content, cfg)
        title_lines = wrapped_title.count("\n") + 1
        content_offset = cfg.padding + (title_lines - 1) * cfg.title_line_height
        blocks.append(
            RenderBlock(
                article=article,
                wrapped_title=wrapped_title,
                y=total_height,
                block_height=block_height,
                spacing=spacing,
                content_offset=content_offset,
            )
        )
        total_height += block_height + spacing

    return FeedLayout(blocks=blocks, total_height=total_height)
