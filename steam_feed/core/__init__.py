"""
Core domain models and text pipeline.

This package contains the data types and pure text/layout logic that is
independent of fetching and rendering.
"""

from .types import Article, FeedLayout, RenderBlock
from .sanitizer import sanitize
from .wrap import wrap_text
from .metrics import FixedWidthMetrics, FontSize, TextMetrics
from .layout import layout_articles, spacing_for

__all__ = [
    "Article",
    "FeedLayout",
    "RenderBlock",
    "sanitize",
    "wrap_text",
    "TextMetrics",
    "FixedWidthMetrics",
    "FontSize",
    "layout_articles",
    "spacing_for",
]
