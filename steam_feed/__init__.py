"""
Steam Feed - Steam news overlay text pipeline.

This package fetches the Steam news feed for one app, filters and sanitizes
the article text, and computes the wrapped titles and vertical layout a
scrollable overlay list needs.

Main entry point for the overlay host is NewsFeedView; the CLI is available
via the `steam-feed` command.

Example:
    $ steam-feed parse saved_news.json --utc
"""

__all__ = [
    "__version__",
    "Article",
    "RenderBlock",
    "FeedLayout",
    "sanitize",
    "wrap_text",
    "parse_news_json",
    "layout_articles",
    "NewsFeedView",
]
__version__ = "0.1.0"

from .core.types import Article, FeedLayout, RenderBlock
from .core.sanitizer import sanitize
from .core.wrap import wrap_text
from .core.layout import layout_articles
from .input.json_parser import parse_news_json
from .view import NewsFeedView
