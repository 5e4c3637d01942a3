"""
Core data types for Steam Feed.

- Article: One news post after filtering and sanitization
- RenderBlock: An article placed in the scrollable list
- FeedLayout: All placed blocks plus the total scroll height
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Article:
    """A news post ready for display.

    Attributes:
        id: The feed's ``gid`` for this post
        title: Headline as published
        content: Sanitized body text, never the raw feed text
        published_date: ``YYYY-MM-DD`` calendar date, or None if the feed had no date
    """
    id: str
    title: str
    content: str
    published_date: str | None = None


@dataclass(frozen=True)
class RenderBlock:
    """An article positioned in the list.

    Attributes:
        article: The article shown by this block
        wrapped_title: Title with newline-separated wrapped lines
        y: Bottom edge of the block, measured from the bottom of the list
        block_height: Height of the block itself, without trailing spacing
        spacing: Gap left above the block before the next one
        content_offset: Distance from the top padding down to the content, below the title
    """
    article: Article
    wrapped_title: str
    y: float
    block_height: float
    spacing: float = 0.0
    content_offset: float = 0.0

    @property
    def title_lines(self) -> int:
        return self.wrapped_title.count("\n") + 1


@dataclass(frozen=True)
class FeedLayout:
    """Blocks stacked bottom-to-top and the height they occupy."""
    blocks: list[RenderBlock] = field(default_factory=list)
    total_height: float = 0.0

    def initial_offset(self, viewport_height: float) -> float:
        """Scroll offset that brings the top of the content into view."""
        return viewport_height - self.total_height

    def display_order(self) -> list[RenderBlock]:
        """Blocks as seen when reading from the top of the view down."""
        return list(reversed(self.blocks))
