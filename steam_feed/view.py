"""
Feed view lifecycle.

NewsFeedView ties the pipeline together for one opened overlay:
1. Issue a single fetch of the news feed
2. Hand the terminal event to the render context through ``post``
3. Parse, sanitize and lay out articles synchronously in that context

The view never holds render nodes. It exposes the parsed articles and the
computed layout; the host builds and destroys drawable objects from them.
"""

from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Callable

from .config import AppConfig
from .core.layout import layout_articles
from .core.metrics import TextMetrics
from .core.types import Article, FeedLayout
from .fetch.fetcher import FetchResult, fetch_news
from .input.json_parser import parse_news_json, timezone_from_name
from .logging_utils import log_event

logger = logging.getLogger(__name__)

Post = Callable[[Callable[[], None]], None]


class ViewState(str, Enum):
    CLOSED = "closed"
    LOADING = "loading"
    READY = "ready"


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


class NewsFeedView:
    """One open news overlay.

    Args:
        cfg: Application configuration
        metrics: Font measurement supplied by the host
        post: Schedules a callback on the render thread; runs inline by default
        fetch: Coroutine function returning a FetchResult (defaults to fetch_news)
    """

    def __init__(
        self,
        cfg: AppConfig,
        metrics: TextMetrics,
        post: Post | None = None,
        fetch: Callable[..., object] | None = None,
    ) -> None:
        self.cfg = cfg
        self.metrics = metrics
        self._post = post or _run_inline
        self._fetch = fetch or fetch_news
        self.state = ViewState.CLOSED
        self.articles: tuple[Article, ...] = ()
        self.layout: FeedLayout | None = None
        self.scroll_offset = 0.0
        self._in_flight = False
        # Bumped on every open/close; responses from an older generation are dropped.
        self._generation = 0

    @property
    def block_width(self) -> float:
        return self.cfg.display.viewport_width - self.cfg.layout.side_margin

    async def open(self) -> None:
        """Start loading the feed; completes once the response has been posted."""
        if self._in_flight:
            logger.debug("Feed fetch already in progress")
            return
        self._generation += 1
        generation = self._generation
        self._in_flight = True
        self.state = ViewState.LOADING
        log_event(logger, "Fetching news items", event="fetch_start", url=self.cfg.fetch.url)
        try:
            result: FetchResult = await self._fetch(self.cfg.fetch)
        except asyncio.CancelledError:
            logger.info("Fetching was cancelled.")
            return
        finally:
            if generation == self._generation:
                self._in_flight = False

        if generation != self._generation:
            logger.debug("Dropping news response for a closed view")
            return

        if not result.ok:
            # No error UI: the view keeps showing its loading state.
            logger.error(f"Failed to fetch news items: {result.error or 'empty response'}")
            return

        body = result.text or ""
        self._post(lambda: self._on_response(body, generation))

    def load(self, body: str) -> None:
        """Handle a response body obtained outside of ``open`` (e.g. a saved file)."""
        self.state = ViewState.LOADING
        self._on_response(body, self._generation)

    def _on_response(self, body: str, generation: int) -> None:
        if generation != self._generation or self.state is not ViewState.LOADING:
            logger.debug("Dropping news response for a closed view")
            return
        tz = timezone_from_name(self.cfg.display.timezone)
        articles = parse_news_json(body, self.cfg.filters, self.cfg.sanitize, tz)
        self.show(articles)

    def show(self, articles: list[Article]) -> FeedLayout:
        """Lay out parsed articles and scroll to the top of the list."""
        self.articles = tuple(articles)
        self.layout = layout_articles(self.articles, self.block_width, self.metrics, self.cfg.layout)
        self.scroll_offset = self.layout.initial_offset(self.cfg.display.viewport_height)
        self.state = ViewState.READY
        log_event(
            logger,
            "News view ready",
            event="view_ready",
            articles=len(self.articles),
            total_height=self.layout.total_height,
        )
        return self.layout

    def close(self) -> None:
        self._generation += 1
        self._in_flight = False
        self.state = ViewState.CLOSED
        self.articles = ()
        self.layout = None
        self.scroll_offset = 0.0
