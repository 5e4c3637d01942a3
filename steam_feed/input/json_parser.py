"""JSON parser for the Steam GetNewsForApp response.

This module turns the raw API response into ordered Article objects. The
response shape is:
- ``appnews`` object holding ``appid``, ``count`` and ``newsitems``
- ``newsitems`` array with gid, title, url, author, contents, date, feedname
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
import json
import logging
from typing import Any

from ..config import FilterConfig, SanitizeConfig
from ..core.sanitizer import sanitize
from ..core.types import Article

logger = logging.getLogger(__name__)


def parse_news_json(
    raw: str | bytes,
    filters: FilterConfig | None = None,
    sanitize_rules: SanitizeConfig | None = None,
    tz: tzinfo | None = None,
) -> list[Article]:
    """Parse a GetNewsForApp response body into articles.

    Invalid JSON or a root that is not an object yields an empty list, the
    same result as a feed with no news.

    Args:
        raw: Response body
        filters: Skip policy (defaults when None)
        sanitize_rules: Per-post content patches (defaults when None)
        tz: Timezone for published dates; local time when None

    Returns:
        Articles in reverse API order
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning(f"News response is not valid JSON: {exc}")
        return []

    if not isinstance(data, dict):
        logger.warning("News response root is not an object")
        return []

    return parse_news_payload(data, filters, sanitize_rules, tz)


def parse_news_payload(
    data: dict[str, Any],
    filters: FilterConfig | None = None,
    sanitize_rules: SanitizeConfig | None = None,
    tz: tzinfo | None = None,
) -> list[Article]:
    """Parse an already decoded GetNewsForApp response.

    The structure:
        {
            "appnews": {
                "appid": 322170,
                "newsitems": [
                    {
                        "gid": "5124585319850001325",
                        "title": "Update 2.2",
                        "contents": "[b]Fixed[/b] ...",
                        "date": 1700000000
                    }
                ]
            }
        }

    Records whose gid is in the skip set or equals the excluded gid are
    dropped, as are malformed records (logged with a warning).
    """
    filters = filters or FilterConfig()
    appnews = data.get("appnews")
    items = appnews.get("newsitems") if isinstance(appnews, dict) else None
    if not isinstance(items, list):
        logger.warning("News response has no appnews.newsitems array")
        return []

    skip_gids = set(filters.skip_gids)
    articles: list[Article] = []

    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping news item: not an object")
            continue

        gid = item.get("gid")
        if not isinstance(gid, str):
            logger.warning("Skipping news item: missing gid")
            continue
        if gid in skip_gids:
            logger.debug(f"Skipping news item {gid}: in skip list")
            continue

        title = item.get("title")
        contents = item.get("contents")
        if not isinstance(title, str) or not isinstance(contents, str):
            logger.warning(f"Skipping news item {gid}: missing required fields (title or contents)")
            continue

        article = Article(
            id=gid,
            title=title,
            content=sanitize(contents, gid, sanitize_rules),
            published_date=_format_date(item.get("date"), tz),
        )
        if gid == filters.excluded_gid:
            continue
        articles.append(article)

    # Shown bottom-up: the list view stacks the first article at the bottom.
    articles.reverse()
    return articles


def _format_date(value: Any, tz: tzinfo | None) -> str | None:
    """Convert a Unix timestamp into a ``YYYY-MM-DD`` calendar date.

    Examples:
        >>> _format_date(1700000000, timezone.utc)
        '2023-11-14'
        >>> _format_date(None, timezone.utc) is None
        True
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        if tz is None:
            moment = datetime.fromtimestamp(value)
        else:
            moment = datetime.fromtimestamp(value, tz=tz)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.strftime("%Y-%m-%d")


def timezone_from_name(name: str) -> tzinfo | None:
    """Map the ``display.timezone`` setting to a tzinfo (None means local)."""
    if name.lower() == "utc":
        return timezone.utc
    return None
