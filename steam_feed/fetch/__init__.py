"""
News feed fetching.
"""

from .fetcher import FetchResult, fetch_news

__all__ = ["FetchResult", "fetch_news"]
