"""
Input parsing for the Steam news API.
"""

from .json_parser import parse_news_json, parse_news_payload, timezone_from_name

__all__ = ["parse_news_json", "parse_news_payload", "timezone_from_name"]
