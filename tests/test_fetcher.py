"""Tests for the single-shot news fetch."""

from __future__ import annotations

import asyncio

import httpx

from steam_feed.config import FetchConfig
from steam_feed.fetch.fetcher import fetch_news


def test_fetch_news_sends_app_and_count():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["agent"] = request.headers["User-Agent"]
        return httpx.Response(200, text='{"appnews": {"newsitems": []}}')

    cfg = FetchConfig()
    result = asyncio.run(fetch_news(cfg, transport=httpx.MockTransport(handler)))

    assert result.ok
    assert result.status_code == 200
    assert seen["params"] == {"appid": "322170", "count": "300"}
    assert seen["agent"] == cfg.user_agent


def test_fetch_news_reports_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    result = asyncio.run(fetch_news(FetchConfig(), transport=transport))

    assert not result.ok
    assert result.status_code == 503
    assert result.text is None
    assert result.error == "HTTP 503"


def test_fetch_news_reports_transport_error_once():
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        raise httpx.ConnectError("boom", request=request)

    result = asyncio.run(fetch_news(FetchConfig(), transport=httpx.MockTransport(handler)))

    assert len(attempts) == 1
    assert result.status_code is None
    assert result.error.startswith("ConnectError")


def test_url_uses_configured_app():
    cfg = FetchConfig(app_id=730, count=5)

    assert cfg.url == "https://api.steampowered.com/ISteamNews/GetNewsForApp/v2/?appid=730&count=5"
