"""
HTTP fetching of the Steam news feed.

A single GET is made per call; there is no retry or backoff. Failures are
reported through FetchResult rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from ..config import FetchConfig


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either text will be populated (success) or error will be populated (failure),
    but never both. status_code may be None for network-level failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        text: The response body text, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    text: str | None
    error: str | None

    @property
    def ok(self) -> bool:
        return self.error is None and bool(self.text)


async def fetch_news(
    cfg: FetchConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """Fetch the news feed once.

    Args:
        cfg: Endpoint and HTTP settings
        transport: Optional transport override (used by tests)

    Returns:
        FetchResult with the body on a 2xx response, or an error message
    """
    url = cfg.url
    headers = {"User-Agent": cfg.user_agent}
    try:
        async with httpx.AsyncClient(
            timeout=cfg.timeout_seconds,
            headers=headers,
            follow_redirects=True,
            trust_env=cfg.trust_env,
            transport=transport,
        ) as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        return FetchResult(url=url, status_code=None, text=None, error=f"{type(exc).__name__}: {exc}")

    if resp.is_error:
        return FetchResult(
            url=url, status_code=resp.status_code, text=None, error=f"HTTP {resp.status_code}"
        )
    return FetchResult(url=url, status_code=resp.status_code, text=resp.text, error=None)
