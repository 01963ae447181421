"""
NewsAPI querying over HTTP.

Issues a GET against the configured NewsAPI base URL with httpx, retrying
network failures with a linear backoff. The response body is returned as
text without interpretation; decoding happens in the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
import time

import httpx

from ..config import NewsApiConfig


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


def build_url(base_url: str, params: str) -> str:
    """Join the base URL and an endpoint-with-query string.

    Example:
        >>> build_url("https://newsapi.org/v2/", "top-headlines?country=us")
        'https://newsapi.org/v2/top-headlines?country=us'
    """
    return base_url.rstrip("/") + "/" + params.lstrip("/")


def query_news_api(
    params: str,
    cfg: NewsApiConfig,
    api_key: str | None,
    transport: httpx.BaseTransport | None = None,
) -> FetchResult:
    """Query NewsAPI with retry logic.

    Error responses from the API (for example an invalid key) still carry a
    JSON body and are returned as text; only network-level failures produce
    an error result.

    Args:
        params: Endpoint and query string, e.g. "top-headlines?country=us"
        cfg: NewsAPI connection settings
        api_key: Key sent in the X-Api-Key header
        transport: Optional httpx transport, used to stub the network in tests

    Returns:
        FetchResult with text on success or error message on failure
    """
    url = build_url(cfg.base_url, params)
    if not api_key:
        return FetchResult(
            url=url,
            status_code=None,
            text=None,
            error=f"MissingApiKey: set {cfg.api_key_env} or news_api.api_key",
        )

    headers = {"User-Agent": cfg.user_agent, "X-Api-Key": api_key}
    last_error: str | None = None

    for attempt in range(cfg.retries + 1):
        try:
            with httpx.Client(
                timeout=cfg.timeout_seconds,
                headers=headers,
                follow_redirects=True,
                trust_env=cfg.trust_env,
                transport=transport,
            ) as client:
                resp = client.get(url)
                return FetchResult(url=url, status_code=resp.status_code, text=resp.text, error=None)
        except httpx.HTTPError as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            if attempt < cfg.retries:
                # Linear backoff: 0.5s, 1.0s, 1.5s...
                time.sleep(0.5 * (attempt + 1))

    return FetchResult(url=url, status_code=None, text=None, error=last_error)
