"""NewsAPI fetching."""

from .fetcher import FetchResult, build_url, query_news_api

__all__ = ["FetchResult", "build_url", "query_news_api"]
