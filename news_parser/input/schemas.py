"""
Structural schema matching for news JSON.

Input shape is decided by which keys are present, never by a type tag.
Candidate schemas are tried in a fixed order and the first match wins:

    STORAGE_SCHEMAS: full envelope, then simple envelope
    ARTICLE_SCHEMAS: full article, then base article

A storage matcher returns the decoded value, or None when the input does
not have its shape. An article schema pairs a predicate that claims an
element by its keys with a builder; once claimed, a wrongly typed field
makes the element undecodable rather than falling through to the next
schema. Unknown keys are ignored at every level and absent keys decode
to None.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from ..core.storage import ArticleStorage, FullArticleStorage, SimpleArticleStorage
from ..core.types import AnyArticle, Article, FullArticle, Source

logger = logging.getLogger(__name__)

ARTICLES_KEY = "articles"
BASE_KEYS = ("title", "description", "publishedAt", "url")
EXTENDED_KEYS = ("author", "urlToImage", "content", "source")


class NewsDecodeError(ValueError):
    """Raised when text cannot be decoded into any known storage shape."""


class _Mismatch(Exception):
    pass


StorageMatcher = Callable[[Any], Optional[ArticleStorage]]
ArticlePredicate = Callable[[dict[str, Any]], bool]
ArticleBuilder = Callable[[dict[str, Any]], AnyArticle]


def _text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise _Mismatch(f"field '{key}' is {type(value).__name__}, expected string")


def _base_fields(data: dict[str, Any]) -> dict[str, str | None]:
    return {
        "title": _text(data, "title"),
        "description": _text(data, "description"),
        "published_at": _text(data, "publishedAt"),
        "url": _text(data, "url"),
    }


def _source(data: dict[str, Any]) -> Source | None:
    value = data.get("source")
    if value is None:
        return None
    if not isinstance(value, dict):
        raise _Mismatch(f"field 'source' is {type(value).__name__}, expected object")
    return Source(id=_text(value, "id"), name=_text(value, "name"))


def _has_extended_keys(data: dict[str, Any]) -> bool:
    return any(key in data for key in EXTENDED_KEYS)


def _has_any_keys(data: dict[str, Any]) -> bool:
    return True


def build_full_article(data: dict[str, Any]) -> FullArticle:
    """Build an article carrying the extended NewsAPI fields."""
    return FullArticle(
        **_base_fields(data),
        author=_text(data, "author"),
        url_to_image=_text(data, "urlToImage"),
        content=_text(data, "content"),
        source=_source(data),
    )


def build_base_article(data: dict[str, Any]) -> Article:
    return Article(**_base_fields(data))


ARTICLE_SCHEMAS: tuple[tuple[str, ArticlePredicate, ArticleBuilder], ...] = (
    ("full", _has_extended_keys, build_full_article),
    ("base", _has_any_keys, build_base_article),
)


def decode_article(data: Any) -> AnyArticle | None:
    """Decode one element of an articles list, or None if it is malformed."""
    if not isinstance(data, dict):
        return None
    for name, claims, build in ARTICLE_SCHEMAS:
        if not claims(data):
            continue
        try:
            return build(data)
        except _Mismatch as exc:
            logger.debug("%s article schema rejected element: %s", name, exc)
            return None
    return None


def match_full_storage(value: Any) -> FullArticleStorage | None:
    """Match a NewsAPI envelope: articles list plus totalResults and status."""
    if not isinstance(value, dict):
        return None
    items = value.get(ARTICLES_KEY)
    if not isinstance(items, list):
        return None
    if "totalResults" not in value or "status" not in value:
        return None

    total_results = value["totalResults"]
    status = value["status"]
    if total_results is not None and (
        isinstance(total_results, bool) or not isinstance(total_results, int)
    ):
        return None
    if status is not None and not isinstance(status, str):
        return None

    articles = []
    for index, item in enumerate(items):
        article = decode_article(item)
        if article is None:
            logger.debug("Element %d of '%s' matches no article schema", index, ARTICLES_KEY)
            return None
        articles.append(article)

    return FullArticleStorage(
        articles=tuple(articles),
        total_results=total_results,
        status=status,
    )


def match_simple_storage(value: Any) -> SimpleArticleStorage | None:
    """Match a single bare article without an articles key."""
    if not isinstance(value, dict) or ARTICLES_KEY in value:
        return None
    if not any(key in value for key in BASE_KEYS):
        return None
    try:
        article = build_base_article(value)
    except _Mismatch as exc:
        logger.debug("simple envelope rejected: %s", exc)
        return None
    return SimpleArticleStorage(article=article)


STORAGE_SCHEMAS: tuple[tuple[str, StorageMatcher], ...] = (
    ("full", match_full_storage),
    ("simple", match_simple_storage),
)


def decode_storage(text: str) -> ArticleStorage:
    """Decode raw JSON text into the first storage shape it matches.

    Args:
        text: Raw JSON content

    Returns:
        FullArticleStorage or SimpleArticleStorage

    Raises:
        NewsDecodeError: If the text is not valid JSON or matches no schema
    """
    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise NewsDecodeError(f"Malformed JSON: {type(exc).__name__}: {exc}") from exc

    for name, matcher in STORAGE_SCHEMAS:
        storage = matcher(value)
        if storage is not None:
            logger.debug("Decoded content as %s storage", name)
            return storage

    raise NewsDecodeError(_describe_mismatch(value))


def _describe_mismatch(value: Any) -> str:
    if isinstance(value, dict) and value.get("status") == "error":
        # NewsAPI error body
        code = value.get("code", "unknown")
        message = value.get("message", "")
        return f"NewsAPI returned an error ({code}): {message}"
    if isinstance(value, dict):
        keys = ", ".join(sorted(str(key) for key in value)) or "none"
        return f"Content matches no known schema (keys: {keys})"
    return f"Content matches no known schema (top-level {type(value).__name__})"
