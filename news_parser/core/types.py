"""
Core data types for the news parser.

This module defines the article records produced by decoding:
- Source: The publisher reference nested inside a full article
- Article: Minimal article with title, description, time and URL
- FullArticle: Richly-described NewsAPI article

Article and FullArticle are two variants of one union (AnyArticle) that
share the base field set. Completeness is checked with is_complete(), which
knows about both variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Source:
    """Publisher reference of a NewsAPI article.

    Attributes:
        id: NewsAPI source identifier (e.g., "cnn"), often null
        name: Human-readable publisher name (e.g., "CNN")
    """
    id: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class Article:
    """Minimal article record.

    Attributes:
        title: The article headline
        description: Short description or summary
        published_at: Publication timestamp as given by the input
        url: Link to the original article
    """
    title: str | None = None
    description: str | None = None
    published_at: str | None = None
    url: str | None = None

    def all_fields_filled(self) -> bool:
        return is_complete(self)

    def __str__(self) -> str:
        return (
            f"\nTitle: {self.title}"
            f"\n\tDescription: {self.description}"
            f"\n\tTime: {self.published_at}"
            f"\n\tURL: {self.url}"
        )


@dataclass(frozen=True)
class FullArticle:
    """Article as delivered in a NewsAPI response envelope.

    Carries the same base fields as Article plus author, image, content
    and the nested source reference.

    Attributes:
        title: The article headline
        description: Short description or summary
        published_at: Publication timestamp as given by the input
        url: Link to the original article
        author: Byline, may contain markup
        url_to_image: Link to the lead image
        content: Truncated article body
        source: Publisher reference, None when the input had null
    """
    title: str | None = None
    description: str | None = None
    published_at: str | None = None
    url: str | None = None
    author: str | None = None
    url_to_image: str | None = None
    content: str | None = None
    source: Source | None = None

    def all_fields_filled(self) -> bool:
        return is_complete(self)

    def __str__(self) -> str:
        source_name = self.source.name if self.source else None
        return (
            f"\nTitle: {self.title}"
            f"\n\tAuthor: {self.author}"
            f"\n\tSource: {source_name}"
            f"\n\tDescription: {self.description}"
            f"\n\tTime: {self.published_at}"
            f"\n\tURL: {self.url}"
        )


AnyArticle = Union[Article, FullArticle]

BASE_FIELDS = ("title", "description", "published_at", "url")


def is_complete(article: AnyArticle) -> bool:
    """Return True when no field of the article is missing.

    For FullArticle this also requires author, url_to_image, content, a
    source, and both the source id and name.
    """
    if any(getattr(article, name) is None for name in BASE_FIELDS):
        return False
    if isinstance(article, FullArticle):
        source = article.source
        return (
            article.author is not None
            and article.url_to_image is not None
            and article.content is not None
            and source is not None
            and source.id is not None
            and source.name is not None
        )
    return True
