"""
Decoded article storage variants.

A decoded envelope is held by one of two storage types:
- FullArticleStorage: NewsAPI response with status, totalResults and articles
- SimpleArticleStorage: a single bare article

Both expose extract(), which applies the completeness filter and hands back
a fresh list so callers can never modify what is stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..logging_utils import Diagnostics
from .types import AnyArticle, Article, is_complete


@dataclass(frozen=True)
class FullArticleStorage:
    """Storage for a full NewsAPI envelope.

    Attributes:
        articles: Decoded articles in input order (Article or FullArticle)
        total_results: The envelope's totalResults value
        status: The envelope's status value (e.g., "ok")
    """
    articles: tuple[AnyArticle, ...]
    total_results: int | None = None
    status: str | None = None

    def extract(self, only_complete: bool, diagnostics: Diagnostics) -> list[AnyArticle]:
        """Return a copy of the stored articles.

        When only_complete is True, incomplete articles are dropped and a
        single warning reports how many were removed.
        """
        if not only_complete:
            return list(self.articles)

        filtered = [article for article in self.articles if is_complete(article)]
        removed = len(self.articles) - len(filtered)
        if removed > 0:
            diagnostics.warn(f"Removed {removed} article(s) due to incomplete fields.")
        return filtered


@dataclass(frozen=True)
class SimpleArticleStorage:
    """Storage for a simple envelope holding exactly one article."""

    article: Article

    def extract(self, only_complete: bool, diagnostics: Diagnostics) -> list[AnyArticle]:
        if not only_complete or is_complete(self.article):
            return [self.article]
        diagnostics.warn("Removed 1 article due to incomplete fields.")
        return []


ArticleStorage = Union[FullArticleStorage, SimpleArticleStorage]
