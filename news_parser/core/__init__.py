"""
Core domain models.

Article records, the completeness predicate, and the storage variants
that hold decoded envelopes.
"""

from .types import AnyArticle, Article, FullArticle, Source, is_complete
from .storage import ArticleStorage, FullArticleStorage, SimpleArticleStorage

__all__ = [
    "AnyArticle",
    "Article",
    "FullArticle",
    "Source",
    "is_complete",
    "ArticleStorage",
    "FullArticleStorage",
    "SimpleArticleStorage",
]
