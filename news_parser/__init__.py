"""
News Parser - decode NewsAPI-style JSON into validated article records.

This package reads news JSON from local files or NewsAPI queries, decides
by structure whether it holds a full response envelope or a single bare
article, and exposes only the articles whose fields are all present.

Main entry point is the CLI via the `news-parser` command.

Example:
    $ news-parser parse inputs/newsapi.json
"""

__all__ = [
    "__version__",
    "Article",
    "FullArticle",
    "Source",
    "NewsForParse",
    "NewsFormat",
    "NewsSource",
    "NewsJsonParser",
]
__version__ = "0.1.0"

from .core.types import Article, FullArticle, Source
from .input.envelope import NewsFormat, NewsForParse, NewsSource
from .parser import NewsJsonParser
