"""Input envelopes and structural schema matching."""

from .envelope import NewsFormat, NewsForParse, NewsSource, news_from_api, news_from_file
from .schemas import NewsDecodeError, decode_storage

__all__ = [
    "NewsFormat",
    "NewsForParse",
    "NewsSource",
    "news_from_api",
    "news_from_file",
    "NewsDecodeError",
    "decode_storage",
]
