"""
JSON decoder for news envelopes.

NewsJsonParser turns a NewsForParse into stored articles. It is a small
state machine: it starts PENDING and moves to COMPLETED only after a
successful decode, after which its result never changes. Failures never
raise; they are reported through diagnostics and the boolean return value.
"""

from __future__ import annotations

from enum import Enum

from .core.storage import ArticleStorage
from .core.types import AnyArticle
from .input.envelope import NewsForParse
from .input.schemas import NewsDecodeError, decode_storage
from .logging_utils import Diagnostics


class ParserState(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class NewsJsonParser:
    """Single-use decoder from raw news JSON to articles.

    Attributes:
        diagnostics: Sink for decode and filtering warnings
    """

    def __init__(self, diagnostics: Diagnostics):
        self.diagnostics = diagnostics
        self._state = ParserState.PENDING
        self._storage: ArticleStorage | None = None

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def storage(self) -> ArticleStorage | None:
        """The decoded storage, or None while pending."""
        return self._storage

    def decode(self, news: NewsForParse) -> bool:
        """Decode the envelope's content.

        Returns:
            True if the content matched a known shape (or the parser had
            already completed), False otherwise
        """
        if self._state is ParserState.COMPLETED:
            self.diagnostics.warn(
                f"Parser already holds decoded content; ignoring {news.source.value} input."
            )
            return True

        if news.content is None:
            self.diagnostics.warn(
                f"No content to parse from {news.source.value} source ({news.format.value} format)."
            )
            return False

        try:
            storage = decode_storage(news.content)
        except NewsDecodeError as exc:
            self.diagnostics.warn(
                f"Failed to parse {news.source.value} content ({news.format.value} format): {exc}"
            )
            return False

        self._storage = storage
        self._state = ParserState.COMPLETED
        return True

    def articles(self) -> list[AnyArticle]:
        """Return the complete articles, or an empty list while pending."""
        if self._state is ParserState.COMPLETED and self._storage is not None:
            return self._storage.extract(True, self.diagnostics)
        return []
