"""Parsers turning source text into validated records."""

from __future__ import annotations

import enum
import logging
from typing import Protocol, TextIO

from pydantic import ValidationError

from newsparser.display import display_article, display_news_response
from newsparser.exceptions import SourceError
from newsparser.models import NewsResponse, SimpleArticle
from newsparser.sources import ArticleSource
from newsparser.validation import Diagnostics, filter_valid, is_valid

__all__ = [
    "ArticleParser",
    "NewsResponseParser",
    "ParserKind",
    "SimpleArticleParser",
]

logger = logging.getLogger(__name__)


class ParserKind(str, enum.Enum):
    """Tag identifying the record shape a parser produces."""

    NEWS_RESPONSE = "news_response"
    SIMPLE_ARTICLE = "simple_article"


class ArticleParser(Protocol):
    kind: ParserKind

    def run(self) -> None: ...


class NewsResponseParser:
    """Parse a batch response and drop the articles that fail validation."""

    kind = ParserKind.NEWS_RESPONSE

    def __init__(
        self,
        source: ArticleSource,
        diagnostics: Diagnostics | None = None,
        *,
        output: TextIO | None = None,
    ) -> None:
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics(logger)
        self._output = output

    def parse(self) -> NewsResponse | None:
        """Return the cleaned response.

        A source or decode failure yields :meth:`NewsResponse.error`; a payload
        that decodes but has no status or no articles yields ``None``. The
        returned ``total_results`` always equals the number of surviving articles.
        """

        try:
            response = NewsResponse.model_validate_json(self.source.fetch())
        except (SourceError, ValidationError) as exc:
            self.diagnostics.warning(f"Failed to parse JSON data: {exc}")
            return NewsResponse.error()

        if not response.is_valid():
            self.diagnostics.warning("Invalid JSON response from data source.")
            return None

        valid_articles = filter_valid(response.articles, self.diagnostics)
        logger.info(
            "Kept %d of %d articles from %r",
            len(valid_articles),
            len(response.articles),
            self.source,
        )
        return NewsResponse(
            status=response.status,
            total_results=len(valid_articles),
            articles=valid_articles,
        )

    def run(self) -> None:
        response = self.parse()
        if response is not None:
            display_news_response(response, self._output)


class SimpleArticleParser:
    """Parse a single flat article document."""

    kind = ParserKind.SIMPLE_ARTICLE

    def __init__(
        self,
        source: ArticleSource,
        diagnostics: Diagnostics | None = None,
        *,
        output: TextIO | None = None,
    ) -> None:
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics(logger)
        self._output = output

    def parse(self) -> SimpleArticle | None:
        try:
            article = SimpleArticle.model_validate_json(self.source.fetch())
        except (SourceError, ValidationError) as exc:
            self.diagnostics.warning(f"Failed to parse JSON data into SimpleArticle: {exc}")
            return None

        if is_valid(article, self.diagnostics):
            return article

        self.diagnostics.warning("Parsed article is invalid.")
        return None

    def run(self) -> None:
        article = self.parse()
        if article is not None:
            display_article(article, self._output)
        else:
            self.diagnostics.warning("No valid article to display.")
