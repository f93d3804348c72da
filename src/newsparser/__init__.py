"""Parse news JSON from remote or bundled sources into validated records.

Example
-------
from newsparser import FileJsonSource, FormatKind, NewsResponseParser, SourceKind, dispatch

parser = NewsResponseParser(FileJsonSource("newsapi.json"))
dispatch(SourceKind.FILE, FormatKind.NEWS_RESPONSE, parser)
"""

from __future__ import annotations

from .exceptions import ConfigurationError, SourceError  # noqa: F401
from .formats import FormatKind, SourceFormat, dispatch  # noqa: F401
from .models import Article, NewsResponse, NewsSource, SimpleArticle  # noqa: F401
from .parsers import NewsResponseParser, ParserKind, SimpleArticleParser  # noqa: F401
from .sources import FileJsonSource, SourceKind, UrlJsonSource  # noqa: F401
from .validation import Diagnostics, filter_valid, is_valid  # noqa: F401

__all__ = [
    "Article",
    "ConfigurationError",
    "Diagnostics",
    "FileJsonSource",
    "FormatKind",
    "NewsResponse",
    "NewsResponseParser",
    "NewsSource",
    "ParserKind",
    "SimpleArticle",
    "SimpleArticleParser",
    "SourceError",
    "SourceFormat",
    "SourceKind",
    "UrlJsonSource",
    "dispatch",
    "filter_valid",
    "is_valid",
]
