"""Console rendering of parsed articles."""

from __future__ import annotations

import sys
from typing import TextIO

from newsparser.models import NewsResponse, SimpleArticle

__all__ = ["display_article", "display_news_response"]


def display_news_response(response: NewsResponse, file: TextIO | None = None) -> None:
    """Print every article of ``response`` as a titled block."""

    out = file or sys.stdout
    for article in response.articles:
        print("\n--- Article ---", file=out)
        print(f"Title: {article.title}", file=out)
        print(f"Description: {article.description}", file=out)
        print(f"Published Date: {article.published_at}", file=out)
        print(f"URL: {article.url}", file=out)


def display_article(article: SimpleArticle, file: TextIO | None = None) -> None:
    out = file or sys.stdout
    print(f"Title: {article.title}", file=out)
    print(f"Description: {article.description}", file=out)
    print(f"Published Date: {article.published_at}", file=out)
    print(f"URL: {article.url}", file=out)
