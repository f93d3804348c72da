"""Domain models decoded from news JSON payloads."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "ARTICLE_TIMESTAMP_FORMAT",
    "Article",
    "NewsResponse",
    "NewsSource",
    "SIMPLE_TIMESTAMP_FORMAT",
    "SimpleArticle",
]

#: Wire format of ``publishedAt`` in batch responses, always UTC.
ARTICLE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

#: Wire format of ``publishedAt`` in simple articles, no timezone.
SIMPLE_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def _has_text(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


class NewsSource(BaseModel):
    """Publisher block nested inside an article."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None

    def is_valid(self) -> bool:
        return _has_text(self.id) and _has_text(self.name)


class Article(BaseModel):
    """A single article from a batch response.

    Every field is optional on the wire; :meth:`is_valid` decides whether the
    article carries enough information to be shown.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: Optional[NewsSource] = None
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    content: Optional[str] = None

    @field_validator("published_at", mode="before")
    @classmethod
    def _parse_published_at(cls, value: Any) -> Optional[datetime]:
        if value is None:
            return None
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=UTC)
            return value.astimezone(UTC)
        if isinstance(value, str):
            return datetime.strptime(value, ARTICLE_TIMESTAMP_FORMAT).replace(tzinfo=UTC)
        raise ValueError(f"publishedAt must be a string, got {type(value).__name__}")

    @property
    def source_id(self) -> Optional[str]:
        return self.source.id if self.source is not None else None

    @property
    def source_name(self) -> Optional[str]:
        return self.source.name if self.source is not None else None

    def is_valid(self) -> bool:
        """Return ``True`` when title, description, url and published date are present."""

        return (
            _has_text(self.title)
            and _has_text(self.description)
            and _has_text(self.url)
            and self.published_at is not None
        )


class NewsResponse(BaseModel):
    """Batch of articles as returned by the news API."""

    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = None
    total_results: int = Field(default=0, alias="totalResults")
    articles: List[Article] = Field(default_factory=list)

    @field_validator("total_results", mode="before")
    @classmethod
    def _null_total(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("articles", mode="before")
    @classmethod
    def _null_articles(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def error(cls) -> "NewsResponse":
        """Return the placeholder response used when a payload cannot be decoded."""

        return cls(status="error", total_results=0, articles=[])

    def is_valid(self) -> bool:
        """Check that the response has a status and at least one article.

        Individual articles are not inspected here; filtering them is the job of
        :func:`newsparser.validation.filter_valid`.
        """

        return _has_text(self.status) and bool(self.articles)


class SimpleArticle(BaseModel):
    """Flat single-article document with a microsecond precision local timestamp."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    url: Optional[str] = None

    @field_validator("published_at", mode="before")
    @classmethod
    def _parse_published_at(cls, value: Any) -> Optional[datetime]:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return datetime.strptime(value, SIMPLE_TIMESTAMP_FORMAT)
        raise ValueError(f"publishedAt must be a string, got {type(value).__name__}")

    def is_valid(self) -> bool:
        return (
            _has_text(self.title)
            and _has_text(self.description)
            and _has_text(self.url)
            and self.published_at is not None
        )
