"""Gate that checks source, format and parser kinds before a parse runs."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from newsparser.exceptions import ConfigurationError
from newsparser.parsers import ParserKind
from newsparser.sources import SourceKind

__all__ = ["FormatKind", "SourceFormat", "dispatch"]

logger = logging.getLogger(__name__)


class FormatKind(str, enum.Enum):
    """Record shape the raw text is decoded into."""

    NEWS_RESPONSE = "news_response"
    SIMPLE_ARTICLE = "simple_article"


# format -> (required parser kind, allowed source kinds, message for a wrong parser)
_RULES: Dict[FormatKind, Tuple[ParserKind, FrozenSet[SourceKind], str]] = {
    FormatKind.NEWS_RESPONSE: (
        ParserKind.NEWS_RESPONSE,
        frozenset({SourceKind.WEB, SourceKind.FILE}),
        "Invalid parser used for NewsResponse format.",
    ),
    # Simple articles are only ever read from bundled files.
    FormatKind.SIMPLE_ARTICLE: (
        ParserKind.SIMPLE_ARTICLE,
        frozenset({SourceKind.FILE}),
        "Invalid parser used for Simple format.",
    ),
}


@dataclass(frozen=True)
class SourceFormat:
    """A declared (source kind, format kind) pairing."""

    source_kind: SourceKind
    format_kind: FormatKind

    def check(self, parser: Any) -> None:
        """Raise :class:`ConfigurationError` if ``parser`` cannot serve this pairing."""

        required_parser, allowed_sources, parser_message = _RULES[self.format_kind]
        if getattr(parser, "kind", None) is not required_parser:
            raise ConfigurationError(parser_message)
        if self.source_kind not in allowed_sources:
            raise ConfigurationError(
                f"Invalid source {self.source_kind.value!r} used for {self.format_kind.value!r} format."
            )

    def accept(self, parser: Any) -> None:
        """Run ``parser`` once if it matches the declared pairing."""

        self.check(parser)
        logger.debug(
            "Dispatching %s parser for %s source",
            self.format_kind.value,
            self.source_kind.value,
        )
        parser.run()


def dispatch(source_kind: SourceKind, format_kind: FormatKind, parser: Any) -> None:
    SourceFormat(source_kind, format_kind).accept(parser)
