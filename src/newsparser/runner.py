"""Entry point that runs the configured parse-and-display flows."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from newsparser.config import AppConfig, FlowConfig
from newsparser.exceptions import ConfigurationError
from newsparser.formats import FormatKind, SourceFormat
from newsparser.parsers import ArticleParser, NewsResponseParser, SimpleArticleParser
from newsparser.sources import ArticleSource, FileJsonSource, SourceKind, UrlJsonSource
from newsparser.validation import Diagnostics

__all__ = ["build_parser", "build_source", "main", "run_flow"]

logger = logging.getLogger(__name__)


def build_source(flow: FlowConfig) -> ArticleSource:
    if flow.source is SourceKind.WEB:
        return UrlJsonSource(flow.target)
    return FileJsonSource(flow.target)


def build_parser(flow: FlowConfig, source: ArticleSource, diagnostics: Diagnostics) -> ArticleParser:
    if flow.format is FormatKind.NEWS_RESPONSE:
        return NewsResponseParser(source, diagnostics)
    return SimpleArticleParser(source, diagnostics)


def run_flow(flow: FlowConfig, diagnostics: Diagnostics | None = None) -> None:
    """Parse and display a single flow, raising on a mis-wired configuration."""

    diagnostics = diagnostics if diagnostics is not None else Diagnostics(logger)
    source = build_source(flow)
    parser = build_parser(flow, source, diagnostics)
    SourceFormat(flow.source, flow.format).accept(parser)


def main(config_path: Path | str | None = None) -> None:
    """Load the flow configuration and run every flow in order."""

    try:
        config = AppConfig.from_file(config_path)
    except (FileNotFoundError, ValueError) as exc:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
        logging.error("Could not load flow configuration: %s", exc)
        sys.exit(1)

    logging.basicConfig(level=config.log_level, format="%(levelname)s: %(message)s")

    for flow in config.iter_flows():
        print(f"{flow.name}.")
        try:
            run_flow(flow)
        except ConfigurationError as exc:
            logging.error("Flow %r is misconfigured: %s", flow.name, exc)
            sys.exit(1)


if __name__ == "__main__":
    main()
