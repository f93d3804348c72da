"""Tests for :mod:`newsparser.runner`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from newsparser import runner
from newsparser.config import FlowConfig
from newsparser.exceptions import ConfigurationError, SourceError
from newsparser.formats import FormatKind
from newsparser.parsers import NewsResponseParser, SimpleArticleParser
from newsparser.sources import FileJsonSource, SourceKind, UrlJsonSource
from newsparser.validation import Diagnostics


def _write_config(path: Path, flows: list[dict]) -> Path:
    path.write_text(json.dumps({"log_level": "WARNING", "flows": flows}), encoding="utf-8")
    return path


def test_build_source_and_parser_follow_flow() -> None:
    flow = FlowConfig(
        name="web", source=SourceKind.WEB, format=FormatKind.NEWS_RESPONSE, target="https://x.test/"
    )

    source = runner.build_source(flow)
    parser = runner.build_parser(flow, source, Diagnostics())

    assert isinstance(source, UrlJsonSource)
    assert source.url == "https://x.test/"
    assert isinstance(parser, NewsResponseParser)


def test_build_simple_file_flow() -> None:
    flow = FlowConfig(
        name="simple", source=SourceKind.FILE, format=FormatKind.SIMPLE_ARTICLE, target="simple.json"
    )

    source = runner.build_source(flow)

    assert isinstance(source, FileJsonSource)
    assert isinstance(runner.build_parser(flow, source, Diagnostics()), SimpleArticleParser)


def test_run_flow_rejects_web_simple_article() -> None:
    flow = FlowConfig(
        name="bad", source=SourceKind.WEB, format=FormatKind.SIMPLE_ARTICLE, target="https://x.test/"
    )

    with pytest.raises(ConfigurationError):
        runner.run_flow(flow)


def test_main_runs_every_flow(tmp_path: Path, monkeypatch, capsys) -> None:
    def offline(self) -> str:
        raise SourceError(f"Failed to fetch {self.url}: offline")

    monkeypatch.setattr(UrlJsonSource, "fetch", offline)
    config_path = _write_config(
        tmp_path / "flows.json",
        [
            {"name": "From URL", "source": "web", "format": "news_response", "target": "https://x.test/"},
            {"name": "From file", "source": "file", "format": "news_response", "target": "newsapi.json"},
            {"name": "Simple", "source": "file", "format": "simple_article", "target": "simple.json"},
        ],
    )

    runner.main(config_path)

    out = capsys.readouterr().out
    assert "From URL." in out
    assert "From file." in out
    assert out.count("--- Article ---") == 2
    assert "Title: New Discoveries in Space" in out


def test_main_exits_on_misconfigured_flow(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path / "flows.json",
        [{"name": "Bad", "source": "web", "format": "simple_article", "target": "https://x.test/"}],
    )

    with pytest.raises(SystemExit) as excinfo:
        runner.main(config_path)

    assert excinfo.value.code == 1


def test_main_exits_when_config_missing(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        runner.main(tmp_path / "missing.json")

    assert excinfo.value.code == 1
