from pathlib import Path

import pytest

pytest.importorskip("pydantic")

from newsparser.config import DEFAULT_CONFIG_PATH, AppConfig, FlowConfig
from newsparser.formats import FormatKind
from newsparser.sources import SourceKind


def test_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "flows.json"
    config = AppConfig(
        log_level="info",
        flows=[
            FlowConfig(
                name="Simple",
                source=SourceKind.FILE,
                format=FormatKind.SIMPLE_ARTICLE,
                target="simple.json",
            )
        ],
    )
    config.dump(config_path)

    loaded = AppConfig.from_file(config_path)
    assert loaded.log_level == "INFO"
    assert loaded.flows[0].source is SourceKind.FILE
    assert loaded.flows[0].format is FormatKind.SIMPLE_ARTICLE
    assert loaded.flows[0].target == "simple.json"


def test_default_config_lists_demonstration_flows() -> None:
    config = AppConfig.from_file()

    assert DEFAULT_CONFIG_PATH.is_file()
    assert [(flow.source, flow.format) for flow in config.iter_flows()] == [
        (SourceKind.WEB, FormatKind.NEWS_RESPONSE),
        (SourceKind.FILE, FormatKind.NEWS_RESPONSE),
        (SourceKind.FILE, FormatKind.SIMPLE_ARTICLE),
    ]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        AppConfig.from_file(tmp_path / "absent.json")


def test_malformed_json_raises_value_error(tmp_path: Path) -> None:
    config_path = tmp_path / "flows.json"
    config_path.write_text("{", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        AppConfig.from_file(config_path)


def test_unknown_format_is_rejected(tmp_path: Path) -> None:
    config_path = tmp_path / "flows.json"
    config_path.write_text(
        '{"flows": [{"name": "x", "source": "file", "format": "rss", "target": "a.json"}]}',
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Configuration file is invalid"):
        AppConfig.from_file(config_path)


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        AppConfig(log_level="LOUD")
