"""Configuration models and helpers for the demonstration runner."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from newsparser.formats import FormatKind
from newsparser.sources import SourceKind

__all__ = ["AppConfig", "DEFAULT_CONFIG_PATH", "FlowConfig"]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "data" / "flows.json"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class FlowConfig(BaseModel):
    """One source/format combination to parse and display."""

    name: str = Field(..., description="Heading printed before the flow runs")
    source: SourceKind = Field(..., description="Whether the target is a URL or a bundled file")
    format: FormatKind = Field(..., description="Record shape the document is decoded into")
    target: str = Field(
        ...,
        description=(
            "URL for web sources, or a file name relative to the resources folder "
            "for file sources."
        ),
    )


class AppConfig(BaseModel):
    """Collection of :class:`FlowConfig` entries run in order."""

    log_level: str = Field(default="WARNING", description="Root logging level")
    flows: List[FlowConfig] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "AppConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")

    def iter_flows(self) -> Iterable[FlowConfig]:
        return iter(self.flows)
