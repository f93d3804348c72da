"""Exceptions raised by the news parsing pipeline."""

from __future__ import annotations

__all__ = ["ConfigurationError", "SourceError"]


class SourceError(OSError):
    """Raised when a source cannot produce its raw JSON text."""


class ConfigurationError(RuntimeError):
    """Raised when incompatible source, format and parser kinds are wired together."""
