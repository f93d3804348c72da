"""Validity checks and filtering for decoded records."""

from __future__ import annotations

import logging
from typing import Iterable, List, Protocol, TypeVar, runtime_checkable

__all__ = ["Diagnostics", "Validatable", "filter_valid", "is_valid"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Validatable(Protocol):
    """Anything that can report whether its required fields are present."""

    def is_valid(self) -> bool: ...


T = TypeVar("T", bound=Validatable)


class Diagnostics:
    """Collects warning messages emitted while parsing and validating.

    Messages are kept in :attr:`messages` so callers can inspect what was
    dropped, and are forwarded to ``log`` (the module logger by default).
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.messages: List[str] = []
        self._log = log or logger

    def warning(self, message: str) -> None:
        self.messages.append(message)
        self._log.warning("%s", message)


def is_valid(item: Validatable, diagnostics: Diagnostics) -> bool:
    """Return ``item.is_valid()``, recording a diagnostic when it is not."""

    if not item.is_valid():
        diagnostics.warning(f"Invalid item: {item}")
        return False
    return True


def filter_valid(items: Iterable[T], diagnostics: Diagnostics) -> List[T]:
    """Return the valid ``items`` in their original order."""

    return [item for item in items if is_valid(item, diagnostics)]
