"""Sources that produce raw JSON text for the parsers."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Protocol, Union

import requests

from newsparser.exceptions import SourceError

__all__ = [
    "ArticleSource",
    "DEFAULT_RESOURCE_ROOT",
    "FileJsonSource",
    "SourceKind",
    "UrlJsonSource",
]

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent

#: Directory bundled with the package that local sources read from.
DEFAULT_RESOURCE_ROOT = _PACKAGE_DIR / "resources"

_Pathish = Union[str, Path]


class SourceKind(str, enum.Enum):
    """Where a source reads its text from."""

    WEB = "web"
    FILE = "file"


class ArticleSource(Protocol):
    """Capability shared by every source: produce the raw JSON document."""

    kind: SourceKind

    def fetch(self) -> str: ...


class UrlJsonSource:
    """Fetch JSON with a plain HTTP GET.

    No retries are attempted; the first failure is raised as :class:`SourceError`.
    """

    kind = SourceKind.WEB

    def __init__(
        self,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | tuple[float, float] | None = None,
    ) -> None:
        self.url = url
        self._session = session
        self._timeout = timeout

    def fetch(self) -> str:
        logger.debug("Fetching %s", self.url)
        try:
            if self._session is not None:
                return self._get(self._session)
            with requests.Session() as session:
                return self._get(session)
        except requests.RequestException as exc:
            raise SourceError(f"Failed to fetch {self.url}: {exc}") from exc

    def _get(self, session: requests.Session) -> str:
        with session.get(self.url, timeout=self._timeout) as response:
            response.raise_for_status()
            return response.text

    def __repr__(self) -> str:
        return f"UrlJsonSource(url={self.url!r})"


class FileJsonSource:
    """Read a JSON document from the bundled resources folder."""

    kind = SourceKind.FILE

    def __init__(self, name: str, *, resource_root: _Pathish | None = None) -> None:
        self.name = name
        self.resource_root = Path(resource_root) if resource_root is not None else DEFAULT_RESOURCE_ROOT

    @property
    def path(self) -> Path:
        return self.resource_root / self.name

    def fetch(self) -> str:
        path = self.path.resolve()
        if not path.is_relative_to(self.resource_root.resolve()) or not path.is_file():
            raise SourceError(f"File not found in resources folder: {self.name}")

        logger.debug("Reading %s", path)
        try:
            with path.open("r", encoding="utf-8") as file:
                return file.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceError(f"Could not read {path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"FileJsonSource(name={self.name!r})"
