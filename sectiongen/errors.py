"""Exception hierarchy for section retrieval and materialization.

Every error raised by the core derives from :class:`SectiongenError`, so
callers can present failures uniformly.  Transport-level failures from
httpx (DNS, refused connections) are not wrapped and propagate as-is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SectiongenError(Exception):
    """Base class for all sectiongen errors."""


class ConfigurationError(SectiongenError):
    """Raised when the registry base URL is not configured."""


class RetrievalError(SectiongenError):
    """Raised when the registry answers with a non-success status."""

    def __init__(self, kind: str, url: str, status_code: int):
        super().__init__(f"failed to fetch {kind} (HTTP {status_code} from {url})")
        self.kind = kind
        self.url = url
        self.status_code = status_code


class ValidationError(SectiongenError):
    """Raised when a name or a registry payload has the wrong shape."""

    def __init__(self, kind: str, detail: str = "", url: Optional[str] = None):
        message = f"invalid {kind}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.kind = kind
        self.detail = detail
        self.url = url


class FilesystemError(SectiongenError):
    """Raised when a directory cannot be created or a file cannot be written."""

    def __init__(self, message: str, path: Path):
        super().__init__(f"{message}: {path}")
        self.path = path
