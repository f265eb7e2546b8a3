"""Error types raised while resolving a URL."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ResolutionErrorKind(str, Enum):
    """Category of a failed resolution."""

    INVALID_URL = "invalid-url"
    FETCH_FAILED = "fetch-failed"


class ResolutionError(Exception):
    """Raised when a URL cannot be resolved.

    ``url`` is the URL being validated or fetched when the failure happened,
    which for multi-hop chains may differ from the caller's input.
    """

    def __init__(
        self,
        kind: ResolutionErrorKind,
        url: str,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.kind = kind
        self.url = url
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else kind.value
        self.message = message
        super().__init__(f"{kind.value}: {message} ({url})")


__all__ = ["ResolutionError", "ResolutionErrorKind"]
