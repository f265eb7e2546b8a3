"""Async fetching utilities."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .errors import ResolutionError, ResolutionErrorKind

HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


def is_html_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in HTML_CONTENT_TYPES


@dataclass
class FetchResult:
    url: str
    final_url: str
    status_code: Optional[int]
    content_type: Optional[str]
    body: Optional[str]
    elapsed_ms: Optional[int]

    @property
    def is_html(self) -> bool:
        return self.body is not None and is_html_content_type(self.content_type)


class Fetcher:
    """GET a URL, following transport redirects, and read HTML bodies only."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.client = client
        self.timeout = timeout
        self.headers = headers or {}

    async def fetch(self, url: str) -> FetchResult:
        start = time.perf_counter()
        try:
            async with self.client.stream(
                "GET",
                url,
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            ) as response:
                content_type = response.headers.get("content-type")
                body = None
                if is_html_content_type(content_type):
                    try:
                        await response.aread()
                        body = response.text
                    except (httpx.DecodingError, UnicodeDecodeError, LookupError):
                        body = None
                elapsed_ms = int((time.perf_counter() - start) * 1000)
                return FetchResult(
                    url=url,
                    final_url=str(response.url),
                    status_code=response.status_code,
                    content_type=content_type,
                    body=body,
                    elapsed_ms=elapsed_ms,
                )
        except httpx.InvalidURL as exc:
            raise ResolutionError(ResolutionErrorKind.INVALID_URL, url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ResolutionError(
                ResolutionErrorKind.FETCH_FAILED,
                url,
                f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__,
                cause=exc,
            ) from exc


__all__ = ["FetchResult", "Fetcher", "HTML_CONTENT_TYPES", "is_html_content_type"]
