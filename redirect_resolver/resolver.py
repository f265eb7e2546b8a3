"""Follow transport and in-page redirects to a URL's final destination."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from .config import Config
from .fetcher import Fetcher
from .signals import RedirectSignal, select_signal
from .url_tools import parse_absolute_url

# Depths 0..MAX_DEPTH are fetched: one initial fetch plus five re-fetches.
MAX_DEPTH = 5


@dataclass
class Resolution:
    url: str
    final_url: str
    hops: List[RedirectSignal] = field(default_factory=list)
    depth_exhausted: bool = False

    @property
    def redirected(self) -> bool:
        return self.url != self.final_url


class Resolver:
    """Resolve URLs through shorteners, tracking redirectors and redirect pages.

    A resolver holds no per-call state, so one instance may serve any number of
    concurrent ``resolve`` calls.
    """

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher

    async def resolve(self, url: str) -> str:
        """Return the final URL for ``url``.

        Raises ``ResolutionError`` with kind ``invalid-url`` before any network
        activity for malformed input, or ``fetch-failed`` when any fetch in the
        chain fails.
        """

        resolution = await self.trace(url)
        return resolution.final_url

    async def trace(self, url: str) -> Resolution:
        start_url = parse_absolute_url(url)
        resolution = Resolution(url=start_url, final_url=start_url)
        resolution.final_url = await self._resolve(start_url, start_url, 0, resolution)
        return resolution

    async def _resolve(self, url: str, origin_url: str, depth: int, resolution: Resolution) -> str:
        if depth > MAX_DEPTH:
            resolution.depth_exhausted = True
            return url

        result = await self.fetcher.fetch(url)
        final_url = result.final_url
        if not result.is_html:
            return final_url

        signal = select_signal(result.body or "", final_url, origin_url)
        if signal is None or signal.url in (url, final_url):
            return final_url

        resolution.hops.append(signal)
        return await self._resolve(signal.url, origin_url, depth + 1, resolution)


def create_client(config: Config, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=config.request_headers(),
        follow_redirects=True,
        max_redirects=config.max_transport_redirects,
        timeout=config.timeout,
        transport=transport,
    )


def create_resolver(client: httpx.AsyncClient, config: Config) -> Resolver:
    fetcher = Fetcher(client=client, timeout=config.timeout, headers=config.request_headers())
    return Resolver(fetcher)


async def resolve_url(
    url: str,
    config: Optional[Config] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """One-shot helper that opens and closes its own HTTP client."""

    config = config or Config()
    async with create_client(config, transport=transport) as client:
        return await create_resolver(client, config).resolve(url)


__all__ = [
    "MAX_DEPTH",
    "Resolution",
    "Resolver",
    "create_client",
    "create_resolver",
    "resolve_url",
]
