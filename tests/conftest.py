import asyncio
from typing import Callable, Dict, List, Optional, Type

import httpx
import pytest

from redirect_resolver.config import Config
from redirect_resolver.resolver import Resolution, create_client, create_resolver


class FakeWeb:
    """In-memory set of pages served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.pages: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[str] = []

    def html(self, url: str, body: str, status_code: int = 200) -> None:
        self.pages[url] = lambda request: httpx.Response(
            status_code,
            headers={"content-type": "text/html; charset=utf-8"},
            text=body,
        )

    def content(self, url: str, content_type: str, body: bytes = b"") -> None:
        self.pages[url] = lambda request: httpx.Response(200, headers={"content-type": content_type}, content=body)

    def redirect(self, url: str, location: str, status_code: int = 302) -> None:
        self.pages[url] = lambda request: httpx.Response(status_code, headers={"location": location})

    def fail(self, url: str, error: Type[httpx.HTTPError] = httpx.ConnectError) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error(f"cannot reach {request.url.host}", request=request)

        self.pages[url] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        page = self.pages.get(url)
        if page is None:
            return httpx.Response(404, headers={"content-type": "text/plain"}, text="not found")
        return page(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def page_with(head: str = "", body: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body>{body}</body></html>"


@pytest.fixture
def web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def trace(web: FakeWeb) -> Callable[[str], Resolution]:
    def run(url: str, config: Optional[Config] = None) -> Resolution:
        config = config or Config()

        async def go() -> Resolution:
            async with create_client(config, transport=web.transport()) as client:
                return await create_resolver(client, config).trace(url)

        return asyncio.run(go())

    return run
