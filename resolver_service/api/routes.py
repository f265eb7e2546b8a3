"""FastAPI routes for the redirect resolver service."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from redirect_resolver.errors import ResolutionError, ResolutionErrorKind
from redirect_resolver.resolver import Resolver
from redirect_resolver.url_tools import parse_absolute_url, trim_to_base_domain

from ..config import Settings, get_settings
from ..monitoring.metrics import RESOLUTION_LATENCY, RESOLUTIONS_TOTAL

logger = logging.getLogger(__name__)

router = APIRouter()

USAGE = "GET /redirect?url=<url>"


def get_resolver(request: Request) -> Resolver:
    return request.app.state.resolver


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Redirect resolver service"
    usage: str = f"{USAGE} to resolve redirects"


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    logger.info("Health check requested")
    return HealthResponse()


class Hop(BaseModel):
    kind: str
    url: str


class RedirectResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_url: str = Field(..., alias="originalUrl")
    trimmed_url: str = Field(..., alias="trimmedUrl")
    final_url: str = Field(..., alias="finalUrl")
    redirected: bool
    hops: List[Hop] = Field(default_factory=list)


@router.get("/redirect", response_model=RedirectResponse)
async def resolve_redirect(
    url: Optional[str] = Query(None, description="URL to resolve"),
    trim: Optional[bool] = Query(None, description="Trim the URL to its base domain before resolving"),
    resolver: Resolver = Depends(get_resolver),
    settings: Settings = Depends(get_settings),
):
    logger.info("Redirect resolver called with URL: %s", url)

    if not url:
        logger.info("Rejected request without url parameter")
        RESOLUTIONS_TOTAL.labels(outcome="missing-url").inc()
        return JSONResponse(status_code=400, content={"error": "Missing url parameter", "usage": USAGE})

    try:
        parse_absolute_url(url)
        trimmed_url = trim_to_base_domain(url) if (settings.trim_input if trim is None else trim) else url
        logger.info("Trimmed URL: %s -> %s", url, trimmed_url)

        with RESOLUTION_LATENCY.time():
            resolution = await resolver.trace(trimmed_url)
    except ResolutionError as exc:
        logger.error("Error processing URL %s: %s", url, exc)
        RESOLUTIONS_TOTAL.labels(outcome=exc.kind.value).inc()
        if exc.kind is ResolutionErrorKind.INVALID_URL:
            return JSONResponse(status_code=400, content={"error": "Invalid URL format", "message": exc.message})
        return JSONResponse(status_code=500, content={"error": "Failed to resolve redirect", "message": exc.message})

    logger.info("Final resolved URL: %s", resolution.final_url)
    RESOLUTIONS_TOTAL.labels(outcome="resolved").inc()
    return RedirectResponse(
        original_url=url,
        trimmed_url=resolution.url,
        final_url=resolution.final_url,
        redirected=resolution.url != resolution.final_url,
        hops=[Hop(**hop.to_dict()) for hop in resolution.hops],
    )
