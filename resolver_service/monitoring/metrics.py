"""Prometheus metrics and monitoring utilities."""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

RESOLUTIONS_TOTAL = Counter(
    "redirect_resolver_resolutions_total",
    "Resolutions by outcome",
    ["outcome"],
)
RESOLUTION_LATENCY = Histogram(
    "redirect_resolver_resolution_latency_seconds",
    "Wall time of a full resolution, all hops included",
)

metrics_router = APIRouter()


@metrics_router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


__all__ = ["RESOLUTIONS_TOTAL", "RESOLUTION_LATENCY", "metrics_router"]
