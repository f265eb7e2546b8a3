"""Monitoring helpers."""

from .metrics import RESOLUTION_LATENCY, RESOLUTIONS_TOTAL, metrics_router

__all__ = ["RESOLUTION_LATENCY", "RESOLUTIONS_TOTAL", "metrics_router"]
