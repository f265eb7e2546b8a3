"""Redirect Resolver package."""

__all__ = [
    "config",
    "errors",
    "fetcher",
    "logging_utils",
    "resolver",
    "signals",
    "storage",
    "url_tools",
]

__version__ = "0.1.0"
