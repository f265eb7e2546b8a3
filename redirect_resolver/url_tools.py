"""URL helper utilities."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlparse, urlsplit

from .errors import ResolutionError, ResolutionErrorKind

WEB_SCHEMES = {"http", "https"}


def parse_absolute_url(url: str) -> str:
    """Validate ``url`` as an absolute http(s) URL and return it stripped."""

    if not isinstance(url, str) or not url.strip():
        raise ResolutionError(ResolutionErrorKind.INVALID_URL, str(url), "empty URL")

    candidate = url.strip()
    try:
        parsed = urlsplit(candidate)
        hostname = parsed.hostname
        _ = parsed.port  # raises on a non-numeric port
    except ValueError as exc:
        raise ResolutionError(ResolutionErrorKind.INVALID_URL, candidate, cause=exc) from exc

    if parsed.scheme.lower() not in WEB_SCHEMES:
        raise ResolutionError(
            ResolutionErrorKind.INVALID_URL,
            candidate,
            f"unsupported scheme {parsed.scheme!r}" if parsed.scheme else "missing scheme",
        )
    if not hostname:
        raise ResolutionError(ResolutionErrorKind.INVALID_URL, candidate, "missing host")
    return candidate


def resolve_reference(reference: str, base_url: str) -> Optional[str]:
    """Resolve a possibly relative ``reference`` against ``base_url``.

    Returns ``None`` for empty references and for non-web schemes such as
    ``javascript:`` or ``mailto:``. Raises ``ResolutionError`` when the
    result is not a well-formed absolute URL.
    """

    reference = (reference or "").strip()
    if not reference or reference.startswith("#"):
        return None

    try:
        scheme = urlparse(reference).scheme.lower()
        if scheme and scheme not in WEB_SCHEMES:
            return None
        joined = urljoin(base_url, reference)
    except ValueError as exc:
        raise ResolutionError(ResolutionErrorKind.INVALID_URL, reference, cause=exc) from exc
    return parse_absolute_url(joined)


def domain_key(url: str) -> str:
    """Lowercase hostname of ``url`` with a leading ``www.`` label removed."""

    hostname = (urlsplit(url).hostname or "").lower()
    if hostname.startswith("www."):
        hostname = hostname[len("www."):]
    return hostname


def same_domain(first: str, second: str) -> bool:
    return domain_key(first) == domain_key(second)


def trim_to_base_domain(url: str) -> str:
    """Reduce ``url`` to ``scheme://hostname/``; unparseable input is returned as is."""

    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
    except ValueError:
        return url
    if not parsed.scheme or not hostname:
        return url
    if ":" in hostname:
        hostname = f"[{hostname}]"
    return f"{parsed.scheme}://{hostname}/"


__all__ = [
    "WEB_SCHEMES",
    "domain_key",
    "parse_absolute_url",
    "resolve_reference",
    "same_domain",
    "trim_to_base_domain",
]
