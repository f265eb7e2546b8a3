"""HTML redirect signal detection.

Each matcher scans raw markup with targeted regular expressions and returns
the first raw reference it finds, or ``None``. ``select_signal`` applies the
fixed priority order (canonical link, meta refresh, script navigation) and
the cross-domain gates that decide whether a reference is worth following.
"""

from __future__ import annotations

import html as html_lib
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .url_tools import resolve_reference, same_domain

LINK_TAG_PATTERN = re.compile(r"<link\b[^>]*>", re.I)
META_TAG_PATTERN = re.compile(r"<meta\b[^>]*>", re.I)
ATTRIBUTE_PATTERN = re.compile(
    r"""([^\s"'<>/=]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""",
    re.S,
)
REFRESH_URL_PATTERN = re.compile(
    r"""^\s*[\d.]*\s*[;,]?\s*url\s*=\s*(['"]?)(.*?)\1\s*$""",
    re.I | re.S,
)

# A literal continued with "+" is only a prefix of a URL built at runtime and
# is never a navigation target.
SCRIPT_NAVIGATION_PATTERNS = [
    re.compile(r"""window\.location\s*=\s*(["'])((?:(?!\1).)+)\1(?!\s*\+)""", re.I),
    re.compile(r"""window\.location\.href\s*=\s*(["'])((?:(?!\1).)+)\1(?!\s*\+)""", re.I),
    re.compile(r"""location\.replace\(\s*(["'])((?:(?!\1).)+)\1\s*\)""", re.I),
]


class SignalKind(str, Enum):
    CANONICAL_LINK = "canonical-link"
    META_REFRESH = "meta-refresh"
    SCRIPT_NAVIGATION = "script-navigation"


@dataclass
class RedirectSignal:
    kind: SignalKind
    reference: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "url": self.url}


def parse_attributes(tag: str) -> Dict[str, str]:
    """Return lowercased attribute names mapped to unescaped values."""

    attributes: Dict[str, str] = {}
    for name, double_quoted, single_quoted, bare in ATTRIBUTE_PATTERN.findall(tag):
        value = double_quoted or single_quoted or bare
        attributes.setdefault(name.lower(), html_lib.unescape(value))
    return attributes


def find_canonical_link(html: str) -> Optional[str]:
    for match in LINK_TAG_PATTERN.finditer(html):
        attributes = parse_attributes(match.group(0))
        rel_values = attributes.get("rel", "").lower().split()
        if "canonical" in rel_values and attributes.get("href", "").strip():
            return attributes["href"].strip()
    return None


def find_meta_refresh(html: str) -> Optional[str]:
    for match in META_TAG_PATTERN.finditer(html):
        attributes = parse_attributes(match.group(0))
        if attributes.get("http-equiv", "").strip().lower() != "refresh":
            continue
        refresh = REFRESH_URL_PATTERN.match(attributes.get("content", ""))
        if refresh and refresh.group(2).strip():
            return refresh.group(2).strip()
    return None


def find_script_navigation(html: str) -> Optional[str]:
    for pattern in SCRIPT_NAVIGATION_PATTERNS:
        match = pattern.search(html)
        if match:
            return match.group(2).strip()
    return None


def _canonical_applies(url: str, final_url: str, origin_url: str) -> bool:
    # Same-site canonicals are informational; skip the origin's domain as well
    return not same_domain(url, final_url) and not same_domain(url, origin_url)


def _meta_refresh_applies(url: str, final_url: str, origin_url: str) -> bool:
    return True


def _script_navigation_applies(url: str, final_url: str, origin_url: str) -> bool:
    return not same_domain(url, final_url)


MATCHERS: List[Tuple[SignalKind, Callable[[str], Optional[str]], Callable[[str, str, str], bool]]] = [
    (SignalKind.CANONICAL_LINK, find_canonical_link, _canonical_applies),
    (SignalKind.META_REFRESH, find_meta_refresh, _meta_refresh_applies),
    (SignalKind.SCRIPT_NAVIGATION, find_script_navigation, _script_navigation_applies),
]


def select_signal(html: str, final_url: str, origin_url: str) -> Optional[RedirectSignal]:
    """Return the first signal in priority order that passes its gate.

    References are resolved against ``final_url``. ``origin_url`` is the URL
    the whole resolution started from.
    """

    if not html:
        return None
    for kind, matcher, applies in MATCHERS:
        reference = matcher(html)
        if reference is None:
            continue
        url = resolve_reference(reference, final_url)
        if url is None:
            continue
        if applies(url, final_url, origin_url):
            return RedirectSignal(kind=kind, reference=reference, url=url)
    return None


__all__ = [
    "MATCHERS",
    "RedirectSignal",
    "SignalKind",
    "find_canonical_link",
    "find_meta_refresh",
    "find_script_navigation",
    "parse_attributes",
    "select_signal",
]
