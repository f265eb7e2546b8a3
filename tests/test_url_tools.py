import pytest

from redirect_resolver.errors import ResolutionError, ResolutionErrorKind
from redirect_resolver.url_tools import (
    domain_key,
    parse_absolute_url,
    resolve_reference,
    same_domain,
    trim_to_base_domain,
)


def test_domain_key_strips_www_and_case():
    assert domain_key("https://WWW.Example.COM/path") == "example.com"
    assert domain_key("http://www2.example.com/") == "www2.example.com"
    assert domain_key("https://www.www.example.com/") == "www.example.com"


def test_same_domain_ignores_scheme_and_port():
    assert same_domain("http://example.com:8080/a", "https://www.example.com/b")
    assert not same_domain("https://example.com/", "https://shop.example.com/")


def test_parse_absolute_url_strips_whitespace():
    assert parse_absolute_url("  https://example.com/a  ") == "https://example.com/a"


@pytest.mark.parametrize("url", ["example.com", "mailto:a@example.com", "http:///path", "https://[::1/"])
def test_parse_absolute_url_rejects(url):
    with pytest.raises(ResolutionError) as excinfo:
        parse_absolute_url(url)
    assert excinfo.value.kind is ResolutionErrorKind.INVALID_URL


def test_resolve_reference():
    base = "https://site.example/dir/page"
    assert resolve_reference("/next", base) == "https://site.example/next"
    assert resolve_reference("other", base) == "https://site.example/dir/other"
    assert resolve_reference("//cdn.example/x", base) == "https://cdn.example/x"
    assert resolve_reference("https://a.example/", base) == "https://a.example/"


@pytest.mark.parametrize("reference", ["", "   ", "#top", "javascript:void(0)", "mailto:x@example.com", "data:text/html,hi"])
def test_resolve_reference_ignores_non_navigations(reference):
    assert resolve_reference(reference, "https://site.example/") is None


def test_trim_to_base_domain():
    assert trim_to_base_domain("https://www.example.com/path?q=1#f") == "https://www.example.com/"
    assert trim_to_base_domain("http://example.com:8080/x") == "http://example.com/"
    assert trim_to_base_domain("not a url") == "not a url"
