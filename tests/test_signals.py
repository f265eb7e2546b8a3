import pathlib

from redirect_resolver import signals
from redirect_resolver.signals import SignalKind

FIXTURE = pathlib.Path(__file__).parent / "fixtures" / "redirect_page.html"


def test_matchers_extract_raw_references_from_page():
    html = FIXTURE.read_text()
    assert signals.find_canonical_link(html) == "https://www.site.example/start"
    assert signals.find_meta_refresh(html) == "https://landing.example/welcome?ref=a&b=c"
    assert signals.find_script_navigation(html) == "https://tracker.example/out"


def test_select_signal_skips_same_site_canonical():
    html = FIXTURE.read_text()
    signal = signals.select_signal(html, "https://site.example/start", "https://short.example/x")
    assert signal is not None
    assert signal.kind is SignalKind.META_REFRESH
    assert signal.url == "https://landing.example/welcome?ref=a&b=c"


def test_canonical_requires_rel_canonical():
    html = '<link rel="alternate" href="https://m.example/"><link rel="stylesheet" href="/a.css">'
    assert signals.find_canonical_link(html) is None


def test_canonical_with_unquoted_attributes():
    assert signals.find_canonical_link("<LINK rel=canonical href=https://x.example/p>") == "https://x.example/p"


def test_meta_refresh_without_url_is_ignored():
    assert signals.find_meta_refresh('<meta http-equiv="refresh" content="30">') is None


def test_meta_refresh_variants():
    assert signals.find_meta_refresh("<meta http-equiv=refresh content='0;URL=/next'>") == "/next"
    assert signals.find_meta_refresh('<meta http-equiv="refresh" content="5 ; url = \'https://a.example/\'">') == "https://a.example/"


def test_script_navigation_patterns():
    assert signals.find_script_navigation('window.location = "https://a.example/"') == "https://a.example/"
    assert signals.find_script_navigation("window.location.href='/b'") == "/b"
    assert signals.find_script_navigation('window.location.replace("https://c.example/")') == "https://c.example/"
    assert signals.find_script_navigation('if (window.location == "x") {}') is None


def test_script_navigation_pattern_order():
    html = 'location.replace("https://later.example/"); window.location = "https://first.example/";'
    assert signals.find_script_navigation(html) == "https://first.example/"


def test_non_web_references_are_skipped():
    html = '<link rel="canonical" href="javascript:void(0)"><script>window.location="https://b.example/"</script>'
    signal = signals.select_signal(html, "https://a.example/", "https://a.example/")
    assert signal is not None
    assert signal.kind is SignalKind.SCRIPT_NAVIGATION


def test_select_signal_without_matches():
    assert signals.select_signal("", "https://a.example/", "https://a.example/") is None
    assert signals.select_signal("<p>plain</p>", "https://a.example/", "https://a.example/") is None


def test_script_navigation_gate_ignores_origin():
    html = "<script>window.location.href = 'https://origin.example/home';</script>"
    signal = signals.select_signal(html, "https://hop.example/", "https://origin.example/start")
    assert signal is not None
    assert signal.url == "https://origin.example/home"


def test_concatenated_script_literals_are_not_references():
    assert signals.find_script_navigation("window.location = 'http://' + host + '/x';") is None
    assert signals.find_script_navigation('window.location.href = "https://" + host;') is None
    html = "window.location = 'http://' + host; location.replace('https://c.example/');"
    assert signals.find_script_navigation(html) == "https://c.example/"
