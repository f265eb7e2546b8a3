from pathlib import Path

import pytest

from redirect_resolver.config import Config, load_config
from resolver_service.config import Settings


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("RR_TIMEOUT", "2.5")
    monkeypatch.setenv("RR_CONCURRENCY", "4")
    monkeypatch.setenv("RR_SUMMARY_JSON", "out/summary.json")

    config = load_config(env_file=None)

    assert config.timeout == 2.5
    assert config.concurrency == 4
    assert config.summary_json == Path("out/summary.json")


def test_load_config_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("RR_TIMEOUT", "0")
    with pytest.raises(ValueError):
        load_config(env_file=None)


def test_request_headers_look_like_a_browser():
    headers = Config().request_headers()
    assert set(headers) == {"User-Agent", "Accept", "Accept-Language"}
    assert "Mozilla" in headers["User-Agent"]


def test_load_config_rejects_zero_concurrency(monkeypatch):
    monkeypatch.setenv("RR_CONCURRENCY", "0")
    with pytest.raises(ValueError):
        load_config(env_file=None)


@pytest.mark.parametrize(
    "overrides",
    [{"timeout": 0}, {"timeout": -1.0}, {"concurrency": 0}, {"max_transport_redirects": -1}],
)
def test_validate_rejects_unusable_values(overrides):
    with pytest.raises(ValueError):
        Config(**overrides).validate()


def test_settings_build_resolver_config(monkeypatch):
    monkeypatch.setenv("RR_REQUEST_TIMEOUT_SECONDS", "3")
    settings = Settings()
    config = settings.resolver_config()
    assert config.timeout == 3.0
    assert config.user_agent == settings.user_agent
