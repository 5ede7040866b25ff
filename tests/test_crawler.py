# tests/test_crawler.py
import pytest
import requests

from services import crawler
from services.crawler import FetchError, fetch_html, resolve_url


def _response(status: int, text: str = "") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = "https://example.com"
    return resp


@pytest.mark.parametrize(
    "domain,url",
    [
        ("example.com", "https://example.com"),
        ("  example.com  ", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("https://example.com/a", "https://example.com/a"),
    ],
)
def test_resolve_url(domain, url):
    assert resolve_url(domain) == url


def test_fetch_returns_body_and_sends_user_agent(monkeypatch):
    seen = {}

    def fake_get(self, url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout, max_redirects=self.max_redirects)
        return _response(200, "<html></html>")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    assert fetch_html("https://example.com") == "<html></html>"
    assert seen["headers"]["User-Agent"] == crawler.settings.user_agent
    assert seen["timeout"] == crawler.settings.fetch_timeout
    assert seen["max_redirects"] == crawler.settings.max_redirects


def test_timeout_is_classified(monkeypatch):
    def fake_get(self, url, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://example.com", timeout=0.1)

    assert excinfo.value.kind == "timeout"
    assert excinfo.value.status_code is None
    assert excinfo.value.details == "Network error"


def test_http_error_carries_status(monkeypatch):
    monkeypatch.setattr(requests.Session, "get", lambda self, url, **kwargs: _response(503))

    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://example.com")

    assert excinfo.value.kind == "http"
    assert excinfo.value.status_code == 503
    assert excinfo.value.details == "HTTP 503"


def test_network_error_is_classified(monkeypatch):
    def fake_get(self, url, **kwargs):
        raise requests.ConnectionError("name resolution failed")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://nowhere.invalid")

    assert excinfo.value.kind == "network"


def test_too_many_redirects_is_network_error(monkeypatch):
    def fake_get(self, url, **kwargs):
        raise requests.TooManyRedirects("Exceeded 5 redirects.")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    with pytest.raises(FetchError) as excinfo:
        fetch_html("https://loop.example")

    assert excinfo.value.kind == "network"
