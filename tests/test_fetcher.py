from __future__ import annotations

import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import requests

from auditor import fetcher
from auditor.config import BROWSER_HEADERS, REQUEST_TIMEOUT
from auditor.errors import ExtractionError, FetchError, FetchTimeoutError


@pytest.fixture()
def fake_get(monkeypatch: pytest.MonkeyPatch):
    calls: list[dict] = []

    def install(result):
        def _get(url, **kwargs):
            calls.append({"url": url, **kwargs})
            if isinstance(result, Exception):
                raise result
            return result

        monkeypatch.setattr(fetcher.requests, "get", _get)
        return calls

    return install


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("example.com", "https://example.com"),
        ("  example.com/shop ", "https://example.com/shop"),
        ("http://example.com", "http://example.com"),
        ("https://example.com", "https://example.com"),
        ("example.com:8080", "https://example.com:8080"),
        ("localhost:3000/shop", "https://localhost:3000/shop"),
    ],
)
def test_normalize_url(raw: str, expected: str) -> None:
    assert fetcher.normalize_url(raw) == expected


@pytest.mark.unit
def test_fetch_sends_browser_headers_and_timeout(fake_get, make_response, rich_html: str) -> None:
    calls = fake_get(make_response(text=rich_html))
    page = fetcher.fetch_page("example.com")
    assert page.html == rich_html
    assert calls[0]["url"] == "https://example.com"
    assert calls[0]["timeout"] == REQUEST_TIMEOUT == 20
    assert calls[0]["stream"] is True
    headers = calls[0]["headers"]
    assert headers is BROWSER_HEADERS
    for name in ("User-Agent", "Accept", "Accept-Language", "Sec-Fetch-Mode", "Referer"):
        assert name in headers


@pytest.mark.unit
def test_timeout_is_reported_as_timeout(fake_get) -> None:
    fake_get(requests.ReadTimeout("read timed out"))
    with pytest.raises(FetchTimeoutError, match="Timeout"):
        fetcher.fetch_page("https://slow.example.com")


@pytest.fixture()
def trickle_server():
    """Local server that sends a page a few bytes at a time for several seconds."""

    class TrickleHandler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.end_headers()
            try:
                for _ in range(30):
                    self.wfile.write(b"<p>" + b"a" * 43 + b"</p>")
                    self.wfile.flush()
                    time.sleep(0.2)
            except OSError:
                pass

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), TrickleHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/"
    server.shutdown()
    server.server_close()


@pytest.mark.unit
def test_slow_body_is_aborted_at_deadline(trickle_server: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(fetcher, "REQUEST_TIMEOUT", 1)
    start = time.monotonic()
    with pytest.raises(FetchTimeoutError, match="Timeout"):
        fetcher.fetch_page(trickle_server)
    assert time.monotonic() - start < 3


@pytest.mark.unit
def test_connection_failure_is_fetch_error(fake_get) -> None:
    fake_get(requests.ConnectionError("Name or service not known"))
    with pytest.raises(FetchError, match="Could not reach") as exc:
        fetcher.fetch_page("https://nowhere.invalid")
    assert not isinstance(exc.value, FetchTimeoutError)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status", "needle"),
    [
        (403, "blocked"),
        (429, "Rate-limited"),
        (400, "malformed"),
        (503, "HTTP 503 Service Unavailable"),
    ],
)
def test_http_status_classification(fake_get, make_response, status: int, needle: str) -> None:
    fake_get(make_response(status_code=status, text="x" * 500, reason="Service Unavailable"))
    with pytest.raises(FetchError) as exc:
        fetcher.fetch_page("https://example.com")
    assert needle in exc.value.message
    assert str(status) in exc.value.message
    assert exc.value.http_status == status
    assert exc.value.status_code == 400


@pytest.mark.unit
def test_short_body_is_rejected(fake_get, make_response) -> None:
    fake_get(make_response(text="<html>Just a moment...</html>"))
    with pytest.raises(FetchError, match="too little content"):
        fetcher.fetch_page("https://example.com")


@pytest.mark.unit
def test_fetch_content_runs_extraction(fake_get, make_response, rich_html: str) -> None:
    fake_get(make_response(text=rich_html))
    content = fetcher.fetch_content("example.com")
    assert "H1: Welcome to the demo shop" in content


@pytest.mark.unit
def test_empty_extraction_raises(fake_get, make_response) -> None:
    html = "<script>var a = 1;</script>" * 10
    fake_get(make_response(text=html))
    with pytest.raises(ExtractionError, match="No extractable content"):
        fetcher.fetch_content("example.com")


@pytest.mark.unit
def test_final_url_follows_redirects(fake_get, make_response, rich_html: str) -> None:
    fake_get(make_response(text=rich_html, url="https://www.example.com/home"))
    page = fetcher.fetch_page("example.com")
    assert page.url == "https://example.com"
    assert page.final_url == "https://www.example.com/home"
