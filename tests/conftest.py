from __future__ import annotations

from datetime import timedelta

import pytest
import requests

VALID_PAYLOAD = '{"defects":[],"passedTests":[],"testScript":""}'


class FakeBackend:
    """Scripted backend: each model id maps to a reply string or an exception."""

    def __init__(self, replies: dict[str, object]):
        self.replies = replies
        self.calls: list[str] = []

    def generate(self, model_id: str, prompt: str) -> str:
        self.calls.append(model_id)
        reply = self.replies[model_id]
        if isinstance(reply, Exception):
            raise reply
        return reply


def _make_response(status_code: int = 200, text: str = "", url: str = "https://example.com/", reason: str = "OK") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = text.encode("utf-8")
    resp._content_consumed = True
    resp.encoding = "utf-8"
    resp.url = url
    resp.reason = reason
    resp.elapsed = timedelta(milliseconds=120)
    return resp


@pytest.fixture()
def make_response():
    return _make_response


@pytest.fixture()
def fake_backend():
    return FakeBackend


@pytest.fixture()
def valid_payload() -> str:
    return VALID_PAYLOAD


@pytest.fixture()
def rich_html() -> str:
    scripts = "\n".join(f"<script>var tracker{i} = 'id-{i}';</script>" for i in range(15))
    links = "\n".join(f'<a href="/page-{i}">Page number {i}</a>' for i in range(80))
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="description" content="Checkout demo shop">
  <script>{"x" * 2500}</script>
  {scripts}
  <style>body {{ color: red; }}</style>
</head>
<body>
  <h1>Welcome to the demo shop</h1>
  <p>Buy our products with confidence and free shipping.</p>
  <p>ok</p>
  <form action="/login" method="post">
    <label>Email address</label>
    <input type="email" name="email">
    <input type="password" name="password">
    <button>Sign in now</button>
  </form>
  <a href="/empty"><img src="logo.png"></a>
  {links}
</body>
</html>"""


@pytest.fixture()
def sparse_html() -> str:
    return """<html><head><style>.a { color: blue; }</style>
<script>console.log('hidden');</script></head>
<body><!-- internal note: admin panel at /secret -->
<div>Hi</div><span>tiny page content that is only here to pass the minimum body length</span>
</body></html>"""
