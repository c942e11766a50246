import logging
import re
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import requests

from auditor.config import BROWSER_HEADERS, DOWNLOAD_CHUNK_SIZE, MIN_BODY_LENGTH, REQUEST_TIMEOUT
from auditor.errors import ExtractionError, FetchError, FetchTimeoutError
from auditor.extractor import extract_content

logger = logging.getLogger(__name__)

SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")

STATUS_MESSAGES = {
    400: "The site rejected the request as malformed (HTTP 400). Check that the URL is correct.",
    403: "Access blocked (HTTP 403): the site is protected by an anti-bot or firewall service.",
    429: "Rate-limited by the site (HTTP 429): too many requests, retry later.",
}

# Downloads run off the caller's thread so the deadline holds even while a
# socket read is blocked.
_executor = ThreadPoolExecutor(max_workers=8, thread_name_prefix="fetch")


class FetchResult:
    def __init__(self, url: str, response: requests.Response, html: str):
        self.url = url
        self.response = response
        self.final_url = response.url or url
        self.html = html
        self.elapsed_ms = int(response.elapsed.total_seconds() * 1000)


def normalize_url(url: str) -> str:
    url = url.strip()
    if not SCHEME_RE.match(url):
        url = f"https://{url}"
    return url


def _status_error(resp: requests.Response) -> FetchError:
    message = STATUS_MESSAGES.get(resp.status_code)
    if message is None:
        message = f"Could not fetch URL: HTTP {resp.status_code} {resp.reason or ''}".rstrip()
    return FetchError(message, http_status=resp.status_code)


def _timeout_error(url: str) -> FetchTimeoutError:
    return FetchTimeoutError(f"Timeout: {url} did not respond within {REQUEST_TIMEOUT} seconds")


def _decode(body: bytes, encoding: str | None) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _download(url: str, deadline: float) -> tuple[requests.Response, bytes]:
    with requests.get(
        url, headers=BROWSER_HEADERS, timeout=REQUEST_TIMEOUT, allow_redirects=True, stream=True,
    ) as resp:
        if not resp.ok:
            return resp, b""
        chunks: list[bytes] = []
        for chunk in resp.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise _timeout_error(url)
            chunks.append(chunk)
        return resp, b"".join(chunks)


def fetch_page(url: str) -> FetchResult:
    url = normalize_url(url)
    deadline = time.monotonic() + REQUEST_TIMEOUT
    future = _executor.submit(_download, url, deadline)
    try:
        resp, body = future.result(timeout=REQUEST_TIMEOUT)
    except FuturesTimeoutError as e:
        future.cancel()
        logger.warning("Fetch of %s aborted after %ss", url, REQUEST_TIMEOUT)
        raise _timeout_error(url) from e
    except requests.Timeout as e:
        raise _timeout_error(url) from e
    except requests.RequestException as e:
        raise FetchError(f"Could not reach {url}: {e}") from e

    if not resp.ok:
        logger.warning("Fetch of %s failed with HTTP %s", url, resp.status_code)
        raise _status_error(resp)

    result = FetchResult(url=url, response=resp, html=_decode(body, resp.encoding))
    if len(result.html) < MIN_BODY_LENGTH:
        raise FetchError(
            f"The page at {url} returned too little content ({len(result.html)} chars); "
            "it is probably an error or interstitial page."
        )
    logger.info("Fetched %s (%d chars in %dms)", result.final_url, len(result.html), result.elapsed_ms)
    return result


def fetch_content(url: str) -> str:
    """Fetch a page and reduce it to the text sent to the model."""
    page = fetch_page(url)
    content = extract_content(page.html)
    if not content.strip():
        raise ExtractionError(f"No extractable content found at {page.final_url}")
    return content
