"""
Remote document fetching service.

This module retrieves HTML documents over HTTP(S) with requests, applying
the configured timeout, size limit and User-Agent.
"""

from dataclasses import dataclass
from urllib.parse import urlparse

import requests
from loguru import logger

from app.config import Settings, get_settings
from app.exceptions import (
    ContentTooLargeError,
    FetchError,
    FetchTimeoutError,
    InvalidURLError,
    UpstreamStatusError,
)

ALLOWED_SCHEMES = ("http", "https")
CHUNK_SIZE = 64 * 1024


@dataclass
class FetchedDocument:
    """A document retrieved from a remote server."""

    url: str
    status_code: int
    content: bytes
    encoding: str | None
    content_type: str


def validate_url(url: str) -> str:
    """
    Check that ``url`` is an absolute http(s) URL.

    Returns:
        The stripped URL

    Raises:
        InvalidURLError: If the URL is malformed or uses another scheme
    """
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"Invalid URL: {url!r} (only http and https are supported)", url)
    if not parsed.netloc:
        raise InvalidURLError(f"Invalid URL: {url!r} (missing host)", url)
    return url


def declared_charset(response: requests.Response) -> str | None:
    """Return the charset named in the Content-Type header, if any."""
    content_type = response.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower():
        return None
    return response.encoding


class HTMLFetcher:
    """Service for retrieving remote HTML documents."""

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            settings: Application settings (timeout, size limit, User-Agent)
            session: requests session to reuse (a new one is created if omitted)
        """
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = self.settings.USER_AGENT

    def fetch(self, url: str) -> FetchedDocument:
        """
        Fetch a remote document.

        Args:
            url: Absolute http(s) URL

        Returns:
            FetchedDocument with the raw body and declared charset

        Raises:
            InvalidURLError: If the URL is not an absolute http(s) URL
            FetchTimeoutError: If the server does not answer in time
            UpstreamStatusError: If the server answers with an error status
            ContentTooLargeError: If the body exceeds MAX_CONTENT_LENGTH
            FetchError: For any other transport failure
        """
        url = validate_url(url)
        timeout = self.settings.FETCH_TIMEOUT
        limit = self.settings.MAX_CONTENT_LENGTH

        logger.info(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=timeout, allow_redirects=True, stream=True)
        except requests.exceptions.Timeout as exc:
            logger.warning(f"Timed out fetching {url}: {exc}")
            raise FetchTimeoutError(url, timeout) from exc
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema) as exc:
            raise InvalidURLError(f"Invalid URL: {url!r}", url) from exc
        except requests.exceptions.RequestException as exc:
            logger.warning(f"Failed to fetch {url}: {exc}")
            raise FetchError(f"Request to {url} failed: {exc}", url) from exc

        try:
            if not response.ok:
                logger.warning(f"Upstream {url} answered {response.status_code}")
                raise UpstreamStatusError(url, response.status_code)

            content = self._read_body(response, url, limit)
        finally:
            response.close()

        document = FetchedDocument(
            url=response.url or url,
            status_code=response.status_code,
            content=content,
            encoding=declared_charset(response),
            content_type=response.headers.get("Content-Type", ""),
        )
        logger.debug(
            f"Fetched {document.url}: {len(content)} bytes, "
            f"type={document.content_type!r}, charset={document.encoding}"
        )
        return document

    def _read_body(self, response: requests.Response, url: str, limit: int) -> bytes:
        """Read a streamed body, stopping as soon as it exceeds ``limit`` bytes."""
        declared_length = response.headers.get("Content-Length", "")
        if declared_length.isdigit() and int(declared_length) > limit:
            raise ContentTooLargeError(url, int(declared_length), limit)

        chunks: list[bytes] = []
        received = 0
        try:
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                received += len(chunk)
                if received > limit:
                    raise ContentTooLargeError(url, received, limit)
                chunks.append(chunk)
        except requests.exceptions.Timeout as exc:
            raise FetchTimeoutError(url, self.settings.FETCH_TIMEOUT) from exc
        except requests.exceptions.RequestException as exc:
            raise FetchError(f"Reading response from {url} failed: {exc}", url) from exc
        return b"".join(chunks)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
