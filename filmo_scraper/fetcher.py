"""HTTP page fetcher with a fixed locale header, domain allow-list and rate limiting."""

import logging
import time
from typing import Optional
from urllib.parse import urlparse

import httpx

from .config import FetchConfig
from .errors import TransportError
from .page import Page

logger = logging.getLogger("filmo_scraper")


class Fetcher:
    def __init__(self, config: FetchConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport
        self._last_request_time: float = 0
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.config.timeout, connect=30),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.config.user_agent,
            "Accept-Language": self.config.accept_language,
        }

    def close(self):
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def rate_limit(self):
        elapsed = time.time() - self._last_request_time
        if elapsed < self.config.rate_limit:
            time.sleep(self.config.rate_limit - elapsed)
        self._last_request_time = time.time()

    def check_domain(self, url: str):
        host = urlparse(url).hostname or ""
        allowed = self.config.allowed_domains
        if allowed and host not in allowed:
            raise TransportError(url, f"domain '{host}' is not allowed")

    def fetch(self, url: str) -> Page:
        """Fetch an HTML page. Raises TransportError on any failure."""
        self.check_domain(url)
        self.rate_limit()
        logger.info(f"Visiting {url}")

        try:
            # Headers are set per request so every page carries the locale preference
            resp = self.client.get(url, headers=self.headers)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

        return Page(str(resp.url), resp.text)
