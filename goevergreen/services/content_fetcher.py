# goevergreen/services/content_fetcher.py
import asyncio
import logging
from typing import Optional

import httpx

from goevergreen.config import settings

logger = logging.getLogger(__name__)

class ContentFetcher:
    """Fetches raw page HTML from the WordPress.com origin"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 12.0,
        max_attempts: int = 2,
        backoff_seconds: float = 0.5,
        user_agent: str = "GoEvergreen-Proxy/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.backoff_seconds = backoff_seconds
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }
        self.transport = transport

    def build_url(self, slug: str) -> str:
        if not slug:
            return f"{self.base_url}/"
        return f"{self.base_url}/{slug.strip('/')}/"

    async def fetch_page(self, slug: str) -> Optional[str]:
        """Return the page HTML for an upstream slug, or None once every attempt has failed"""
        return await self._fetch(self.build_url(slug))

    async def fetch_path(self, path: str, query: str = "") -> Optional[str]:
        """Fetch an upstream path verbatim, used for passthrough pages"""
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{query}"
        return await self._fetch(url)

    async def _fetch(self, url: str) -> Optional[str]:
        for attempt in range(1, self.max_attempts + 1):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    headers=self.headers,
                    follow_redirects=True,
                    transport=self.transport
                ) as client:
                    # Whole-attempt deadline; httpx timeouts apply per read
                    response = await asyncio.wait_for(client.get(url), timeout=self.timeout)

                if response.is_success and response.text.strip():
                    return response.text

                if response.is_success:
                    logger.warning(f"Empty body from {url} (attempt {attempt}/{self.max_attempts})")
                else:
                    logger.warning(
                        f"Upstream returned {response.status_code} for {url} "
                        f"(attempt {attempt}/{self.max_attempts})"
                    )

            except (httpx.TimeoutException, asyncio.TimeoutError):
                logger.warning(f"Timed out fetching {url} (attempt {attempt}/{self.max_attempts})")
            except httpx.HTTPError as e:
                logger.warning(f"Fetch error for {url} (attempt {attempt}/{self.max_attempts}): {e}")
            except Exception as e:
                logger.error(f"Unexpected fetch failure for {url}: {e}")

            if attempt < self.max_attempts:
                await asyncio.sleep(self.backoff_seconds * attempt)

        logger.error(f"Giving up on {url} after {self.max_attempts} attempts")
        return None

content_fetcher = ContentFetcher(
    base_url=settings.wordpress_base_url,
    timeout=settings.fetch_timeout_seconds,
    max_attempts=settings.fetch_max_attempts,
    backoff_seconds=settings.fetch_backoff_seconds,
    user_agent=settings.proxy_user_agent
)
