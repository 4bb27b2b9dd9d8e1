# goevergreen/services/page_service.py
import logging
from typing import Optional

from goevergreen.content.fallback import get_fallback_content
from goevergreen.content.site_routes import SiteRoute
from goevergreen.models.pages import PageContent
from goevergreen.services.content_extractor import ContentExtractor, content_extractor
from goevergreen.services.content_fetcher import ContentFetcher, content_fetcher

logger = logging.getLogger(__name__)

class PageService:
    """Live WordPress content for a route, falling back to static content"""

    def __init__(self, fetcher: ContentFetcher, extractor: ContentExtractor):
        self.fetcher = fetcher
        self.extractor = extractor

    async def get_page_content(self, route: SiteRoute) -> PageContent:
        html = await self.fetcher.fetch_page(route.upstream_slug)
        if html is None:
            logger.warning(f"Serving fallback content for '{route.name}': upstream unavailable")
            return get_fallback_content(route.name)

        extracted = self.extractor.extract(html, route.name)
        if extracted is None:
            logger.warning(f"Serving fallback content for '{route.name}': extraction insufficient")
            return get_fallback_content(route.name)

        return extracted

    async def get_passthrough_html(self, path: str, query: str = "") -> Optional[str]:
        return await self.fetcher.fetch_path(path, query)

page_service = PageService(content_fetcher, content_extractor)

def get_page_service() -> PageService:
    return page_service
