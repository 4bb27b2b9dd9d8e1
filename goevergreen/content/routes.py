# goevergreen/content/routes.py
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, status
import logging

from goevergreen.config import settings
from goevergreen.content.site_routes import is_passthrough_path, resolve_route
from goevergreen.services.analytics_service import analytics_service, build_page_visit
from goevergreen.services.page_service import PageService, get_page_service
from goevergreen.templates.layout import build_minimal_response, build_page_response

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Pages"])

async def render_passthrough(request: Request, page_service: PageService):
    """Administrative pages, proxied with their own markup and no caching"""
    upstream_html = await page_service.get_passthrough_html(request.url.path, request.url.query)
    if upstream_html is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="This page is temporarily unavailable. Please try again shortly."
        )
    return build_minimal_response(upstream_html)

@router.get("/{full_path:path}")
async def render_site_page(
    request: Request,
    background_tasks: BackgroundTasks,
    full_path: str,
    page_service: PageService = Depends(get_page_service)
):
    """Render any page path; unmapped paths get the home page content"""
    pathname = request.url.path

    try:
        if is_passthrough_path(pathname):
            return await render_passthrough(request, page_service)

        route = resolve_route(pathname)

        # Recorded after the response is sent; failures stay inside the task
        background_tasks.add_task(
            analytics_service.track_page_view,
            build_page_visit(request, pathname)
        )

        page = await page_service.get_page_content(route)
        return build_page_response(page, pathname, settings)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Page rendering failed for {pathname}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="We're having trouble loading this page. Please try again."
        )
