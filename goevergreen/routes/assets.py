# goevergreen/routes/assets.py
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import RedirectResponse

from goevergreen.config import settings

router = APIRouter(tags=["assets"])

ASSET_CACHE_HEADERS = {"Cache-Control": "public, max-age=86400"}

def _asset_locations():
    return {
        "logo.jpg": settings.logo_url,
        "favicon.ico": settings.favicon_url,
    }

@router.get("/favicon.ico")
async def favicon():
    return RedirectResponse(settings.favicon_url, status_code=status.HTTP_302_FOUND, headers=ASSET_CACHE_HEADERS)

@router.get("/assets/{asset_path:path}")
async def static_asset(asset_path: str):
    """Images live on an external host; everything else under /assets is missing"""
    location = _asset_locations().get(asset_path)
    if location is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found")
    return RedirectResponse(location, status_code=status.HTTP_302_FOUND, headers=ASSET_CACHE_HEADERS)
