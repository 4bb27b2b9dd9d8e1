# goevergreen/routes/analytics.py
from fastapi import APIRouter, HTTPException, status
import logging

from goevergreen.config import settings
from goevergreen.services.analytics_service import analytics_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["analytics"])

@router.get("/api/analytics")
async def get_analytics():
    """Read-only summary of the last week's traffic"""
    summary = await analytics_service.get_summary(days=settings.analytics_summary_days)
    return {"success": True, "data": summary}

@router.api_route("/api/{resource:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def unknown_api_endpoint(resource: str):
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="API endpoint not found"
    )
