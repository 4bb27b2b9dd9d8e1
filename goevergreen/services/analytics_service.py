# goevergreen/services/analytics_service.py
"""Privacy-friendly visit analytics.

Sessions are not cookies: the id is a hash of client address, user agent and
UTC calendar day. Visitors sharing an address and browser on the same day
collapse into one session, and the same visitor gets a new id every day.
"""
import hashlib
import logging
from datetime import date, datetime, timezone
from typing import Optional, Dict, Any

from fastapi import Request

from goevergreen.database.analytics_repository import analytics_repository
from goevergreen.database.subscriber_repository import subscriber_repository
from goevergreen.models.pages import PageVisit

logger = logging.getLogger(__name__)

SESSION_ID_LENGTH = 32

def derive_session_id(client_address: str, user_agent: str, day: date) -> str:
    session_string = f"{client_address}-{user_agent}-{day.isoformat()}"
    return hashlib.sha256(session_string.encode("utf-8")).hexdigest()[:SESSION_ID_LENGTH]

def get_client_address(request: Request) -> str:
    address = request.headers.get("CF-Connecting-IP")
    if address:
        return address.strip()

    if request.client and request.client.host:
        return request.client.host
    return "unknown"

def build_page_visit(request: Request, path: str, now: Optional[datetime] = None) -> PageVisit:
    """Capture what the background recorder needs while the request is still alive"""
    timestamp = now or datetime.now(timezone.utc)
    client_address = get_client_address(request)
    user_agent = request.headers.get("User-Agent", "")

    return PageVisit(
        path=path,
        client_address=client_address,
        user_agent=user_agent,
        country=request.headers.get("CF-IPCountry") or "Unknown",
        referrer=request.headers.get("Referer", ""),
        timestamp=timestamp,
        session_id=derive_session_id(client_address, user_agent or "unknown", timestamp.date())
    )

class AnalyticsService:
    async def track_page_view(self, visit: PageVisit) -> None:
        """Background task body: record a visit, never raise"""
        try:
            result = await analytics_repository.record_page_view(visit)
            if result.success:
                logger.info(f"Page view tracked: {visit.path} ({visit.country})")
        except Exception as e:
            logger.error(f"Analytics tracking error for {visit.path}: {e}")

    async def track_conversion(
        self,
        conversion_type: str,
        session_id: Optional[str] = None,
        value: Optional[float] = None
    ) -> None:
        try:
            await analytics_repository.record_conversion(conversion_type, session_id, value)
        except Exception as e:
            logger.error(f"Conversion tracking error for {conversion_type}: {e}")

    async def get_summary(self, days: int = 7) -> Dict[str, Any]:
        summary = await analytics_repository.get_analytics_summary(days=days)
        summary["active_subscribers"] = await subscriber_repository.get_subscriber_count()
        return summary

    async def cleanup(self, retention_days: int = 90):
        return await analytics_repository.cleanup_old_rows(retention_days=retention_days)

analytics_service = AnalyticsService()
