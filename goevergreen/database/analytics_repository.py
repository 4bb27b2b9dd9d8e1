# goevergreen/database/analytics_repository.py
from datetime import datetime, timezone, timedelta
from typing import Optional, List, Dict, Any
import logging

from goevergreen.database.connection import get_db_connection, release_db_connection
from goevergreen.database.results import StoreResult
from goevergreen.models.pages import PageVisit

logger = logging.getLogger(__name__)

class AnalyticsRepository:
    """Page views, anonymous daily sessions and conversions"""

    async def record_page_view(self, visit: PageVisit) -> StoreResult:
        """Upsert the visit's session, then append the page view.

        The two writes are issued one after the other without a transaction;
        a failed session upsert does not prevent the page view insert.
        """
        connection = None
        try:
            connection = await get_db_connection()

            session_stored = True
            try:
                await connection.execute("""
                    INSERT INTO user_sessions (id, created_at, last_activity, page_count, country, user_agent)
                    VALUES ($1, $2, $2, 1, $3, $4)
                    ON CONFLICT (id) DO UPDATE SET
                        last_activity = EXCLUDED.last_activity,
                        page_count = user_sessions.page_count + 1
                """, visit.session_id, visit.timestamp, visit.country, visit.user_agent)
            except Exception as e:
                session_stored = False
                logger.error(f"Session update failed for {visit.session_id}: {e}")

            await connection.execute("""
                INSERT INTO page_views (path, user_agent, country, referrer, timestamp, session_id)
                VALUES ($1, $2, $3, $4, $5, $6)
            """, visit.path, visit.user_agent, visit.country, visit.referrer,
                visit.timestamp, visit.session_id)

            logger.debug(f"Page view recorded: {visit.path} ({visit.country})")
            return StoreResult.ok({"session_stored": session_stored})

        except Exception as e:
            logger.error(f"Page view recording failed for {visit.path}: {e}")
            return StoreResult.failed("Failed to record page view")
        finally:
            if connection:
                await release_db_connection(connection)

    async def record_conversion(
        self,
        conversion_type: str,
        session_id: Optional[str] = None,
        value: Optional[float] = None
    ) -> StoreResult:
        connection = None
        try:
            connection = await get_db_connection()

            await connection.execute("""
                INSERT INTO conversions (type, session_id, value, timestamp)
                VALUES ($1, $2, $3, $4)
            """, conversion_type, session_id, value, datetime.now(timezone.utc))

            logger.info(f"Conversion recorded: {conversion_type}")
            return StoreResult.ok()

        except Exception as e:
            logger.error(f"Conversion recording failed for {conversion_type}: {e}")
            return StoreResult.failed("Failed to record conversion")
        finally:
            if connection:
                await release_db_connection(connection)

    async def get_page_view_stats(self, days: int = 7, limit: int = 10) -> List[Dict[str, Any]]:
        """Views per path over the last `days` days, busiest first"""
        connection = None
        try:
            connection = await get_db_connection()

            since = datetime.now(timezone.utc) - timedelta(days=days)
            rows = await connection.fetch("""
                SELECT
                    path,
                    COUNT(*) as views,
                    COUNT(DISTINCT session_id) as unique_views,
                    COUNT(DISTINCT country) as countries
                FROM page_views
                WHERE timestamp > $1
                GROUP BY path
                ORDER BY views DESC
                LIMIT $2
            """, since, limit)

            return [dict(row) for row in rows]

        except Exception as e:
            logger.error(f"Page view stats query failed: {e}")
            return []
        finally:
            if connection:
                await release_db_connection(connection)

    async def get_analytics_summary(self, days: int = 7) -> Dict[str, Any]:
        summary = {
            "total_page_views": 0,
            "unique_visitors": 0,
            "top_pages": [],
            "top_countries": [],
            "period": f"{days} days",
        }

        connection = None
        try:
            connection = await get_db_connection()

            since = datetime.now(timezone.utc) - timedelta(days=days)
            totals = await connection.fetchrow("""
                SELECT COUNT(*) as total_page_views, COUNT(DISTINCT session_id) as unique_visitors
                FROM page_views
                WHERE timestamp > $1
            """, since)

            countries = await connection.fetch("""
                SELECT country, COUNT(*) as views, COUNT(DISTINCT session_id) as unique_visitors
                FROM page_views
                WHERE timestamp > $1 AND country != 'Unknown'
                GROUP BY country
                ORDER BY views DESC
                LIMIT 10
            """, since)

            summary["total_page_views"] = totals["total_page_views"] or 0
            summary["unique_visitors"] = totals["unique_visitors"] or 0
            summary["top_countries"] = [dict(row) for row in countries]

        except Exception as e:
            logger.error(f"Analytics summary failed: {e}")
            return summary
        finally:
            if connection:
                await release_db_connection(connection)

        summary["top_pages"] = await self.get_page_view_stats(days=days)
        return summary

    async def cleanup_old_rows(
        self,
        retention_days: int = 90,
        now: Optional[datetime] = None
    ) -> StoreResult:
        """Delete page views and sessions older than the retention window"""
        connection = None
        try:
            connection = await get_db_connection()

            cutoff = (now or datetime.now(timezone.utc)) - timedelta(days=retention_days)

            views_status = await connection.execute(
                "DELETE FROM page_views WHERE timestamp < $1", cutoff
            )
            sessions_status = await connection.execute(
                "DELETE FROM user_sessions WHERE created_at < $1", cutoff
            )

            deleted = {
                "page_views": _affected_rows(views_status),
                "user_sessions": _affected_rows(sessions_status),
            }
            logger.info(f"Analytics cleanup before {cutoff.isoformat()}: {deleted}")
            return StoreResult.ok(deleted)

        except Exception as e:
            logger.error(f"Analytics cleanup failed: {e}")
            return StoreResult.failed("Cleanup failed")
        finally:
            if connection:
                await release_db_connection(connection)

def _affected_rows(status: Optional[str]) -> int:
    # asyncpg returns command tags such as "DELETE 12"
    try:
        return int(status.split()[-1])
    except (AttributeError, IndexError, ValueError):
        return 0

analytics_repository = AnalyticsRepository()
