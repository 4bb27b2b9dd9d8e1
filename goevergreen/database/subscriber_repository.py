# goevergreen/database/subscriber_repository.py
from datetime import datetime, timezone
import logging

from goevergreen.database.connection import get_db_connection, release_db_connection
from goevergreen.database.results import StoreResult

logger = logging.getLogger(__name__)

class SubscriberRepository:
    """Newsletter subscribers, keyed by normalised email"""

    async def subscribe(self, email: str, name: str = "") -> StoreResult:
        """Insert or overwrite a subscriber; resubscribing clears the unsubscribed flag"""
        connection = None
        try:
            connection = await get_db_connection()

            subscriber_id = await connection.fetchval("""
                INSERT INTO newsletter_subscribers (email, name, subscribed_at, confirmed, unsubscribed)
                VALUES ($1, $2, $3, FALSE, FALSE)
                ON CONFLICT (email) DO UPDATE SET
                    name = EXCLUDED.name,
                    subscribed_at = EXCLUDED.subscribed_at,
                    confirmed = FALSE,
                    unsubscribed = FALSE
                RETURNING id
            """, email, name, datetime.now(timezone.utc))

            logger.info(f"Newsletter subscription stored: {email}")
            return StoreResult.ok({"id": subscriber_id})

        except Exception as e:
            logger.error(f"Newsletter subscription failed for {email}: {e}")
            return StoreResult.failed("Failed to subscribe")
        finally:
            if connection:
                await release_db_connection(connection)

    async def unsubscribe(self, email: str) -> StoreResult:
        connection = None
        try:
            connection = await get_db_connection()

            status = await connection.execute(
                "UPDATE newsletter_subscribers SET unsubscribed = TRUE WHERE email = $1",
                email
            )

            updated = int(status.split()[-1]) if status else 0
            logger.info(f"Newsletter unsubscribe for {email}: {updated} row(s)")
            return StoreResult.ok({"updated": updated})

        except Exception as e:
            logger.error(f"Newsletter unsubscribe failed for {email}: {e}")
            return StoreResult.failed("Failed to unsubscribe")
        finally:
            if connection:
                await release_db_connection(connection)

    async def get_subscriber_count(self) -> int:
        """Count of subscribers who have not unsubscribed"""
        connection = None
        try:
            connection = await get_db_connection()

            count = await connection.fetchval(
                "SELECT COUNT(*) FROM newsletter_subscribers WHERE unsubscribed = FALSE"
            )
            return count or 0

        except Exception as e:
            logger.error(f"Subscriber count failed: {e}")
            return 0
        finally:
            if connection:
                await release_db_connection(connection)

subscriber_repository = SubscriberRepository()
