# goevergreen/database/contact_repository.py
from datetime import datetime, timezone
import logging

from goevergreen.database.connection import get_db_connection, release_db_connection
from goevergreen.database.results import StoreResult

logger = logging.getLogger(__name__)

class ContactRepository:
    async def save_contact_submission(self, name: str, email: str, message: str) -> StoreResult:
        """Append a contact form submission with status 'new'"""
        connection = None
        try:
            connection = await get_db_connection()

            submission_id = await connection.fetchval("""
                INSERT INTO contact_submissions (name, email, message, submitted_at, status)
                VALUES ($1, $2, $3, $4, 'new')
                RETURNING id
            """, name, email, message, datetime.now(timezone.utc))

            logger.info(f"Contact submission stored from {email}")
            return StoreResult.ok({"id": submission_id})

        except Exception as e:
            logger.error(f"Contact form save failed for {email}: {e}")
            return StoreResult.failed("Failed to save submission")
        finally:
            if connection:
                await release_db_connection(connection)

contact_repository = ContactRepository()
