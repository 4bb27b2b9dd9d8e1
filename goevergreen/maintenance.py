# goevergreen/maintenance.py
"""Retention cleanup, run by an external scheduler (cron, platform trigger).

    python -m goevergreen.maintenance
"""
import asyncio
import logging

from goevergreen.config import settings
from goevergreen.database.connection import DatabaseConnection
from goevergreen.services.analytics_service import analytics_service

logger = logging.getLogger(__name__)

async def run_maintenance():
    logger.info(f"Maintenance started (retention: {settings.analytics_retention_days} days)")
    try:
        result = await analytics_service.cleanup(retention_days=settings.analytics_retention_days)
        if result.success:
            logger.info(f"Database cleanup completed: {result.data}")
        else:
            logger.error(f"Database cleanup failed: {result.error}")
    finally:
        await DatabaseConnection.close_pool()

def main():
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_maintenance())

if __name__ == "__main__":
    main()
