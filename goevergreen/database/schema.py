# goevergreen/database/schema.py
import logging
from goevergreen.database.connection import get_db_connection, release_db_connection

logger = logging.getLogger(__name__)

TABLES = [
    ("newsletter_subscribers", """
        CREATE TABLE IF NOT EXISTS newsletter_subscribers (
            id SERIAL PRIMARY KEY,
            email TEXT UNIQUE NOT NULL,
            name TEXT,
            subscribed_at TIMESTAMPTZ NOT NULL,
            confirmed BOOLEAN DEFAULT FALSE,
            unsubscribed BOOLEAN DEFAULT FALSE,
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        )
    """),
    ("contact_submissions", """
        CREATE TABLE IF NOT EXISTS contact_submissions (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            message TEXT NOT NULL,
            submitted_at TIMESTAMPTZ NOT NULL,
            status TEXT DEFAULT 'new',
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP
        )
    """),
    ("page_views", """
        CREATE TABLE IF NOT EXISTS page_views (
            id SERIAL PRIMARY KEY,
            path TEXT NOT NULL,
            user_agent TEXT,
            country TEXT,
            referrer TEXT,
            timestamp TIMESTAMPTZ NOT NULL,
            session_id TEXT
        )
    """),
    ("user_sessions", """
        CREATE TABLE IF NOT EXISTS user_sessions (
            id TEXT PRIMARY KEY,
            created_at TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
            last_activity TIMESTAMPTZ DEFAULT CURRENT_TIMESTAMP,
            page_count INTEGER DEFAULT 1,
            country TEXT,
            user_agent TEXT
        )
    """),
    ("conversions", """
        CREATE TABLE IF NOT EXISTS conversions (
            id SERIAL PRIMARY KEY,
            type TEXT NOT NULL,
            session_id TEXT,
            value DOUBLE PRECISION,
            timestamp TIMESTAMPTZ NOT NULL
        )
    """),
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_newsletter_email ON newsletter_subscribers(email)",
    "CREATE INDEX IF NOT EXISTS idx_newsletter_subscribed ON newsletter_subscribers(unsubscribed, confirmed)",
    "CREATE INDEX IF NOT EXISTS idx_contact_status ON contact_submissions(status)",
    "CREATE INDEX IF NOT EXISTS idx_contact_submitted ON contact_submissions(submitted_at)",
    "CREATE INDEX IF NOT EXISTS idx_pageviews_path ON page_views(path)",
    "CREATE INDEX IF NOT EXISTS idx_pageviews_timestamp ON page_views(timestamp)",
    "CREATE INDEX IF NOT EXISTS idx_pageviews_session ON page_views(session_id)",
    "CREATE INDEX IF NOT EXISTS idx_sessions_created ON user_sessions(created_at)",
    "CREATE INDEX IF NOT EXISTS idx_conversions_type ON conversions(type)",
    "CREATE INDEX IF NOT EXISTS idx_conversions_timestamp ON conversions(timestamp)",
]

async def init_database():
    """Create tables and indexes if they don't exist"""
    connection = None
    try:
        connection = await get_db_connection()

        for name, sql in TABLES:
            await connection.execute(sql)
            logger.info(f"Table {name} created/verified")

        for index_sql in INDEXES:
            await connection.execute(index_sql)

        logger.info("Database schema initialized")
    finally:
        if connection:
            await release_db_connection(connection)
