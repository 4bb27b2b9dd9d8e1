# goevergreen/database/__init__.py
from .connection import get_db_connection, release_db_connection, DatabaseConnection, DatabaseUnavailableError
from .results import StoreResult
from .subscriber_repository import SubscriberRepository, subscriber_repository
from .contact_repository import ContactRepository, contact_repository
from .analytics_repository import AnalyticsRepository, analytics_repository

__all__ = [
    "get_db_connection",
    "release_db_connection",
    "DatabaseConnection",
    "DatabaseUnavailableError",
    "StoreResult",
    "SubscriberRepository",
    "subscriber_repository",
    "ContactRepository",
    "contact_repository",
    "AnalyticsRepository",
    "analytics_repository",
]
