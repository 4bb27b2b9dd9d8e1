import httpx
import pytest
from fastapi.testclient import TestClient

from goevergreen.config import settings
from goevergreen.database.connection import DatabaseConnection
from goevergreen.main import app
from goevergreen.services.content_extractor import content_extractor
from goevergreen.services.content_fetcher import ContentFetcher
from goevergreen.services.page_service import PageService, get_page_service

from fakes import FakePool

UPSTREAM_BASE = "https://upstream.test"


class FakeUpstream:
    """Programmable WordPress.com origin for httpx.MockTransport"""

    def __init__(self):
        self.pages = {}
        self.timeout = False
        self.requested = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requested.append(request.url.path)
        if self.timeout:
            raise httpx.ReadTimeout("upstream timed out", request=request)
        html = self.pages.get(request.url.path)
        if html is None:
            return httpx.Response(404, text="Not found")
        return httpx.Response(200, text=html)

    def fetcher(self) -> ContentFetcher:
        return ContentFetcher(
            base_url=UPSTREAM_BASE,
            timeout=1,
            max_attempts=2,
            backoff_seconds=0,
            transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture(autouse=True)
def no_database_url(monkeypatch):
    # Never reach for a real database from tests
    monkeypatch.setattr(settings, "database_url", None)
    monkeypatch.setattr(DatabaseConnection, "_pool", None)
    monkeypatch.setattr(DatabaseConnection, "_lock", None)


@pytest.fixture
def fake_db(monkeypatch):
    pool = FakePool()
    monkeypatch.setattr(DatabaseConnection, "_pool", pool)
    return pool.connection


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    service = PageService(upstream.fetcher(), content_extractor)
    app.dependency_overrides[get_page_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_page_service, None)
