import asyncio
from datetime import date, datetime, timezone

from starlette.requests import Request

from goevergreen.services import analytics_service as analytics_module
from goevergreen.services.analytics_service import (
    analytics_service,
    build_page_visit,
    derive_session_id,
    get_client_address,
)
from goevergreen.database.results import StoreResult

def make_request(headers=None, client=("10.0.0.9", 5123)):
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": b"",
        "headers": [(key.lower().encode(), value.encode()) for key, value in (headers or {}).items()],
        "client": client,
    }
    return Request(scope)

def test_session_id_is_stable_within_a_day():
    day = date(2024, 3, 1)
    first = derive_session_id("203.0.113.7", "Firefox", day)

    assert first == derive_session_id("203.0.113.7", "Firefox", day)
    assert len(first) == 32
    assert first != derive_session_id("203.0.113.7", "Firefox", date(2024, 3, 2))
    assert first != derive_session_id("203.0.113.8", "Firefox", day)

def test_client_address_precedence():
    assert get_client_address(make_request({
        "CF-Connecting-IP": "1.1.1.1",
        "X-Forwarded-For": "2.2.2.2, 3.3.3.3"
    })) == "1.1.1.1"
    # Client-supplied forwarding headers are not trusted
    assert get_client_address(make_request({"X-Forwarded-For": "2.2.2.2, 3.3.3.3"})) == "10.0.0.9"
    assert get_client_address(make_request()) == "10.0.0.9"
    assert get_client_address(make_request(client=None)) == "unknown"

def test_build_page_visit_reads_edge_headers():
    now = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    visit = build_page_visit(make_request({
        "CF-Connecting-IP": "1.1.1.1",
        "CF-IPCountry": "NZ",
        "User-Agent": "Safari",
        "Referer": "https://search.example/"
    }), "/blog", now=now)

    assert visit.path == "/blog"
    assert visit.country == "NZ"
    assert visit.referrer == "https://search.example/"
    assert visit.session_id == derive_session_id("1.1.1.1", "Safari", now.date())

def test_missing_country_is_unknown():
    visit = build_page_visit(make_request(), "/")
    assert visit.country == "Unknown"
    assert visit.user_agent == ""

def test_same_visitor_same_day_shares_a_session(fake_db):
    morning = datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc)
    evening = datetime(2024, 3, 1, 20, 0, tzinfo=timezone.utc)
    next_day = datetime(2024, 3, 2, 8, 0, tzinfo=timezone.utc)
    headers = {"CF-Connecting-IP": "1.1.1.1", "User-Agent": "Safari"}

    async def visit_three_times():
        await analytics_service.track_page_view(build_page_visit(make_request(headers), "/", now=morning))
        await analytics_service.track_page_view(build_page_visit(make_request(headers), "/blog", now=evening))
        await analytics_service.track_page_view(build_page_visit(make_request(headers), "/", now=next_day))

    asyncio.run(visit_three_times())

    assert len(fake_db.page_views) == 3
    assert sorted(session["page_count"] for session in fake_db.sessions.values()) == [1, 2]

def test_page_view_recorded_when_session_upsert_fails(fake_db):
    fake_db.fail_on.add("INSERT INTO user_sessions")
    visit = build_page_visit(make_request(), "/about")

    result = asyncio.run(analytics_module.analytics_repository.record_page_view(visit))

    assert result.success
    assert result.data == {"session_stored": False}
    assert fake_db.page_views[0]["path"] == "/about"

def test_tracking_never_raises(monkeypatch):
    async def explode(visit):
        raise RuntimeError("boom")

    monkeypatch.setattr(analytics_module.analytics_repository, "record_page_view", explode)

    asyncio.run(analytics_service.track_page_view(build_page_visit(make_request(), "/")))

def test_page_request_records_view_in_background(client, upstream, fake_db):
    upstream.timeout = True
    headers = {"CF-Connecting-IP": "198.51.100.4", "CF-IPCountry": "DE", "User-Agent": "Chrome"}

    client.get("/blog", headers=headers)
    client.get("/about", headers=headers)

    assert [view["path"] for view in fake_db.page_views] == ["/blog", "/about"]
    assert [session["page_count"] for session in fake_db.sessions.values()] == [2]
    assert fake_db.page_views[0]["country"] == "DE"

def test_analytics_endpoint_summary(client, fake_db):
    headers = {"CF-IPCountry": "FR", "User-Agent": "Chrome"}
    visit = build_page_visit(make_request(headers), "/blog")
    asyncio.run(analytics_service.track_page_view(visit))
    asyncio.run(analytics_service.track_page_view(build_page_visit(make_request(), "/blog")))
    fake_db.subscribers["a@example.com"] = {
        "id": 1, "email": "a@example.com", "name": "", "subscribed_at": visit.timestamp,
        "confirmed": False, "unsubscribed": False
    }

    response = client.get("/api/analytics")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["total_page_views"] == 2
    assert data["unique_visitors"] == 2
    assert data["top_pages"][0]["path"] == "/blog"
    assert data["top_countries"] == [{"country": "FR", "views": 1, "unique_visitors": 1}]
    assert data["active_subscribers"] == 1
    assert data["period"] == "7 days"

def test_analytics_endpoint_without_database(client):
    data = client.get("/api/analytics").json()["data"]

    assert data["total_page_views"] == 0
    assert data["top_pages"] == []
    assert data["active_subscribers"] == 0

def test_cleanup_result_passed_through(monkeypatch):
    async def fake_cleanup(retention_days=90, now=None):
        return StoreResult.ok({"page_views": 3, "user_sessions": 1, "retention": retention_days})

    monkeypatch.setattr(analytics_module.analytics_repository, "cleanup_old_rows", fake_cleanup)

    result = asyncio.run(analytics_service.cleanup(retention_days=30))
    assert result.data["retention"] == 30
