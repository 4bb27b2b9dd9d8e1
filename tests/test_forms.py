from fastapi.testclient import TestClient

from goevergreen.main import app

def test_newsletter_subscribe_json(client, fake_db):
    response = client.post("/api/newsletter", json={"email": "reader@example.com", "name": "Ann"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Successfully subscribed to our wellness newsletter!"
    }
    assert fake_db.subscribers["reader@example.com"]["name"] == "Ann"
    assert fake_db.conversions[0]["type"] == "newsletter_signup"

def test_double_subscription_keeps_one_normalized_row(client, fake_db):
    client.post("/api/newsletter", json={"email": "  Reader@Example.COM "})
    response = client.post("/api/newsletter", json={"email": "reader@example.com", "name": "Ann"})

    assert response.status_code == 200
    assert list(fake_db.subscribers) == ["reader@example.com"]
    assert fake_db.subscribers["reader@example.com"]["name"] == "Ann"

def test_newsletter_rejects_invalid_email(client, fake_db):
    response = client.post("/api/newsletter", json={"email": "not-an-email"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Valid email required"}
    assert fake_db.subscribers == {}
    assert fake_db.conversions == []

def test_newsletter_rejects_overlong_email(client, fake_db):
    response = client.post("/api/newsletter", json={"email": "a" * 250 + "@example.com"})

    assert response.status_code == 400
    assert fake_db.subscribers == {}

def test_newsletter_rejects_malformed_json(client, fake_db):
    response = client.post(
        "/api/newsletter",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"

def test_newsletter_api_only_accepts_post(client):
    response = client.get("/api/newsletter")

    assert response.status_code == 405
    assert response.json() == {"success": False, "error": "Method not allowed"}

def test_newsletter_form_post(client, fake_db):
    response = client.post("/newsletter/subscribe", data={"email": "form@example.com", "name": " Bo "})

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert fake_db.subscribers["form@example.com"]["name"] == "Bo"

def test_newsletter_form_post_errors_are_json(client):
    response = client.post("/newsletter/subscribe", data={"email": "nope"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Valid email required"}

def test_newsletter_store_unavailable(client):
    response = client.post("/api/newsletter", json={"email": "reader@example.com"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Subscription failed. Please try again."}

def test_contact_submission_is_stored(client, fake_db):
    response = client.post("/api/contact", json={
        "name": "  Dana  ",
        "email": "Dana@Example.com",
        "message": "Do you have guides for runners?"
    })

    assert response.status_code == 200
    assert response.json()["success"] is True
    stored = fake_db.contacts[0]
    assert stored["name"] == "Dana"
    assert stored["email"] == "dana@example.com"
    assert stored["status"] == "new"
    assert fake_db.conversions[0]["type"] == "contact_submission"

def test_contact_message_capped_at_1000_characters(client, fake_db):
    message = "x" * 1000 + "OVERFLOW"

    response = client.post("/api/contact", data={"name": "Eve", "email": "eve@example.com", "message": message})

    assert response.status_code == 200
    assert fake_db.contacts[0]["message"] == "x" * 1000

def test_contact_requires_all_fields(client, fake_db):
    response = client.post("/api/contact", json={"name": "Eve", "email": "eve@example.com", "message": "   "})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "All fields are required"}
    assert fake_db.contacts == []

def test_contact_validates_email(client, fake_db):
    response = client.post("/api/contact", json={"name": "Eve", "email": "eve", "message": "hello"})

    assert response.status_code == 400
    assert response.json()["error"] == "Valid email required"

def test_contact_only_accepts_post(client):
    response = client.get("/api/contact")

    assert response.status_code == 405
    assert response.json()["error"] == "Method not allowed"

def test_contact_store_unavailable(client):
    response = client.post("/api/contact", json={"name": "Eve", "email": "eve@example.com", "message": "hi"})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to submit. Please try again."}

def test_unknown_api_path_is_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "API endpoint not found"}

def test_unhandled_api_error_is_generic_json(monkeypatch):
    from goevergreen.routes import analytics as analytics_routes

    async def broken_summary(days=7):
        raise RuntimeError("secret connection string")

    monkeypatch.setattr(analytics_routes.analytics_service, "get_summary", broken_summary)

    response = TestClient(app, raise_server_exceptions=False).get("/api/analytics")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Internal server error. Please try again."}
