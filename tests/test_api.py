import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from garden_assistant.api.middleware.logging import RequestLoggingMiddleware
from garden_assistant.main import create_application
from garden_assistant.shared.config.settings import get_settings
from garden_assistant.shared.core.dependencies import build_services
from garden_assistant.shared.infrastructure.storage.key_value_storage import InMemoryKeyValueStorage

from conftest import FakeModelService, FixedClock, PNG_BYTES, model_failure

API = "/api/v1"


@pytest.fixture
def fake_model():
    return FakeModelService()


@pytest.fixture
def api_clock():
    return FixedClock()


@pytest.fixture
def services(fake_model, api_clock):
    return build_services(
        get_settings(),
        model_service=fake_model,
        storage=InMemoryKeyValueStorage(),
        clock=api_clock,
    )


@pytest.fixture
def client(services):
    with TestClient(create_application(services)) as test_client:
        yield test_client


def upload(client, path="/identification", content=PNG_BYTES, mime_type="image/png"):
    return client.post(f"{API}{path}", files={"image": ("leaf.png", content, mime_type)})


def test_startup_opens_conversation_and_shutdown_closes_model(services, fake_model):
    with TestClient(create_application(services)):
        assert len(fake_model.sessions) == 1
    assert fake_model.closed


def test_health(client):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_detailed_health_reports_components(client):
    body = client.get(f"{API}/health/detailed").json()

    assert body["components"]["model_service"]["provider"] == "fake"
    assert body["components"]["storage"]["writable"] is True
    assert "system" in body["components"]


def test_upload_and_identify(client):
    response = upload(client)

    assert response.status_code == 200
    body = response.json()
    assert body["plant_name"] == "مونسترا"
    assert body["can_set_reminder"] is True
    assert body["can_share"] is True

    messages = client.get(f"{API}/chat/messages").json()["messages"]
    assert [m["role"] for m in messages] == ["model"]

    state = client.get(f"{API}/identification").json()
    assert state["has_selection"] is True
    assert state["plant_name"] == "مونسترا"
    assert state["has_reminder"] is False


def test_select_then_analyze(client):
    selected = upload(client, "/identification/image")
    assert selected.status_code == 201
    assert selected.json()["size_bytes"] == len(PNG_BYTES)

    analyzed = client.post(f"{API}/identification/analyze")
    assert analyzed.status_code == 200
    assert analyzed.json()["plant_name"] == "مونسترا"


def test_analyze_without_selection(client, fake_model):
    response = client.post(f"{API}/identification/analyze")

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "timestamp" in error
    assert fake_model.analyzed == []


def test_non_image_upload_rejected(client):
    response = upload(client, "/identification/image", content=b"hello", mime_type="text/plain")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_FILE_TYPE"


def test_failed_analysis_keeps_selection(client, fake_model):
    upload(client, "/identification/image")
    fake_model.error = model_failure()

    response = client.post(f"{API}/identification/analyze")

    assert response.status_code == 502
    assert response.json()["error"]["code"] == "PLANT_IDENTIFICATION_ERROR"
    assert client.get(f"{API}/identification").json()["has_selection"] is True
    assert client.get(f"{API}/chat/messages").json()["messages"] == []


def test_share_payload(client):
    assert client.get(f"{API}/identification/share").status_code == 404

    upload(client)
    payload = client.get(f"{API}/identification/share").json()

    assert payload["title"] == "🌿 گیاه شناسایی شده: مونسترا"
    assert "مونسترا" in payload["text"]


def test_chat_send_and_rollback(client, fake_model):
    upload(client)

    sent = client.post(f"{API}/chat/messages", json={"text": "نور کافی است؟"})
    assert sent.status_code == 200
    assert sent.json()["reply"] == {"role": "model", "text": "پاسخ به: نور کافی است؟"}
    assert len(sent.json()["messages"]) == 3

    fake_model.error = model_failure()
    failed = client.post(f"{API}/chat/messages", json={"text": "کود؟"})
    assert failed.status_code == 502
    assert len(client.get(f"{API}/chat/messages").json()["messages"]) == 3


def test_empty_chat_message_rejected(client):
    response = client.post(f"{API}/chat/messages", json={"text": "  "})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_reminder_requires_plant_name(client):
    response = client.post(f"{API}/reminders", json={"interval": 7})

    assert response.status_code == 422


def test_reminder_defaults_to_identified_plant(client):
    upload(client)

    response = client.post(f"{API}/reminders", json={"interval": 7})

    assert response.status_code == 201
    [reminder] = response.json()["reminders"]
    assert reminder["plant_name"] == "مونسترا"
    assert reminder["interval"] == 7
    assert client.get(f"{API}/identification").json()["has_reminder"] is True


def test_reminder_lifecycle_and_alerts(client, api_clock):
    client.post(f"{API}/reminders", json={"plant_name": "کاکتوس", "interval": 30})
    client.post(f"{API}/reminders", json={"plant_name": "پوتوس", "interval": "abc"})

    listed = client.get(f"{API}/reminders").json()
    assert [r["plant_name"] for r in listed["reminders"]] == ["پوتوس", "کاکتوس"]
    assert listed["reminders"][0]["interval"] == 1
    assert [a["plant_name"] for a in listed["alerts"]] == ["پوتوس"]

    api_clock.advance_days(29.5)
    alerts = client.get(f"{API}/reminders").json()["alerts"]
    assert sorted(a["plant_name"] for a in alerts) == ["پوتوس", "کاکتوس"]

    deleted = client.delete(f"{API}/reminders/کاکتوس").json()
    assert [r["plant_name"] for r in deleted["reminders"]] == ["پوتوس"]

    unchanged = client.delete(f"{API}/reminders/نامعلوم")
    assert unchanged.status_code == 200
    assert unchanged.json()["total"] == 1


def test_request_id_is_echoed_and_generated():
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    with TestClient(app) as test_client:
        echoed = test_client.get("/ping", headers={"X-Request-ID": "req-123"})
        generated = test_client.get("/ping")

    assert echoed.headers["X-Request-ID"] == "req-123"
    assert generated.headers["X-Request-ID"]


def test_oversized_interval_is_capped_and_listing_keeps_working(client):
    saved = client.post(f"{API}/reminders", json={"plant_name": "مونسترا", "interval": 10**9})

    assert saved.status_code == 201
    assert saved.json()["reminders"][0]["interval"] == 3650

    listed = client.get(f"{API}/reminders")
    assert listed.status_code == 200
    assert listed.json()["total"] == 1
