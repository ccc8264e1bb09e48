import asyncio
import base64

import aiohttp
import pytest

from garden_assistant.modules.plant_assistant.domain.prompts import (
    CHAT_SYSTEM_INSTRUCTION,
    PLANT_IDENTIFICATION_PROMPT,
)
from garden_assistant.modules.plant_assistant.infrastructure.external.gemini_model_service import (
    GeminiChat,
    GeminiModelService,
)
from garden_assistant.shared.core.exceptions import (
    APIAuthenticationError,
    APIQuotaExceededError,
    APITimeoutError,
    ExternalAPIError,
    ModelServiceError,
)
from garden_assistant.shared.infrastructure.external_apis.gemini_client import (
    GeminiClient,
    create_gemini_client,
)

from conftest import FakeChat, PNG_BYTES


class StubResponse:
    def __init__(self, status, body="", headers=None):
        self.status = status
        self.headers = headers or {}
        self._body = body

    async def text(self):
        return self._body


class UnreachableSession:
    closed = False

    def post(self, url, json=None):
        raise aiohttp.ClientConnectionError("connection refused")


class RecordingClient(GeminiClient):
    """GeminiClient with the HTTP call replaced by canned results."""

    def __init__(self, replies=None, error=None):
        super().__init__(api_key="test-key", model="gemini-test")
        self.replies = list(replies or [])
        self.error = error
        self.calls = []

    async def generate_content(self, contents, system_instruction=None):
        self.calls.append({"contents": [dict(c) for c in contents], "system_instruction": system_instruction})
        if self.error is not None:
            raise self.error
        return self.replies.pop(0)


@pytest.fixture
def client():
    return GeminiClient(api_key="test-key", model="gemini-test", base_url="https://example.test/v1beta/")


def test_endpoint_and_headers(client):
    assert client._endpoint() == "https://example.test/v1beta/models/gemini-test:generateContent"
    assert client._get_default_headers()["x-goog-api-key"] == "test-key"


def test_extract_text_joins_parts(client):
    data = {"candidates": [{"content": {"parts": [{"text": "سلام "}, {"text": "دنیا"}]}}]}

    assert client._extract_text(data) == "سلام دنیا"


def test_extract_text_without_candidates_reports_block_reason(client):
    with pytest.raises(ExternalAPIError) as exc_info:
        client._extract_text({"promptFeedback": {"blockReason": "SAFETY"}})

    assert exc_info.value.details["block_reason"] == "SAFETY"


def test_extract_text_empty_reply(client):
    with pytest.raises(ExternalAPIError):
        client._extract_text({"candidates": [{"content": {"parts": [{"text": "  "}]}, "finishReason": "STOP"}]})


@pytest.mark.parametrize(
    "status, headers, expected",
    [
        (401, {}, APIAuthenticationError),
        (403, {}, APIAuthenticationError),
        (429, {"Retry-After": "30"}, APIQuotaExceededError),
        (400, {}, ExternalAPIError),
        (503, {}, ExternalAPIError),
    ],
)
async def test_error_statuses_map_to_exceptions(client, status, headers, expected):
    with pytest.raises(expected):
        await client._handle_response_status(StubResponse(status, "error body", headers))


async def test_ok_status_passes(client):
    await client._handle_response_status(StubResponse(200))


def test_transport_errors_are_transformed(client):
    assert isinstance(client._transform_exception(asyncio.TimeoutError(), "url"), APITimeoutError)
    assert isinstance(client._transform_exception(aiohttp.ClientConnectionError("down"), "url"), ExternalAPIError)

    other = ValueError("x")
    assert client._transform_exception(other, "url") is other


async def test_missing_api_key_fails_without_request():
    unconfigured = GeminiClient(api_key=None, model="gemini-test")

    with pytest.raises(ExternalAPIError):
        await unconfigured.generate_content([{"role": "user", "parts": [{"text": "hi"}]}])

    assert unconfigured.session is None


def test_factory_reads_settings_config():
    client = create_gemini_client(
        {"api_key": "k", "api_url": "https://example.test/v1", "model": "m", "timeout": 20}
    )

    assert client.model == "m"
    assert client.timeout == 20
    assert client.base_url == "https://example.test/v1"


async def test_analyze_image_sends_inline_image_and_prompt():
    client = RecordingClient(replies=["پاسخ"])
    service = GeminiModelService(client)

    reply = await service.analyze_image(PNG_BYTES, "image/png")

    assert reply == "پاسخ"
    [call] = client.calls
    parts = call["contents"][0]["parts"]
    assert parts[0]["inline_data"] == {
        "mime_type": "image/png",
        "data": base64.b64encode(PNG_BYTES).decode("ascii"),
    }
    assert parts[1]["text"] == PLANT_IDENTIFICATION_PROMPT
    assert call["system_instruction"] is None


async def test_chat_history_grows_only_on_success():
    client = RecordingClient(replies=["جواب اول", "جواب دوم"])
    service = GeminiModelService(client)
    chat = service.create_session()

    await service.send_message(chat, "سوال اول")
    await service.send_message(chat, "سوال دوم")

    assert isinstance(chat, GeminiChat)
    assert chat.turn_count == 4
    second_call = client.calls[1]
    assert [c["role"] for c in second_call["contents"]] == ["user", "model", "user"]
    assert second_call["system_instruction"] == CHAT_SYSTEM_INSTRUCTION

    client.error = ExternalAPIError("down")
    with pytest.raises(ExternalAPIError):
        await service.send_message(chat, "سوال سوم")
    assert chat.turn_count == 4


async def test_foreign_handle_is_rejected():
    service = GeminiModelService(RecordingClient())

    with pytest.raises(ModelServiceError):
        await service.send_message(FakeChat(1), "سلام")


async def test_transport_failures_count_as_requests():
    client = GeminiClient(api_key="test-key", model="gemini-test")
    client.session = UnreachableSession()

    for _ in range(3):
        with pytest.raises(ExternalAPIError):
            await client.generate_content([{"role": "user", "parts": [{"text": "hi"}]}])

    stats = client.get_stats()
    assert stats["total_requests"] == 3
    assert stats["failed_requests"] == 3
    assert stats["error_rate"] == 100
    assert stats["last_error"]["error_type"] == "ClientConnectionError"


def test_describe_reports_configuration():
    info = GeminiModelService(RecordingClient()).describe()

    assert info["provider"] == "gemini"
    assert info["configured"] is True
    assert info["total_requests"] == 0
    assert info["last_error"] is None
