import asyncio
import os
from typing import List, Optional

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DEBUG", "false")

import pytest

from garden_assistant.modules.plant_assistant.domain.services.conversation_session import (
    ConversationSession,
)
from garden_assistant.modules.plant_assistant.domain.services.identification_flow import (
    IdentificationFlow,
)
from garden_assistant.modules.plant_assistant.domain.services.model_service import (
    ChatHandle,
    ModelService,
)
from garden_assistant.modules.reminders.domain.models.reminder import MS_PER_DAY
from garden_assistant.modules.reminders.domain.services.reminder_notifier import (
    BufferedAlertSink,
    ReminderNotifier,
)
from garden_assistant.modules.reminders.domain.services.reminder_store import ReminderStore
from garden_assistant.shared.core.exceptions import ExternalAPIError
from garden_assistant.shared.infrastructure.storage.key_value_storage import InMemoryKeyValueStorage

NOW = 1_700_000_000_000

SAMPLE_REPLY = (
    "**نام گیاه:** مونسترا / Monstera deliciosa\n"
    "\n"
    "**معرفی:**\n"
    "مونسترا گیاهی گرمسیری با برگ‌های بزرگ و بریده است.\n"
    "\n"
    "**دستورالعمل‌های مراقبت:**\n"
    "*   **نور:** نور غیرمستقیم و زیاد\n"
)

NAMELESS_REPLY = "لطفاً عکس واضح‌تری از گیاه ارسال کنید."

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class FixedClock:
    def __init__(self, now: int = NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance_days(self, days: float) -> None:
        self.now += int(days * MS_PER_DAY)


class FakeChat(ChatHandle):
    def __init__(self, number: int):
        self.number = number
        self.history: List[str] = []


class FakeModelService(ModelService):
    """In-process model: canned replies, optional failures and gates to hold calls open."""

    def __init__(self, identification_reply: str = SAMPLE_REPLY):
        self.identification_reply = identification_reply
        self.error: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None
        self.analyze_gate: Optional[asyncio.Event] = None
        self.sessions: List[FakeChat] = []
        self.analyzed: List[tuple] = []
        self.sent: List[tuple] = []
        self.closed = False

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> str:
        self.analyzed.append((image_bytes, mime_type))
        if self.analyze_gate is not None:
            await self.analyze_gate.wait()
        if self.error is not None:
            raise self.error
        return self.identification_reply

    def create_session(self) -> ChatHandle:
        chat = FakeChat(len(self.sessions) + 1)
        self.sessions.append(chat)
        return chat

    async def send_message(self, handle: ChatHandle, text: str) -> str:
        self.sent.append((handle, text))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        handle.history.append(text)
        return f"پاسخ به: {text}"

    async def close(self) -> None:
        self.closed = True

    def describe(self) -> dict:
        return {"provider": "fake", "configured": True}


def model_failure() -> ExternalAPIError:
    return ExternalAPIError("model unavailable", api_name="fake", api_status_code=503)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def storage():
    return InMemoryKeyValueStorage()


@pytest.fixture
def alert_buffer():
    return BufferedAlertSink()


@pytest.fixture
def reminder_store(storage, clock, alert_buffer):
    return ReminderStore(storage, clock=clock, notifier=ReminderNotifier(sinks=[alert_buffer]))


@pytest.fixture
def model_service():
    return FakeModelService()


@pytest.fixture
def conversation(model_service):
    return ConversationSession(model_service)


@pytest.fixture
def identification(model_service, conversation):
    return IdentificationFlow(model_service, conversation, max_image_size=1024)
