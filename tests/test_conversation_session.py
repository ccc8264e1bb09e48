import asyncio

import pytest

from garden_assistant.modules.plant_assistant.domain.models.chat import ChatMessage, ChatRole
from garden_assistant.modules.plant_assistant.domain.services.conversation_session import SessionState
from garden_assistant.shared.core.exceptions import ConflictError, ExternalAPIError, ValidationError

from conftest import model_failure


def test_starts_uninitialized_and_start_is_idempotent(conversation, model_service):
    assert conversation.state == SessionState.UNINITIALIZED

    first = conversation.start()
    second = conversation.start()

    assert conversation.state == SessionState.ACTIVE
    assert first is second
    assert len(model_service.sessions) == 1


async def test_send_appends_user_then_model_turn(conversation, model_service):
    reply = await conversation.send("آبیاری چطور باشد؟")

    assert reply == "پاسخ به: آبیاری چطور باشد؟"
    assert conversation.messages == [
        ChatMessage.from_user("آبیاری چطور باشد؟"),
        ChatMessage.from_model(reply),
    ]
    assert model_service.sent[0][0] is conversation.handle


async def test_send_creates_handle_when_missing(conversation):
    await conversation.send("سلام")

    assert conversation.state == SessionState.ACTIVE


@pytest.mark.parametrize("text", ["", "   ", None])
async def test_empty_message_is_rejected_before_model_call(conversation, model_service, text):
    with pytest.raises(ValidationError):
        await conversation.send(text)

    assert model_service.sent == []
    assert conversation.messages == []


async def test_failed_send_restores_previous_turns(conversation, model_service):
    await conversation.send("اول")
    before = conversation.messages
    handle = conversation.handle

    model_service.error = model_failure()
    with pytest.raises(ExternalAPIError):
        await conversation.send("دوم")

    assert conversation.messages == before
    assert conversation.handle is handle
    assert not conversation.is_sending


async def test_retry_after_failure_succeeds(conversation, model_service):
    model_service.error = model_failure()
    with pytest.raises(ExternalAPIError):
        await conversation.send("سوال")

    model_service.error = None
    await conversation.send("سوال")

    assert [m.role for m in conversation.messages] == [ChatRole.USER, ChatRole.MODEL]


async def test_user_turn_is_visible_while_reply_is_pending(conversation, model_service):
    model_service.gate = asyncio.Event()
    task = asyncio.create_task(conversation.send("صبر کن"))
    await asyncio.sleep(0)

    assert conversation.is_sending
    assert conversation.messages == [ChatMessage.from_user("صبر کن")]

    model_service.gate.set()
    await task

    assert len(conversation.messages) == 2


async def test_overlapping_send_is_refused(conversation, model_service):
    model_service.gate = asyncio.Event()
    task = asyncio.create_task(conversation.send("اول"))
    await asyncio.sleep(0)

    with pytest.raises(ConflictError):
        await conversation.send("دوم")

    model_service.gate.set()
    await task
    assert [m.text for m in conversation.messages] == ["اول", "پاسخ به: اول"]


def test_restart_replaces_handle_and_seeds_reply(conversation, model_service):
    old = conversation.start()

    new = conversation.restart("پاسخ شناسایی")

    assert new is not old
    assert conversation.handle is new
    assert conversation.messages == [ChatMessage.from_model("پاسخ شناسایی")]


async def test_reset_clears_turns_and_keeps_handle(conversation):
    await conversation.send("سلام")
    handle = conversation.handle

    conversation.reset()

    assert conversation.messages == []
    assert conversation.handle is handle


def test_messages_is_a_snapshot(conversation):
    conversation.restart("پاسخ")
    snapshot = conversation.messages
    snapshot.append(ChatMessage.from_user("x"))

    assert len(conversation.messages) == 1
