# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/v1/chat.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for the gardening chat: read the conversation so far and ask the
# AI a new question.
#
# 🧪 Purpose (Technical Summary):
# FastAPI chat endpoints over the ConversationSession. A failed send returns the model
# error and leaves the transcript exactly as before; overlapping sends get 409.
#
# 🔗 Dependencies:
# - FastAPI router, Depends
# - ConversationSession (via shared.core.dependencies)
# - assistant_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - garden_assistant.api.v1.router (mounted at /chat)

from fastapi import APIRouter, Depends

from garden_assistant.modules.plant_assistant.domain.models.chat import ChatMessage
from garden_assistant.modules.plant_assistant.domain.services.conversation_session import (
    ConversationSession,
)
from garden_assistant.modules.plant_assistant.presentation.api.schemas.assistant_schemas import (
    ChatMessageRequest,
    ChatMessageResponse,
    ChatSendResponse,
    ChatTranscriptResponse,
)
from garden_assistant.shared.core.dependencies import get_conversation

chat_router = APIRouter()


@chat_router.get(
    "/messages",
    response_model=ChatTranscriptResponse,
    summary="Conversation turns in order",
)
async def get_messages(
    conversation: ConversationSession = Depends(get_conversation),
) -> ChatTranscriptResponse:
    return ChatTranscriptResponse.from_domain(conversation.messages, conversation.is_sending)


@chat_router.post(
    "/messages",
    response_model=ChatSendResponse,
    summary="Send a message to the assistant",
    responses={
        409: {"description": "A previous message is still waiting for its reply"},
        422: {"description": "Empty message"},
        502: {"description": "Model service failed; the message was not added"},
    },
)
async def send_message(
    request: ChatMessageRequest,
    conversation: ConversationSession = Depends(get_conversation),
) -> ChatSendResponse:
    reply = await conversation.send(request.text)
    return ChatSendResponse(
        reply=ChatMessageResponse.from_domain(ChatMessage.from_model(reply)),
        messages=[ChatMessageResponse.from_domain(m) for m in conversation.messages],
    )
