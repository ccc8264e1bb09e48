# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/schemas/assistant_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what the app sends back after a photo is picked or analyzed, what a chat
# message looks like, and the ready-made text for sharing a plant.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the identification, share and chat endpoints.
# 🔗 Dependencies:
# pydantic, plant assistant domain models
# 🔄 Connected Modules / Calls From:
# garden_assistant.modules.plant_assistant.presentation.api.v1 (identification, chat)

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from garden_assistant.modules.plant_assistant.domain.models.chat import (
    ChatMessage,
    ChatRole,
    SharePayload,
)


class ImageSelectionResponse(BaseModel):
    selected: bool = True
    mime_type: str
    size_bytes: int
    filename: Optional[str] = None


class IdentificationResponse(BaseModel):
    """Result of analyzing the selected image."""

    plant_name: Optional[str] = Field(None, description="Extracted plant name, if any")
    reply: str = Field(..., description="Model reply, also the first chat turn")
    can_set_reminder: bool = Field(False, description="True when a plant name was found")
    can_share: bool = Field(False, description="True when a share payload is available")


class IdentificationStateResponse(BaseModel):
    has_selection: bool
    mime_type: Optional[str] = None
    plant_name: Optional[str] = None
    has_reminder: bool = False
    is_analyzing: bool = False


class SharePayloadResponse(BaseModel):
    title: str
    text: str

    @classmethod
    def from_domain(cls, payload: SharePayload) -> "SharePayloadResponse":
        return cls(title=payload.title, text=payload.text)


class ChatMessageRequest(BaseModel):
    text: str = Field(..., description="User message")

    model_config = ConfigDict(
        json_schema_extra={"example": {"text": "هر چند وقت یکبار باید کود بدهم؟"}}
    )


class ChatMessageResponse(BaseModel):
    role: ChatRole
    text: str

    @classmethod
    def from_domain(cls, message: ChatMessage) -> "ChatMessageResponse":
        return cls(role=message.role, text=message.text)


class ChatTranscriptResponse(BaseModel):
    messages: List[ChatMessageResponse] = Field(default_factory=list)
    is_sending: bool = False

    @classmethod
    def from_domain(cls, messages: List[ChatMessage], is_sending: bool = False) -> "ChatTranscriptResponse":
        return cls(
            messages=[ChatMessageResponse.from_domain(m) for m in messages],
            is_sending=is_sending,
        )


class ChatSendResponse(BaseModel):
    reply: ChatMessageResponse
    messages: List[ChatMessageResponse]
