# 📄 File: garden_assistant/modules/plant_assistant/domain/models/chat.py
# 🧭 Purpose (Layman Explanation):
# Defines a single chat bubble (who said it and what they said) and the result of
# identifying a plant from a photo.
# 🧪 Purpose (Technical Summary):
# Domain models for conversation turns, identification results and share payloads.
# 🔗 Dependencies:
# pydantic, enum, typing
# 🔄 Connected Modules / Calls From:
# ConversationSession, IdentificationFlow, ShareService, presentation schemas

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRole(str, Enum):
    """Author of a conversation turn"""
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """One turn of the conversation. Turns are never edited after creation."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    role: ChatRole
    text: str

    @classmethod
    def from_user(cls, text: str) -> "ChatMessage":
        return cls(role=ChatRole.USER, text=text)

    @classmethod
    def from_model(cls, text: str) -> "ChatMessage":
        return cls(role=ChatRole.MODEL, text=text)


class IdentificationResult(BaseModel):
    """Outcome of analyzing one plant photo."""

    first_reply: str = Field(..., description="Raw model reply, shown as the first turn")
    plant_name: Optional[str] = Field(None, description="Extracted common name, if found")

    @property
    def has_plant_name(self) -> bool:
        return bool(self.plant_name)


class SharePayload(BaseModel):
    """Title and body handed to the platform share capability."""

    title: str
    text: str
