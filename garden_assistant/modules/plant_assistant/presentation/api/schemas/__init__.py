# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The data formats for photo, sharing and chat requests and responses
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the plant assistant API
# 🔄 Connected Modules / Calls From:
# Identification and chat routers

from .assistant_schemas import (
    ChatMessageRequest,
    ChatMessageResponse,
    ChatSendResponse,
    ChatTranscriptResponse,
    IdentificationResponse,
    IdentificationStateResponse,
    ImageSelectionResponse,
    SharePayloadResponse,
)

__all__ = [
    "ChatMessageRequest",
    "ChatMessageResponse",
    "ChatSendResponse",
    "ChatTranscriptResponse",
    "IdentificationResponse",
    "IdentificationStateResponse",
    "ImageSelectionResponse",
    "SharePayloadResponse",
]
