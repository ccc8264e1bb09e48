# 📄 File: garden_assistant/modules/plant_assistant/infrastructure/external/gemini_model_service.py
# 🧭 Purpose (Layman Explanation):
# Uses Google's Gemini AI to recognize the plant in a photo and to answer the user's
# gardening questions, remembering earlier messages of the same chat.
# 🧪 Purpose (Technical Summary):
# ModelService implementation on top of GeminiClient. Image analysis sends the fixed
# Persian identification prompt with an inline_data image part; chat handles keep the
# turn history locally and send it with the system instruction on every call.
# 🔗 Dependencies:
# base64, GeminiClient (aiohttp), prompts, ModelService port, logging
# 🔄 Connected Modules / Calls From:
# Service wiring in shared.core.dependencies, application lifespan (close)

import base64
from typing import Any, Dict, List, Optional

from garden_assistant.modules.plant_assistant.domain.prompts import (
    CHAT_SYSTEM_INSTRUCTION,
    PLANT_IDENTIFICATION_PROMPT,
)
from garden_assistant.modules.plant_assistant.domain.services.model_service import (
    ChatHandle,
    ModelService,
)
from garden_assistant.shared.core.exceptions import ModelServiceError
from garden_assistant.shared.infrastructure.external_apis.gemini_client import (
    GeminiClient,
    create_gemini_client,
)
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class GeminiChat(ChatHandle):
    """Chat handle holding Gemini `contents` history for one conversation."""

    def __init__(self, system_instruction: str = CHAT_SYSTEM_INSTRUCTION):
        self.system_instruction = system_instruction
        self.history: List[Dict[str, Any]] = []

    @property
    def turn_count(self) -> int:
        return len(self.history)


def _text_content(role: str, text: str) -> Dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


class GeminiModelService(ModelService):
    """Gemini-backed generative model."""

    def __init__(self, client: GeminiClient):
        self.client = client

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> str:
        encoded = base64.b64encode(image_bytes).decode("ascii")
        contents = [
            {
                "role": "user",
                "parts": [
                    {"inline_data": {"mime_type": mime_type, "data": encoded}},
                    {"text": PLANT_IDENTIFICATION_PROMPT},
                ],
            }
        ]

        logger.debug(
            "Sending image for identification",
            extra={"mime_type": mime_type, "size_bytes": len(image_bytes)},
        )
        return await self.client.generate_content(contents)

    def create_session(self) -> ChatHandle:
        return GeminiChat()

    async def send_message(self, handle: ChatHandle, text: str) -> str:
        if not isinstance(handle, GeminiChat):
            raise ModelServiceError(
                "Conversation handle does not belong to this model service",
                operation="send_message",
                api_name=self.client.api_name,
            )

        user_content = _text_content("user", text)
        reply = await self.client.generate_content(
            handle.history + [user_content],
            system_instruction=handle.system_instruction,
        )

        # History only grows once the call has succeeded
        handle.history.append(user_content)
        handle.history.append(_text_content("model", reply))
        return reply

    async def close(self) -> None:
        await self.client.close()

    def describe(self) -> Dict[str, Any]:
        stats = self.client.get_stats()
        return {
            "provider": "gemini",
            "model": self.client.model,
            "configured": self.client.is_configured,
            "total_requests": stats["total_requests"],
            "error_rate": stats["error_rate"],
            "last_error": stats["last_error"],
        }

    @classmethod
    def from_config(cls, config: Dict[str, Any], client: Optional[GeminiClient] = None) -> "GeminiModelService":
        return cls(client or create_gemini_client(config))
