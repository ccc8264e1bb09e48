# 📄 File: garden_assistant/modules/plant_assistant/domain/services/model_service.py
# 🧭 Purpose (Layman Explanation):
# Describes what the assistant needs from an AI model: look at a plant photo, open a chat,
# and answer a message in that chat, without saying which AI company provides it.
# 🧪 Purpose (Technical Summary):
# Port (abstract interface) for the multimodal generative model, following the repository
# interface pattern: domain services depend on this contract, infrastructure implements it.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# ConversationSession, IdentificationFlow, GeminiModelService (implementation), test fakes

from abc import ABC, abstractmethod


class ChatHandle(ABC):
    """
    Opaque handle to an ongoing model conversation.

    Implementations keep whatever state the model needs (history, ids).
    """


class ModelService(ABC):
    """
    Interface for the generative model used by the assistant.

    Implementation Notes:
    - Every method is a single request; no retries
    - Failures raise ExternalAPIError (or a subclass)
    - Handles returned by create_session are only valid for the same service
    """

    @abstractmethod
    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> str:
        """
        Identify the plant in an image and describe its care.

        Args:
            image_bytes: Raw image content
            mime_type: Image MIME type (e.g. image/jpeg)

        Returns:
            Structured reply text
        """

    @abstractmethod
    def create_session(self) -> ChatHandle:
        """Open a new conversation handle. Does not perform I/O."""

    @abstractmethod
    async def send_message(self, handle: ChatHandle, text: str) -> str:
        """
        Send a user message within a conversation and return the reply.

        A failed call leaves the handle as it was before the call.
        """

    async def close(self) -> None:
        """Release network resources."""

    def describe(self) -> dict:
        """Provider details for health checks."""
        return {"provider": type(self).__name__}
