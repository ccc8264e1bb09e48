# 📄 File: garden_assistant/modules/plant_assistant/domain/services/conversation_session.py
# 🧭 Purpose (Layman Explanation):
# Keeps the chat between the user and the AI about the current plant: shows the user's
# message right away, adds the AI's answer when it arrives, and takes the message back if
# the AI could not be reached so the user can try again.
# 🧪 Purpose (Technical Summary):
# Two-state (uninitialized/active) conversation with an ordered, append-only turn list,
# optimistic user turns with rollback on model failure, and refusal of overlapping sends.
# 🔗 Dependencies:
# ModelService port, chat models, shared exceptions and logging
# 🔄 Connected Modules / Calls From:
# IdentificationFlow (restart/reset), chat API endpoints, service wiring

from enum import Enum
from typing import List, Optional

from garden_assistant.modules.plant_assistant.domain.models.chat import ChatMessage
from garden_assistant.modules.plant_assistant.domain.prompts import (
    EMPTY_MESSAGE_MESSAGE,
    SEND_IN_PROGRESS_MESSAGE,
)
from garden_assistant.modules.plant_assistant.domain.services.model_service import (
    ChatHandle,
    ModelService,
)
from garden_assistant.shared.core.exceptions import ConflictError, ValidationError
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class ConversationSession:
    """
    Ordered chat turns plus the model conversation handle they belong to.

    Callers must not overlap sends; an overlapping send is refused with a
    ConflictError instead of being queued.
    """

    def __init__(self, model_service: ModelService):
        self.model_service = model_service
        self._handle: Optional[ChatHandle] = None
        self._messages: List[ChatMessage] = []
        self._sending = False

    @property
    def state(self) -> SessionState:
        return SessionState.ACTIVE if self._handle is not None else SessionState.UNINITIALIZED

    @property
    def handle(self) -> Optional[ChatHandle]:
        return self._handle

    @property
    def messages(self) -> List[ChatMessage]:
        """Snapshot of the turns in display order."""
        return list(self._messages)

    @property
    def is_sending(self) -> bool:
        return self._sending

    def start(self) -> ChatHandle:
        """Return the current handle, creating one if none exists."""
        if self._handle is None:
            self._handle = self.model_service.create_session()
            logger.debug("Conversation handle created")
        return self._handle

    def restart(self, first_reply: Optional[str] = None) -> ChatHandle:
        """
        Discard the handle and all turns, then open a fresh conversation.

        Args:
            first_reply: Model text to seed as the first turn
        """
        self._handle = self.model_service.create_session()
        self._messages = []
        if first_reply is not None:
            self._messages.append(ChatMessage.from_model(first_reply))
        logger.info("Conversation restarted", extra={"seeded": first_reply is not None})
        return self._handle

    def reset(self) -> None:
        """Clear the turns and keep the handle."""
        self._messages = []

    async def send(self, text: str) -> str:
        """
        Send a user message and return the model reply.

        The user turn is appended before the call and removed again if the
        call fails; the error then propagates to the caller.
        """
        if text is None or not text.strip():
            raise ValidationError(EMPTY_MESSAGE_MESSAGE, field="text", constraint="non-empty")
        if self._sending:
            raise ConflictError(SEND_IN_PROGRESS_MESSAGE, resource_type="conversation")

        handle = self.start()
        user_turn = ChatMessage.from_user(text)
        self._messages.append(user_turn)
        self._sending = True

        try:
            reply = await self.model_service.send_message(handle, text)
        except Exception as e:
            self._remove_turn(user_turn)
            logger.warning(
                f"Message send failed, user turn rolled back: {e}",
                extra={"error_type": type(e).__name__, "turns": len(self._messages)},
            )
            raise
        finally:
            self._sending = False

        self._messages.append(ChatMessage.from_model(reply))
        return reply

    def _remove_turn(self, turn: ChatMessage) -> None:
        for index in range(len(self._messages) - 1, -1, -1):
            if self._messages[index] is turn:
                del self._messages[index]
                return
