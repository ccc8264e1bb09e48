# 📄 File: garden_assistant/modules/plant_assistant/domain/services/identification_flow.py
# 🧭 Purpose (Layman Explanation):
# Takes the plant photo the user picked, asks the AI what plant it is, and starts a
# new chat about that plant with the AI's answer as the first message.
# 🧪 Purpose (Technical Summary):
# Orchestrates image validation, the model's image analysis, plant-name extraction and
# conversation restart. Keeps the current selection so a failed analysis can be retried.
# 🔗 Dependencies:
# ModelService port, ConversationSession, reply_parser, shared exceptions and logging
# 🔄 Connected Modules / Calls From:
# Identification API endpoints, reminder save endpoint (default plant name), ShareService

from dataclasses import dataclass
from typing import Optional

from garden_assistant.modules.plant_assistant.domain.models.chat import IdentificationResult
from garden_assistant.modules.plant_assistant.domain.prompts import (
    ANALYSIS_IN_PROGRESS_MESSAGE,
    IDENTIFICATION_FAILED_MESSAGE,
    NO_IMAGE_SELECTED_MESSAGE,
    SEND_IN_PROGRESS_MESSAGE,
)
from garden_assistant.modules.plant_assistant.domain.services.conversation_session import (
    ConversationSession,
)
from garden_assistant.modules.plant_assistant.domain.services.model_service import ModelService
from garden_assistant.modules.plant_assistant.domain.services.reply_parser import extract_plant_name
from garden_assistant.shared.core.exceptions import (
    ConflictError,
    FileTooLargeError,
    InvalidFileTypeError,
    PlantIdentificationError,
    ValidationError,
)
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_IMAGE_SIZE = 10 * 1024 * 1024


@dataclass(frozen=True)
class SelectedImage:
    content: bytes
    mime_type: str
    filename: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)


class IdentificationFlow:
    """
    Turns an uploaded image into a named plant plus initial care text.

    State kept between requests:
    - the selected image (survives a failed analysis)
    - plant_name and first_reply of the latest successful identification
    """

    def __init__(
        self,
        model_service: ModelService,
        conversation: ConversationSession,
        max_image_size: int = DEFAULT_MAX_IMAGE_SIZE,
    ):
        self.model_service = model_service
        self.conversation = conversation
        self.max_image_size = max_image_size
        self._selection: Optional[SelectedImage] = None
        self._plant_name: Optional[str] = None
        self._first_reply: Optional[str] = None
        self._analyzing = False

    @property
    def selection(self) -> Optional[SelectedImage]:
        return self._selection

    @property
    def plant_name(self) -> Optional[str]:
        return self._plant_name

    @property
    def first_reply(self) -> Optional[str]:
        return self._first_reply

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing

    def validate_image(self, image_bytes: bytes, mime_type: Optional[str], filename: Optional[str] = None) -> None:
        """Reject empty, non-image and oversized uploads."""
        if not image_bytes:
            raise ValidationError(NO_IMAGE_SELECTED_MESSAGE, field="image", constraint="non-empty")

        if not mime_type or not mime_type.startswith("image/"):
            raise InvalidFileTypeError(
                message="Only image files are supported",
                filename=filename,
                expected_types=["image/*"],
                actual_type=mime_type,
            )

        if len(image_bytes) > self.max_image_size:
            raise FileTooLargeError(
                max_size_mb=round(self.max_image_size / (1024 * 1024), 2),
                actual_size_mb=round(len(image_bytes) / (1024 * 1024), 2),
                filename=filename,
            )

    def select_image(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None) -> SelectedImage:
        """
        Store a new image selection.

        Clears the chat turns and the current plant name; the previous
        identification no longer describes what the user is looking at.
        """
        self._ensure_idle()
        self.validate_image(image_bytes, mime_type, filename)

        self._selection = SelectedImage(content=image_bytes, mime_type=mime_type, filename=filename)
        self._plant_name = None
        self._first_reply = None
        self.conversation.reset()

        logger.info(
            "Image selected",
            extra={"mime_type": mime_type, "size_bytes": len(image_bytes), "image_filename": filename},
        )
        return self._selection

    async def identify(self, image_bytes: bytes, mime_type: str) -> IdentificationResult:
        """
        Identify the plant in an image and restart the conversation with the reply.

        Raises:
            PlantIdentificationError: Model call failed; no turn is added
            ConflictError: An analysis or chat send is still outstanding
        """
        self._ensure_idle()
        self.validate_image(image_bytes, mime_type)

        self.conversation.reset()
        self._plant_name = None
        self._first_reply = None
        self._analyzing = True

        try:
            reply = await self.model_service.analyze_image(image_bytes, mime_type)
        except Exception as e:
            logger.error(
                f"Plant identification failed: {e}",
                extra={"mime_type": mime_type, "error_type": type(e).__name__},
            )
            raise PlantIdentificationError(
                message=IDENTIFICATION_FAILED_MESSAGE,
                mime_type=mime_type,
                details={"cause": getattr(e, "message", str(e))},
            ) from e
        finally:
            self._analyzing = False

        plant_name = extract_plant_name(reply)
        self.conversation.restart(reply)
        self._plant_name = plant_name
        self._first_reply = reply

        logger.log_business_event(
            event_type="plant_identified",
            description="Plant image analyzed",
            entity_id=plant_name,
            entity_type="plant",
            extra={"name_found": plant_name is not None},
        )
        return IdentificationResult(first_reply=reply, plant_name=plant_name)

    def _ensure_idle(self) -> None:
        if self._analyzing:
            raise ConflictError(ANALYSIS_IN_PROGRESS_MESSAGE, resource_type="identification")
        if self.conversation.is_sending:
            raise ConflictError(SEND_IN_PROGRESS_MESSAGE, resource_type="conversation")

    async def analyze_selected(self) -> IdentificationResult:
        """Run identification on the stored selection."""
        if self._selection is None:
            raise ValidationError(NO_IMAGE_SELECTED_MESSAGE, field="image", constraint="selected")
        return await self.identify(self._selection.content, self._selection.mime_type)
