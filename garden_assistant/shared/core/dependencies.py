"""
Common FastAPI dependencies for the Garden Assistant application.
Builds the per-process service objects and hands them to endpoints.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from ..config.settings import Settings, get_settings
from ..infrastructure.external_apis.gemini_client import create_gemini_client
from ..infrastructure.storage.key_value_storage import KeyValueStorage, create_storage
from ..utils.logging import get_logger
from garden_assistant.modules.plant_assistant.domain.services.conversation_session import (
    ConversationSession,
)
from garden_assistant.modules.plant_assistant.domain.services.identification_flow import (
    IdentificationFlow,
)
from garden_assistant.modules.plant_assistant.domain.services.model_service import ModelService
from garden_assistant.modules.plant_assistant.domain.services.share_service import ShareService
from garden_assistant.modules.plant_assistant.infrastructure.external.gemini_model_service import (
    GeminiModelService,
)
from garden_assistant.modules.reminders.domain.services.reminder_notifier import (
    BufferedAlertSink,
    LoggingAlertSink,
    ReminderNotifier,
)
from garden_assistant.modules.reminders.domain.services.reminder_store import (
    Clock,
    ReminderStore,
    system_clock,
)

logger = get_logger(__name__)


@dataclass
class AppServices:
    """Service objects shared by all requests of one process."""

    settings: Settings
    storage: KeyValueStorage
    alert_buffer: BufferedAlertSink
    reminder_store: ReminderStore
    model_service: ModelService
    conversation: ConversationSession
    identification: IdentificationFlow
    share_service: ShareService


def build_services(
    settings: Optional[Settings] = None,
    model_service: Optional[ModelService] = None,
    storage: Optional[KeyValueStorage] = None,
    clock: Clock = system_clock,
) -> AppServices:
    """
    Construct every service once.

    Args:
        settings: Application settings (defaults to get_settings())
        model_service: Generative model; defaults to Gemini from settings
        storage: Key-value storage; defaults to a file store under STORAGE_DIR
        clock: Epoch-millisecond clock for reminder evaluation
    """
    settings = settings or get_settings()

    if storage is None:
        storage = create_storage(settings.storage_path)
    if model_service is None:
        model_service = GeminiModelService(create_gemini_client(settings.get_model_api_config()))
        if not settings.model_configured:
            logger.warning("GOOGLE_GEMINI_API_KEY is not set; model calls will fail")

    alert_buffer = BufferedAlertSink()
    notifier = ReminderNotifier(sinks=[LoggingAlertSink(), alert_buffer])
    reminder_store = ReminderStore(
        storage,
        storage_key=settings.REMINDER_STORAGE_KEY,
        clock=clock,
        notifier=notifier,
    )

    conversation = ConversationSession(model_service)
    identification = IdentificationFlow(
        model_service,
        conversation,
        max_image_size=settings.MAX_IMAGE_SIZE,
    )

    return AppServices(
        settings=settings,
        storage=storage,
        alert_buffer=alert_buffer,
        reminder_store=reminder_store,
        model_service=model_service,
        conversation=conversation,
        identification=identification,
        share_service=ShareService(),
    )


def get_services(request: Request) -> AppServices:
    return request.app.state.services


def get_reminder_store(request: Request) -> ReminderStore:
    return get_services(request).reminder_store


def get_alert_buffer(request: Request) -> BufferedAlertSink:
    return get_services(request).alert_buffer


def get_conversation(request: Request) -> ConversationSession:
    return get_services(request).conversation


def get_identification_flow(request: Request) -> IdentificationFlow:
    return get_services(request).identification


def get_share_service(request: Request) -> ShareService:
    return get_services(request).share_service


def get_model_service(request: Request) -> ModelService:
    return get_services(request).model_service
