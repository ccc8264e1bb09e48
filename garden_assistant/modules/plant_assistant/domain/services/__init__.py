# 📄 File: garden_assistant/modules/plant_assistant/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the plant assistant logic: identifying plants, chatting, sharing and voice input
# 🧪 Purpose (Technical Summary):
# Domain services package for the plant assistant
# 🔗 Dependencies:
# model_service.py (port), conversation_session.py, identification_flow.py,
# reply_parser.py, share_service.py, speech_capture.py
# 🔄 Connected Modules / Calls From:
# Plant assistant API, service wiring

from .model_service import ChatHandle, ModelService
from .conversation_session import ConversationSession, SessionState
from .identification_flow import IdentificationFlow, SelectedImage
from .reply_parser import extract_introduction, extract_plant_name
from .share_service import ShareService
from .speech_capture import (
    SpeechCaptureStream,
    SpeechRecognizer,
    TranscriptEvent,
    TranscriptEventType,
)

__all__ = [
    "ChatHandle",
    "ModelService",
    "ConversationSession",
    "SessionState",
    "IdentificationFlow",
    "SelectedImage",
    "extract_introduction",
    "extract_plant_name",
    "ShareService",
    "SpeechCaptureStream",
    "SpeechRecognizer",
    "TranscriptEvent",
    "TranscriptEventType",
]
