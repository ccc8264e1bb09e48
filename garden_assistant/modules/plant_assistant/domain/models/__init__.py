# 📄 File: garden_assistant/modules/plant_assistant/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of chat messages and identification results
# 🧪 Purpose (Technical Summary):
# Domain models package for the plant assistant
# 🔄 Connected Modules / Calls From:
# Domain services, presentation schemas

from .chat import ChatMessage, ChatRole, IdentificationResult, SharePayload

__all__ = [
    "ChatMessage",
    "ChatRole",
    "IdentificationResult",
    "SharePayload",
]
