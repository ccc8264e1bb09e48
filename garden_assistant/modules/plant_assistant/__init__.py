# 📄 File: garden_assistant/modules/plant_assistant/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant assistant feature: recognizing a plant from a photo and chatting
# with the AI about how to care for it
# 🧪 Purpose (Technical Summary):
# Package initialization for the plant assistant module (domain, infrastructure, presentation)
# 🔗 Dependencies:
# pydantic, aiohttp (via the Gemini client), FastAPI, garden_assistant.shared
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router, shared.core.dependencies

"""
Plant Assistant Module

- Identification Flow: image selection, model analysis, plant name extraction
- Conversation Session: ordered chat turns with optimistic sends and rollback
- Share Service: share title and body for the identified plant
- Speech Capture Stream: recognizer results as a cancellable event stream
- Presentation: /identification and /chat endpoints
"""

__version__ = "1.0.0"
__module_name__ = "plant_assistant"
__description__ = "Plant identification and care conversation"

__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
]
