# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for plant photos and the gardening chat
# 🧪 Purpose (Technical Summary):
# API package exposing the identification and chat routers
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router

from .v1.chat import chat_router
from .v1.identification import identification_router

__all__ = ["chat_router", "identification_router"]
