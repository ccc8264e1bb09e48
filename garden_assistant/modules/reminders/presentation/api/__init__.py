# 📄 File: garden_assistant/modules/reminders/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for watering reminders
# 🧪 Purpose (Technical Summary):
# API package exposing the reminders router
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router

from .v1.reminders import reminders_router

__all__ = ["reminders_router"]
