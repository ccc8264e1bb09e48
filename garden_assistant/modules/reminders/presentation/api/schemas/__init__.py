# 📄 File: garden_assistant/modules/reminders/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The data formats for reminder requests and responses
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the reminders API
# 🔄 Connected Modules / Calls From:
# garden_assistant.modules.reminders.presentation.api.v1.reminders

from .reminder_schemas import (
    ReminderAlertResponse,
    ReminderListResponse,
    ReminderResponse,
    ReminderSaveRequest,
)

__all__ = [
    "ReminderAlertResponse",
    "ReminderListResponse",
    "ReminderResponse",
    "ReminderSaveRequest",
]
