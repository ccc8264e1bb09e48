# 📄 File: garden_assistant/modules/reminders/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the watering reminder feature: saving how often each plant needs water and
# reminding the user when the day comes
# 🧪 Purpose (Technical Summary):
# Package initialization for the reminders module (domain + presentation layers)
# 🔗 Dependencies:
# pydantic, FastAPI, garden_assistant.shared
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router, shared.core.dependencies

"""
Reminders Module

- Reminder Store: persisted reminder set, replace-by-plant-name, derived next dates
- Reminder Notifier: one-shot alerts for reminders due around now, on every load
- Presentation: /reminders endpoints
"""

__version__ = "1.0.0"
__module_name__ = "reminders"
__description__ = "Watering reminder scheduling and persistence"

__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
]
