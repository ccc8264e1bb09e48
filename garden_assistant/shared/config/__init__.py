# 📄 File: garden_assistant/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the assistant where to keep reminders, which AI model
# to talk to, and how chatty its logs should be.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the settings model and its
# cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - garden_assistant.main (application startup)
# - All modules requiring configuration

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
