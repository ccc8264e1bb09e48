# 📄 File: garden_assistant/modules/reminders/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the reminder endpoints
# 🧪 Purpose (Technical Summary):
# API version 1 package for reminders
# 🔄 Connected Modules / Calls From:
# garden_assistant.modules.reminders.presentation.api
