# 📄 File: garden_assistant/modules/reminders/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the reminder feature
# 🧪 Purpose (Technical Summary):
# Presentation layer for reminders: HTTP schemas and routers
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router
