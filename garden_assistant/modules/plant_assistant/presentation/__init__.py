# 📄 File: garden_assistant/modules/plant_assistant/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the plant assistant
# 🧪 Purpose (Technical Summary):
# Presentation layer for the plant assistant: HTTP schemas and routers
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router
