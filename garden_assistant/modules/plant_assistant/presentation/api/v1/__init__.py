# 📄 File: garden_assistant/modules/plant_assistant/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the plant assistant endpoints
# 🧪 Purpose (Technical Summary):
# API version 1 package for identification and chat
# 🔄 Connected Modules / Calls From:
# garden_assistant.modules.plant_assistant.presentation.api
