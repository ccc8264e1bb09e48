# 📄 File: garden_assistant/modules/plant_assistant/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of the plant assistant, independent of the AI provider and the web API
# 🧪 Purpose (Technical Summary):
# Domain layer for the plant assistant: models, prompts, the model service port and services
# 🔄 Connected Modules / Calls From:
# Infrastructure adapters, presentation layer, service wiring
