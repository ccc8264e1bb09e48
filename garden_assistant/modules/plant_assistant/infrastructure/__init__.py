# 📄 File: garden_assistant/modules/plant_assistant/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections from the plant assistant to outside services such as the AI model
# 🧪 Purpose (Technical Summary):
# Infrastructure layer for the plant assistant: adapters implementing domain ports
# 🔄 Connected Modules / Calls From:
# Service wiring in shared.core.dependencies
