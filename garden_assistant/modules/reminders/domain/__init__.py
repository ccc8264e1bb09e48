# 📄 File: garden_assistant/modules/reminders/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules for watering reminders, independent of the web API
# 🧪 Purpose (Technical Summary):
# Domain layer for reminders: models and services
# 🔄 Connected Modules / Calls From:
# Presentation layer, service wiring
