# 📄 File: garden_assistant/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the assistant's feature modules: plant identification and chat, and watering reminders
# 🧪 Purpose (Technical Summary):
# Feature modules package (plant_assistant, reminders)
