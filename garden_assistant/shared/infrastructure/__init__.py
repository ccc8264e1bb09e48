# 📄 File: garden_assistant/shared/infrastructure/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the plumbing the assistant relies on: local storage and the AI service connection.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure package for key-value storage and external API clients.
#
# 🔄 Connected Modules / Calls From:
# - Domain services through their injected collaborators
