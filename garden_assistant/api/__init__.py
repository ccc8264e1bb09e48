# 📄 File: garden_assistant/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The front door of the assistant's web API: versioned routes and request helpers
# 🧪 Purpose (Technical Summary):
# API package: versioned routers and HTTP middleware
# 🔄 Connected Modules / Calls From:
# garden_assistant.main
