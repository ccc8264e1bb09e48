# 📄 File: garden_assistant/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the assistant's web API
# 🧪 Purpose (Technical Summary):
# API v1 package: health endpoints and the aggregated router
# 🔄 Connected Modules / Calls From:
# garden_assistant.main
