# 📄 File: garden_assistant/shared/infrastructure/external_apis/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the code that talks to outside services, which for this assistant is the Gemini AI.
#
# 🧪 Purpose (Technical Summary):
# External API package exporting the Gemini REST client and its factory.
#
# 🔗 Dependencies:
# - gemini_client.py (aiohttp-based client)
#
# 🔄 Connected Modules / Calls From:
# - plant_assistant.infrastructure.external.gemini_model_service
# - Service wiring and health checks

from .gemini_client import GeminiClient, create_gemini_client

__all__ = [
    "GeminiClient",
    "create_gemini_client",
]
