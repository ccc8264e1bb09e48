# 📄 File: garden_assistant/modules/plant_assistant/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# The AI model adapters used by the plant assistant
# 🧪 Purpose (Technical Summary):
# External service adapters for the ModelService port
# 🔄 Connected Modules / Calls From:
# Service wiring in shared.core.dependencies

from .gemini_model_service import GeminiChat, GeminiModelService

__all__ = ["GeminiChat", "GeminiModelService"]
