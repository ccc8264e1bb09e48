# 📄 File: garden_assistant/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 of the API: sends photo requests to the plant
# assistant, chat messages to the chat, and reminder requests to the reminders.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregating the health, identification, chat and reminders routers
# with their prefixes and tags, plus an API info endpoint.
# 🔗 Dependencies:
# FastAPI, garden_assistant.api.v1.health, module presentation routers
# 🔄 Connected Modules / Calls From:
# garden_assistant.main

from typing import Dict

from fastapi import APIRouter

from garden_assistant import __version__
from garden_assistant.modules.plant_assistant.presentation.api import (
    chat_router,
    identification_router,
)
from garden_assistant.modules.reminders.presentation.api import reminders_router
from .health import health_router

ROUTE_PREFIXES = {
    "identification": "/identification",
    "chat": "/chat",
    "reminders": "/reminders",
}

API_TAGS = {
    "identification": "Plant Identification",
    "chat": "Chat",
    "reminders": "Watering Reminders",
}

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])
api_v1_router.include_router(
    identification_router,
    prefix=ROUTE_PREFIXES["identification"],
    tags=[API_TAGS["identification"]],
)
api_v1_router.include_router(
    chat_router,
    prefix=ROUTE_PREFIXES["chat"],
    tags=[API_TAGS["chat"]],
)
api_v1_router.include_router(
    reminders_router,
    prefix=ROUTE_PREFIXES["reminders"],
    tags=[API_TAGS["reminders"]],
)


def _get_available_modules() -> Dict[str, str]:
    return {name: f"/api/v1{prefix}" for name, prefix in ROUTE_PREFIXES.items()}


@api_v1_router.get("/",
                   summary="API v1 Information",
                   tags=["API Info"])
async def api_v1_info() -> dict:
    return {
        "version": __version__,
        "api_version": "v1",
        "endpoints": {
            "health_check": "/api/v1/health",
            "detailed_health": "/api/v1/health/detailed",
        },
        "available_modules": _get_available_modules(),
    }
