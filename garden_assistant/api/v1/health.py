# 📄 File: garden_assistant/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the assistant is working: is the AI
# connection set up, can reminders be saved, and how busy is the machine.
# 🧪 Purpose (Technical Summary):
# Liveness and detailed component status (model service, reminder storage, system
# resources via psutil) with healthy/degraded/unhealthy classification.
# 🔗 Dependencies:
# FastAPI, psutil, garden_assistant.shared.core.dependencies, settings
# 🔄 Connected Modules / Calls From:
# garden_assistant.api.v1.router, monitoring

import platform
import sys
from datetime import datetime
from typing import Any, Dict

import psutil
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from garden_assistant.shared.config.settings import get_settings
from garden_assistant.shared.core.dependencies import AppServices, get_services
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

health_router = APIRouter()

SERVICE_NAME = "garden-assistant-api"

# Application start time for uptime calculation
_app_start_time = datetime.now()


@health_router.get("/health",
                   summary="Basic Health Check",
                   description="Liveness check for monitoring")
async def health_check() -> JSONResponse:
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        }
    )


@health_router.get("/health/detailed",
                   summary="Detailed Health Check",
                   description="Status of the model service, reminder storage and system resources")
async def detailed_health_check(services: AppServices = Depends(get_services)) -> JSONResponse:
    """
    Checks:
    - Model service configuration and call statistics
    - Reminder storage writability and stored reminder count
    - System resources

    A missing model key or unwritable storage degrades the service; it
    keeps answering because each feature fails on its own.
    """
    start_time = datetime.now()
    overall_status = "healthy"
    components: Dict[str, Any] = {}

    try:
        model_info = services.model_service.describe()
        configured = model_info.get("configured", True)
        components["model_service"] = {
            "status": "healthy" if configured else "degraded",
            **model_info,
        }
        if not configured:
            overall_status = "degraded"
    except Exception as e:
        components["model_service"] = {"status": "unhealthy", "error": str(e)}
        overall_status = "degraded"

    try:
        writable = services.storage.is_writable()
        components["storage"] = {
            "status": "healthy" if writable else "degraded",
            "backend": type(services.storage).__name__,
            "writable": writable,
        }
        if not writable:
            overall_status = "degraded"
    except Exception as e:
        components["storage"] = {"status": "unhealthy", "error": str(e)}
        overall_status = "degraded"

    try:
        system_metrics = _get_system_metrics()
        components["system"] = system_metrics
        if (system_metrics["cpu_percent"] > 90 or
                system_metrics["memory_percent"] > 90 or
                system_metrics["disk_percent"] > 95):
            overall_status = "degraded"
    except Exception as e:
        logger.warning(f"System metrics unavailable: {e}")
        components["system"] = {"status": "error", "error": str(e)}
        overall_status = "degraded"

    return JSONResponse(
        status_code=200,
        content={
            "status": overall_status,
            "timestamp": datetime.now().isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
            "uptime_seconds": (datetime.now() - _app_start_time).total_seconds(),
            "response_time_seconds": (datetime.now() - start_time).total_seconds(),
            "components": components,
        }
    )


def _get_system_metrics() -> Dict[str, Any]:
    memory = psutil.virtual_memory()
    disk = psutil.disk_usage("/")
    return {
        "status": "healthy",
        "cpu_percent": psutil.cpu_percent(interval=None),
        "memory_percent": memory.percent,
        "disk_percent": disk.percent,
        "python_version": sys.version.split()[0],
        "platform": platform.platform(),
    }
