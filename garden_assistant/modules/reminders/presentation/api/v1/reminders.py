# 📄 File: garden_assistant/modules/reminders/presentation/api/v1/reminders.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints for watering reminders: see your reminders (and which plants need
# water today), set a reminder for a plant, and remove one.
#
# 🧪 Purpose (Technical Summary):
# FastAPI reminder endpoints over the ReminderStore. Listing runs the due-date evaluation
# and returns the alerts raised by that load; saving defaults the plant name to the plant
# identified most recently.
#
# 🔗 Dependencies:
# - FastAPI router, Depends, status codes
# - ReminderStore, BufferedAlertSink, IdentificationFlow (via shared.core.dependencies)
# - reminder_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - garden_assistant.api.v1.router (mounted at /reminders)

"""
Reminders API Endpoints

Endpoints:
- GET /: Derived reminders sorted by next watering date, plus alerts raised by this load
- POST /: Create or replace the reminder for a plant
- DELETE /{plant_name}: Remove a reminder (no-op when missing)
"""

from fastapi import APIRouter, Depends, status

from garden_assistant.modules.plant_assistant.domain.services.identification_flow import (
    IdentificationFlow,
)
from garden_assistant.modules.reminders.domain.services.reminder_notifier import BufferedAlertSink
from garden_assistant.modules.reminders.domain.services.reminder_store import ReminderStore
from garden_assistant.modules.reminders.presentation.api.schemas.reminder_schemas import (
    ReminderListResponse,
    ReminderSaveRequest,
)
from garden_assistant.shared.core.dependencies import (
    get_alert_buffer,
    get_identification_flow,
    get_reminder_store,
)
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

reminders_router = APIRouter()


@reminders_router.get(
    "",
    response_model=ReminderListResponse,
    summary="List watering reminders",
    description="Load reminders sorted by next watering date and report the ones due around now",
)
async def list_reminders(
    store: ReminderStore = Depends(get_reminder_store),
    alert_buffer: BufferedAlertSink = Depends(get_alert_buffer),
) -> ReminderListResponse:
    reminders = store.load()
    return ReminderListResponse.build(reminders, alert_buffer.drain())


@reminders_router.post(
    "",
    response_model=ReminderListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a watering reminder",
    description="Create or replace the reminder for a plant, starting now",
    responses={
        201: {"description": "Reminder saved; full reminder list returned"},
        422: {"description": "No plant name given and no plant identified"},
    },
)
async def save_reminder(
    request: ReminderSaveRequest,
    store: ReminderStore = Depends(get_reminder_store),
    identification: IdentificationFlow = Depends(get_identification_flow),
) -> ReminderListResponse:
    plant_name = request.plant_name or identification.plant_name
    reminders = store.save(plant_name, request.interval)
    return ReminderListResponse.build(reminders)


@reminders_router.delete(
    "/{plant_name}",
    response_model=ReminderListResponse,
    summary="Delete a watering reminder",
    description="Remove the reminder for a plant; unknown names leave the list unchanged",
)
async def delete_reminder(
    plant_name: str,
    store: ReminderStore = Depends(get_reminder_store),
) -> ReminderListResponse:
    reminders = store.delete(plant_name)
    return ReminderListResponse.build(reminders)
