# 📄 File: garden_assistant/modules/reminders/presentation/api/schemas/reminder_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a reminder looks like when the app sends it to the screen, and what the
# user sends when asking to be reminded to water a plant.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the reminders API. Interval input is accepted
# loosely and coerced by the store; responses expose both epoch milliseconds and ISO dates.
# 🔗 Dependencies:
# pydantic, reminder domain models, ReminderAlert
# 🔄 Connected Modules / Calls From:
# garden_assistant.modules.reminders.presentation.api.v1.reminders

"""
Reminder API Schemas

Request Schemas:
- ReminderSaveRequest: create or replace the reminder for a plant

Response Schemas:
- ReminderResponse: one reminder with its projected next watering date
- ReminderAlertResponse: a due-reminder alert raised by a load
- ReminderListResponse: sorted reminders plus alerts
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from garden_assistant.modules.reminders.domain.models.reminder import DerivedReminder, ms_to_datetime
from garden_assistant.modules.reminders.domain.services.reminder_notifier import ReminderAlert

DEFAULT_INTERVAL_DAYS = 7


class ReminderSaveRequest(BaseModel):
    """Save request. Omitting plant_name uses the currently identified plant."""

    plant_name: Optional[str] = Field(None, description="Plant name; defaults to the identified plant")
    interval: Union[int, float, str, None] = Field(
        DEFAULT_INTERVAL_DAYS,
        description="Watering interval in days; values below 1 or non-integers become 1",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"plant_name": "مونسترا", "interval": 7}}
    )


class ReminderResponse(BaseModel):
    plant_name: str
    interval: int
    start_date: int = Field(..., description="Epoch milliseconds")
    next_watering_date: int = Field(..., description="Epoch milliseconds")
    started_at: datetime
    next_watering_at: datetime

    @classmethod
    def from_domain(cls, reminder: DerivedReminder) -> "ReminderResponse":
        return cls(
            plant_name=reminder.plant_name,
            interval=reminder.interval,
            start_date=reminder.start_date,
            next_watering_date=reminder.next_watering_date,
            started_at=reminder.started_at,
            next_watering_at=reminder.next_watering_at,
        )


class ReminderAlertResponse(BaseModel):
    plant_name: str
    message: str
    next_watering_at: datetime

    @classmethod
    def from_domain(cls, alert: ReminderAlert) -> "ReminderAlertResponse":
        return cls(
            plant_name=alert.plant_name,
            message=alert.message,
            next_watering_at=ms_to_datetime(alert.next_watering_date),
        )


class ReminderListResponse(BaseModel):
    reminders: List[ReminderResponse] = Field(default_factory=list)
    alerts: List[ReminderAlertResponse] = Field(default_factory=list)
    total: int = 0

    @classmethod
    def build(
        cls,
        reminders: List[DerivedReminder],
        alerts: Optional[List[ReminderAlert]] = None,
    ) -> "ReminderListResponse":
        return cls(
            reminders=[ReminderResponse.from_domain(r) for r in reminders],
            alerts=[ReminderAlertResponse.from_domain(a) for a in alerts or []],
            total=len(reminders),
        )
