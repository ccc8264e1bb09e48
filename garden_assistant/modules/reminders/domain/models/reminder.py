# 📄 File: garden_assistant/modules/reminders/domain/models/reminder.py
# 🧭 Purpose (Layman Explanation):
# Defines what a watering reminder is (which plant, every how many days, starting when)
# and how to work out the next day the plant needs water.
# 🧪 Purpose (Technical Summary):
# Domain models for the stored Reminder record and the view-only DerivedReminder,
# plus the next-watering-date projection and interval coercion rules.
# 🔗 Dependencies:
# pydantic, datetime, typing
# 🔄 Connected Modules / Calls From:
# reminder_store.py, reminder_notifier.py, reminder schemas

import re
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

MS_PER_DAY = 24 * 60 * 60 * 1000
MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 3650
# 2100-01-01T00:00:00Z; keeps every projected date inside the datetime range
MAX_START_DATE_MS = 4_102_444_800_000

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")


def coerce_interval(value: Any) -> int:
    """
    Coerce user input into a valid watering interval in days.

    Anything that is not a whole number of at least one day becomes 1;
    whole numbers above MAX_INTERVAL_DAYS are capped at it.
    Applied where the value enters the system, never inside date math.
    """
    if isinstance(value, bool):
        return MIN_INTERVAL_DAYS
    if isinstance(value, float):
        if not value.is_integer():
            return MIN_INTERVAL_DAYS
        value = int(value)
    if isinstance(value, str):
        value = value.strip()
        if not _INTEGER_TEXT.match(value):
            return MIN_INTERVAL_DAYS
        value = int(value)
    if not isinstance(value, int) or value < MIN_INTERVAL_DAYS:
        return MIN_INTERVAL_DAYS
    return min(value, MAX_INTERVAL_DAYS)


def compute_next_watering_date(start_date: int, interval: int, now: int) -> int:
    """
    Project the next watering timestamp (epoch ms) after `now`.

    The result is `start_date` advanced by a whole number of intervals and is
    always strictly later than `now`.
    """
    interval_ms = interval * MS_PER_DAY
    intervals_passed = (now - start_date) // interval_ms
    return start_date + (intervals_passed + 1) * interval_ms


def ms_to_datetime(timestamp_ms: int) -> datetime:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


class Reminder(BaseModel):
    """
    A recurring watering schedule for one plant, as persisted.

    Serialized with camelCase keys (`plantName`, `interval`, `startDate`);
    unknown keys in stored records are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    plant_name: str = Field(..., alias="plantName", min_length=1)
    interval: StrictInt = Field(..., ge=MIN_INTERVAL_DAYS, le=MAX_INTERVAL_DAYS, description="Interval in days")
    start_date: StrictInt = Field(
        ..., alias="startDate", ge=0, le=MAX_START_DATE_MS, description="Epoch milliseconds"
    )

    @field_validator("plant_name")
    @classmethod
    def validate_plant_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Plant name must not be blank")
        return v

    def project_next_watering(self, now: int) -> int:
        return compute_next_watering_date(self.start_date, self.interval, now)

    def derive(self, now: int) -> "DerivedReminder":
        return DerivedReminder(
            plant_name=self.plant_name,
            interval=self.interval,
            start_date=self.start_date,
            next_watering_date=self.project_next_watering(now),
        )

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class DerivedReminder(Reminder):
    """Reminder plus its projected next watering date. Never stored."""

    next_watering_date: int = Field(..., alias="nextWateringDate")

    @property
    def next_watering_at(self) -> datetime:
        return ms_to_datetime(self.next_watering_date)

    @property
    def started_at(self) -> datetime:
        return ms_to_datetime(self.start_date)

    def is_due(self, now: int) -> bool:
        """True when now is within one day either side of the next watering date."""
        return self.next_watering_date - MS_PER_DAY <= now < self.next_watering_date + MS_PER_DAY

    def to_reminder(self) -> Reminder:
        return Reminder(plant_name=self.plant_name, interval=self.interval, start_date=self.start_date)
