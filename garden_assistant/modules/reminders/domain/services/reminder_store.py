# 📄 File: garden_assistant/modules/reminders/domain/services/reminder_store.py
# 🧭 Purpose (Layman Explanation):
# Keeps the list of watering reminders: adds or replaces a reminder for a plant, removes one,
# and reads them back sorted by which plant needs water soonest.
# 🧪 Purpose (Technical Summary):
# Reminder set persistence over a single key-value storage key with replace-by-plant-name
# semantics, full rewrite on every mutation, soft failure on corrupted data, and due-date
# evaluation through the ReminderNotifier on every load.
# 🔗 Dependencies:
# pydantic (TypeAdapter for record validation), key-value storage, reminder models, notifier
# 🔄 Connected Modules / Calls From:
# Reminders API endpoints, service wiring in shared.core.dependencies

"""
Reminder Store

Storage is the source of truth: the store keeps no reminders in memory
between calls. Every mutation reads the stored set, applies the change and
writes the whole set back under one key as a JSON array of
`{plantName, interval, startDate}` records.
"""

import json
import time
from typing import Callable, List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from garden_assistant.modules.reminders.domain.models.reminder import (
    DerivedReminder,
    Reminder,
    coerce_interval,
)
from garden_assistant.modules.reminders.domain.services.reminder_notifier import ReminderNotifier
from garden_assistant.shared.core.exceptions import CorruptedDataError, ValidationError
from garden_assistant.shared.infrastructure.storage.key_value_storage import KeyValueStorage
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_KEY = "wateringReminders"

Clock = Callable[[], int]

_reminder_list_adapter = TypeAdapter(List[Reminder])


def system_clock() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class ReminderStore:
    """Owns the persisted reminder set and its derived view."""

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = DEFAULT_STORAGE_KEY,
        clock: Clock = system_clock,
        notifier: Optional[ReminderNotifier] = None,
    ):
        self.storage = storage
        self.storage_key = storage_key
        self.clock = clock
        self.notifier = notifier

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def load(self) -> List[DerivedReminder]:
        """
        Read the stored set and return it derived and sorted by next watering date.

        Due reminders are handed to the notifier once per call.
        """
        now = self.clock()
        derived = self._derive(self._read(), now)

        if self.notifier is not None:
            self.notifier.notify_due(derived, now)

        return derived

    def save(self, plant_name: str, interval) -> List[DerivedReminder]:
        """
        Create or replace the reminder for `plant_name` starting now.

        Args:
            plant_name: Plant the reminder belongs to (unique key)
            interval: Requested interval in days; invalid values become 1

        Returns:
            The full derived reminder list after the change
        """
        if plant_name is None or not str(plant_name).strip():
            raise ValidationError(
                "Plant name is required to save a reminder",
                field="plant_name",
                constraint="non-empty",
            )

        plant_name = str(plant_name).strip()
        now = self.clock()
        reminder = Reminder(
            plant_name=plant_name,
            interval=coerce_interval(interval),
            start_date=now,
        )

        reminders = [r for r in self._read() if r.plant_name != plant_name]
        reminders.append(reminder)
        self._write(reminders)

        logger.log_business_event(
            "reminder_saved",
            f"Watering reminder saved for {plant_name}",
            entity_id=plant_name,
            entity_type="reminder",
            extra={"interval_days": reminder.interval, "requested_interval": str(interval)},
        )

        return self._derive(reminders, now)

    def delete(self, plant_name: str) -> List[DerivedReminder]:
        """Remove the reminder for `plant_name`; unknown names change nothing."""
        plant_name = (plant_name or "").strip()
        now = self.clock()
        reminders = self._read()
        remaining = [r for r in reminders if r.plant_name != plant_name]

        if len(remaining) == len(reminders):
            logger.debug(f"No reminder to delete for {plant_name}")
            return self._derive(reminders, now)

        self._write(remaining)
        logger.log_business_event(
            "reminder_deleted",
            f"Watering reminder deleted for {plant_name}",
            entity_id=plant_name,
            entity_type="reminder",
        )
        return self._derive(remaining, now)

    def has_reminder(self, plant_name: Optional[str]) -> bool:
        plant_name = (plant_name or "").strip()
        if not plant_name:
            return False
        return any(r.plant_name == plant_name for r in self._read())

    # ------------------------------------------------------------------
    # Storage round-trip
    # ------------------------------------------------------------------

    def _read(self) -> List[Reminder]:
        try:
            raw = self.storage.get_item(self.storage_key)
        except CorruptedDataError as e:
            return self._discard(e.message)
        if raw is None:
            return []

        try:
            reminders = _reminder_list_adapter.validate_json(raw)
        except PydanticValidationError as e:
            return self._discard(
                f"{e.error_count()} validation error(s)",
                errors=[err.get("msg") for err in e.errors()[:5]],
            )

        # Later duplicates win so the one-reminder-per-plant rule holds on read too
        by_name = {}
        for reminder in reminders:
            by_name.pop(reminder.plant_name, None)
            by_name[reminder.plant_name] = reminder
        return list(by_name.values())

    def _discard(self, reason: str, **extra) -> List[Reminder]:
        logger.warning(
            "Discarding corrupted reminder data",
            extra={"storage_key": self.storage_key, "reason": reason, **extra},
        )
        self.storage.remove_item(self.storage_key)
        return []

    def _write(self, reminders: List[Reminder]) -> None:
        payload = json.dumps([r.to_record() for r in reminders], ensure_ascii=False)
        self.storage.set_item(self.storage_key, payload)

    @staticmethod
    def _derive(reminders: List[Reminder], now: int) -> List[DerivedReminder]:
        derived = [r.derive(now) for r in reminders]
        derived.sort(key=lambda r: r.next_watering_date)
        return derived
