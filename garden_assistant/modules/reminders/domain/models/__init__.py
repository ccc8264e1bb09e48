# 📄 File: garden_assistant/modules/reminders/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the reminder data models: the saved reminder and the view that shows its next watering day
# 🧪 Purpose (Technical Summary):
# Package initialization for reminder domain models and scheduling helpers
# 🔗 Dependencies:
# reminder.py
# 🔄 Connected Modules / Calls From:
# Reminder store, notifier, presentation schemas

from .reminder import (
    Reminder,
    DerivedReminder,
    MS_PER_DAY,
    MIN_INTERVAL_DAYS,
    coerce_interval,
    compute_next_watering_date,
    ms_to_datetime,
)

__all__ = [
    "Reminder",
    "DerivedReminder",
    "MS_PER_DAY",
    "MIN_INTERVAL_DAYS",
    "coerce_interval",
    "compute_next_watering_date",
    "ms_to_datetime",
]
