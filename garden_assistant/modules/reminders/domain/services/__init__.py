# 📄 File: garden_assistant/modules/reminders/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the reminder logic: keeping the reminder list and raising "time to water" alerts
# 🧪 Purpose (Technical Summary):
# Domain services package for reminder persistence and due-date notification
# 🔗 Dependencies:
# reminder_store.py, reminder_notifier.py
# 🔄 Connected Modules / Calls From:
# Reminders API, service wiring

from .reminder_notifier import (
    AlertSink,
    BufferedAlertSink,
    LoggingAlertSink,
    ReminderAlert,
    ReminderNotifier,
)
from .reminder_store import ReminderStore, DEFAULT_STORAGE_KEY, system_clock

__all__ = [
    "AlertSink",
    "BufferedAlertSink",
    "LoggingAlertSink",
    "ReminderAlert",
    "ReminderNotifier",
    "ReminderStore",
    "DEFAULT_STORAGE_KEY",
    "system_clock",
]
