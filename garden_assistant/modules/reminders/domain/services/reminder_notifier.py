# 📄 File: garden_assistant/modules/reminders/domain/services/reminder_notifier.py
# 🧭 Purpose (Layman Explanation):
# Looks at the watering reminders every time they are loaded and, for any plant that needs
# water around today, sends a friendly "don't forget to water" alert.
# 🧪 Purpose (Technical Summary):
# Due-window evaluation over derived reminders with fan-out to pluggable alert sinks.
# Sink failures are logged and never propagate into the reminder load path.
# 🔗 Dependencies:
# reminder domain models, collections.deque, garden_assistant.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# ReminderStore.load(), service wiring, reminders API (drains buffered alerts)

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional

from garden_assistant.modules.reminders.domain.models.reminder import DerivedReminder
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

REMINDER_ALERT_TEMPLATE = '🌿 یادت نره! امروز نوبت آبیاری "{plant_name}" است.'


@dataclass(frozen=True)
class ReminderAlert:
    plant_name: str
    message: str
    next_watering_date: int


class AlertSink(ABC):
    """Destination for reminder alerts. Implementations must return quickly."""

    @abstractmethod
    def deliver(self, alert: ReminderAlert) -> None:
        ...


class LoggingAlertSink(AlertSink):
    """Writes each alert to the application log."""

    def deliver(self, alert: ReminderAlert) -> None:
        logger.info(
            alert.message,
            extra={
                "event_type": "watering_reminder_due",
                "plant_name": alert.plant_name,
                "next_watering_date": alert.next_watering_date,
            },
        )


class BufferedAlertSink(AlertSink):
    """
    Keeps alerts until a consumer drains them.

    The HTTP layer drains this after each reminder load so the browser UI can
    show the alerts raised by that load.
    """

    def __init__(self, maxlen: int = 100):
        self._alerts: Deque[ReminderAlert] = deque(maxlen=maxlen)

    def deliver(self, alert: ReminderAlert) -> None:
        self._alerts.append(alert)

    def drain(self) -> List[ReminderAlert]:
        alerts = list(self._alerts)
        self._alerts.clear()
        return alerts

    def __len__(self) -> int:
        return len(self._alerts)


class ReminderNotifier:
    """
    Raises one alert per due reminder per evaluation.

    There is no memory between evaluations: loading again inside the due
    window raises the alert again.
    """

    def __init__(self, sinks: Optional[Iterable[AlertSink]] = None):
        self.sinks: List[AlertSink] = list(sinks) if sinks is not None else [LoggingAlertSink()]

    def notify_due(self, reminders: Iterable[DerivedReminder], now: int) -> List[ReminderAlert]:
        alerts = [
            ReminderAlert(
                plant_name=reminder.plant_name,
                message=REMINDER_ALERT_TEMPLATE.format(plant_name=reminder.plant_name),
                next_watering_date=reminder.next_watering_date,
            )
            for reminder in reminders
            if reminder.is_due(now)
        ]

        for alert in alerts:
            self._deliver(alert)

        return alerts

    def _deliver(self, alert: ReminderAlert) -> None:
        for sink in self.sinks:
            try:
                sink.deliver(alert)
            except Exception as e:
                logger.error(
                    f"Alert sink {type(sink).__name__} failed for {alert.plant_name}: {e}",
                    extra={"plant_name": alert.plant_name, "sink": type(sink).__name__},
                    exc_info=True,
                )
