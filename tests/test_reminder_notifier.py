from garden_assistant.modules.reminders.domain.models.reminder import MS_PER_DAY, Reminder
from garden_assistant.modules.reminders.domain.services.reminder_notifier import (
    AlertSink,
    BufferedAlertSink,
    ReminderNotifier,
)

from conftest import NOW


class ExplodingSink(AlertSink):
    def deliver(self, alert):
        raise RuntimeError("sink offline")


def derived(plant_name, interval, days_since_start):
    reminder = Reminder(
        plant_name=plant_name,
        interval=interval,
        start_date=NOW - int(days_since_start * MS_PER_DAY),
    )
    return reminder.derive(NOW)


def test_only_due_reminders_raise_alerts():
    buffer = BufferedAlertSink()
    notifier = ReminderNotifier(sinks=[buffer])

    alerts = notifier.notify_due(
        [derived("مونسترا", 7, 6.5), derived("کاکتوس", 7, 3), derived("پوتوس", 7, 13.5)],
        NOW,
    )

    assert [a.plant_name for a in alerts] == ["مونسترا", "پوتوس"]
    assert buffer.drain() == alerts


def test_alert_message_names_the_plant():
    notifier = ReminderNotifier(sinks=[])

    [alert] = notifier.notify_due([derived("مونسترا", 7, 6.5)], NOW)

    assert alert.message == '🌿 یادت نره! امروز نوبت آبیاری "مونسترا" است.'
    assert alert.next_watering_date == NOW + MS_PER_DAY // 2


def test_failing_sink_does_not_block_other_sinks():
    buffer = BufferedAlertSink()
    notifier = ReminderNotifier(sinks=[ExplodingSink(), buffer])

    notifier.notify_due([derived("مونسترا", 1, 0)], NOW)

    assert len(buffer) == 1


def test_default_sink_logs_alerts():
    notifier = ReminderNotifier()

    alerts = notifier.notify_due([derived("مونسترا", 1, 0)], NOW)

    assert len(alerts) == 1


def test_buffer_drain_empties_and_respects_maxlen():
    buffer = BufferedAlertSink(maxlen=2)
    notifier = ReminderNotifier(sinks=[buffer])

    for name in ["الف", "ب", "پ"]:
        notifier.notify_due([derived(name, 1, 0)], NOW)

    assert [a.plant_name for a in buffer.drain()] == ["ب", "پ"]
    assert buffer.drain() == []
