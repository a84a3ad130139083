"""Tests for due classification and reminder listing order."""

from datetime import datetime, timedelta, timezone

import pytest

from app.modules.care_management.domain.models.care_log import CareActivityType
from app.modules.care_management.domain.models.due_state import DueStatus, ReminderWindow
from app.modules.care_management.domain.models.reminder import CareFrequency, NotificationMethod, ReminderConfig
from app.modules.care_management.domain.services.reminder_scheduler import (
    ReminderScheduler,
    classify_due,
    days_overdue,
    list_reminders,
)

DUE_AT = datetime(2024, 1, 10, 9, 0, tzinfo=timezone.utc)


class TestClassifyDue:
    def test_beyond_lookahead_is_excluded(self):
        assert classify_due(DUE_AT, DUE_AT - timedelta(hours=49)) is None

    def test_lookahead_boundary_is_upcoming(self):
        assert classify_due(DUE_AT, DUE_AT - timedelta(hours=48)) == DueStatus.UPCOMING

    def test_due_instant_is_due(self):
        assert classify_due(DUE_AT, DUE_AT) == DueStatus.DUE

    def test_within_grace_is_due(self):
        assert classify_due(DUE_AT, DUE_AT + timedelta(hours=23, minutes=59)) == DueStatus.DUE

    def test_grace_boundary_is_overdue(self):
        assert classify_due(DUE_AT, DUE_AT + timedelta(hours=24)) == DueStatus.OVERDUE

    def test_custom_window(self):
        window = ReminderWindow(lookahead=timedelta(0), grace_period=timedelta(hours=1))
        assert classify_due(DUE_AT, DUE_AT - timedelta(minutes=1), window) is None
        assert classify_due(DUE_AT, DUE_AT + timedelta(hours=1), window) == DueStatus.OVERDUE

    def test_negative_window_is_rejected(self):
        with pytest.raises(ValueError):
            ReminderWindow(grace_period=timedelta(hours=-1))


@pytest.mark.parametrize(
    "elapsed, expected",
    [
        (timedelta(hours=-5), 0),
        (timedelta(hours=23), 0),
        (timedelta(days=1), 1),
        (timedelta(days=1, hours=23), 1),
        (timedelta(days=3, minutes=1), 3),
    ],
)
def test_days_overdue_floors_whole_days(elapsed, expected):
    assert days_overdue(DUE_AT, DUE_AT + elapsed) == expected


class TestListReminders:
    def test_weekly_watering_one_day_overdue(self, make_plant, day):
        plant = make_plant(watering=CareFrequency.WEEKLY)

        reminders = list_reminders([plant], now=day(8))

        assert len(reminders) == 1
        assert reminders[0].status == DueStatus.OVERDUE
        assert reminders[0].days_overdue == 1
        assert reminders[0].due_at == day(7)

    def test_every_three_days_upcoming(self, make_plant, day):
        plant = make_plant(watering=CareFrequency.EVERY_3_DAYS, last_watered_at=day(5))

        reminders = list_reminders([plant], now=day(7))

        assert [(r.status, r.due_at) for r in reminders] == [(DueStatus.UPCOMING, day(8))]
        assert reminders[0].days_overdue == 0

    def test_as_needed_never_listed(self, make_plant, day):
        plant = make_plant(watering_reminder=ReminderConfig(frequency=CareFrequency.AS_NEEDED))

        for elapsed in (1, 30, 365, 3650):
            assert list_reminders([plant], now=day(elapsed)) == []

    def test_disabled_reminder_never_listed(self, make_plant, day):
        plant = make_plant(watering=None)
        assert list_reminders([plant], now=day(100)) == []

    def test_far_future_due_dates_are_excluded(self, make_plant, day):
        plant = make_plant(watering=CareFrequency.MONTHLY)
        assert list_reminders([plant], now=day(10)) == []

    def test_ordering_overdue_due_upcoming(self, make_plant, day):
        now = day(19.5)
        plants = [
            make_plant("p-soon", last_watered_at=day(13)),    # due day 20 -> upcoming
            make_plant("p-far", last_watered_at=day(18)),     # due day 25 -> excluded
            make_plant("p-less", last_watered_at=day(11)),    # due day 18 -> 1 day overdue
            make_plant("p-due", last_watered_at=day(12)),     # due day 19 -> due
            make_plant("p-most", last_watered_at=day(9)),     # due day 16 -> 3 days overdue
        ]

        reminders = list_reminders(plants, now=now)

        assert [r.plant_instance_id for r in reminders] == ["p-most", "p-less", "p-due", "p-soon"]
        assert [r.status for r in reminders] == [
            DueStatus.OVERDUE, DueStatus.OVERDUE, DueStatus.DUE, DueStatus.UPCOMING,
        ]
        assert [r.days_overdue for r in reminders] == [3, 1, 0, 0]

    def test_ties_break_on_plant_then_activity(self, make_plant, day):
        plants = [
            make_plant("p-b", fertilizing=CareFrequency.WEEKLY),
            make_plant("p-a", fertilizing=CareFrequency.WEEKLY),
        ]

        reminders = list_reminders(plants, now=day(9))

        assert [(r.plant_instance_id, r.activity_type) for r in reminders] == [
            ("p-a", CareActivityType.FERTILIZING),
            ("p-a", CareActivityType.WATERING),
            ("p-b", CareActivityType.FERTILIZING),
            ("p-b", CareActivityType.WATERING),
        ]

    def test_reminder_carries_owner_and_channel(self, make_plant, day):
        plant = make_plant(
            user_id="user-42",
            watering_reminder=ReminderConfig(
                frequency=CareFrequency.DAILY, notification_method=NotificationMethod.PUSH
            ),
        )

        (reminder,) = list_reminders([plant], now=day(1))

        assert reminder.user_id == "user-42"
        assert reminder.notification_method == NotificationMethod.PUSH
        assert reminder.activity_type == CareActivityType.WATERING

    def test_due_dates_are_in_requested_timezone(self, make_plant, day):
        plant = make_plant(watering=CareFrequency.DAILY)

        (reminder,) = list_reminders([plant], now=day(1), tz="Asia/Tokyo")

        assert reminder.due_at.utcoffset() == timedelta(hours=9)

    def test_listing_is_pure(self, make_plant, day):
        plants = [make_plant("p-1"), make_plant("p-2", last_watered_at=day(3))]
        snapshot = [plant.model_dump() for plant in plants]
        scheduler = ReminderScheduler()

        first = scheduler.list_reminders(plants, now=day(9))
        second = scheduler.list_reminders(plants, now=day(9))

        assert first == second
        assert [plant.model_dump() for plant in plants] == snapshot

    def test_iter_reminders_is_lazy_iterator(self, make_plant, day):
        iterator = ReminderScheduler().iter_reminders([make_plant()], now=day(8))
        assert next(iterator).status == DueStatus.OVERDUE
        assert next(iterator, None) is None
