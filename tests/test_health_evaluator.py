"""Tests for rule-based plant health evaluation."""

from datetime import timedelta

import pytest

from app.modules.care_management.domain.models.care_log import CareActivityType, CareLogEntry
from app.modules.care_management.domain.models.plant_instance import HealthStatus
from app.modules.care_management.domain.models.reminder import CareFrequency, ReminderConfig
from app.modules.care_management.domain.services.health_evaluator import evaluate_health


def log(plant_id, activity, performed_at, problem=False, **fields):
    return CareLogEntry(
        plant_instance_id=plant_id,
        activity_type=activity,
        performed_at=performed_at,
        problem_detected=problem,
        **fields,
    )


class TestHealthStatusScale:
    def test_degrade_moves_down_one_level(self):
        assert HealthStatus.EXCELLENT.degrade() == HealthStatus.GOOD

    def test_degrade_floors_at_critical(self):
        assert HealthStatus.POOR.degrade(5) == HealthStatus.CRITICAL

    def test_rank_orders_best_to_worst(self):
        assert [status.rank for status in HealthStatus] == [0, 1, 2, 3, 4]


class TestEvaluateHealth:
    def test_nothing_to_judge_is_good(self, make_plant, day):
        assert evaluate_health(make_plant(watering=None), [], day(100)) == HealthStatus.GOOD

    def test_as_needed_reminder_alone_is_good(self, make_plant, day):
        plant = make_plant(watering_reminder=ReminderConfig(enabled=True, frequency=CareFrequency.AS_NEEDED))
        assert evaluate_health(plant, [], day(100)) == HealthStatus.GOOD

    def test_all_reminders_current_is_excellent(self, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        assert evaluate_health(plant, [], day(8)) == HealthStatus.EXCELLENT

    def test_due_within_grace_does_not_degrade(self, make_plant, day):
        plant = make_plant()
        assert evaluate_health(plant, [], day(7.5)) == HealthStatus.EXCELLENT

    def test_one_overdue_reminder_degrades_one_level(self, make_plant, day):
        assert evaluate_health(make_plant(), [], day(8)) == HealthStatus.GOOD

    def test_each_overdue_reminder_degrades(self, make_plant, day):
        plant = make_plant(fertilizing=CareFrequency.WEEKLY)
        assert evaluate_health(plant, [], day(9)) == HealthStatus.FAIR

    def test_recent_problem_report_degrades(self, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        history = [log(plant.id, CareActivityType.INSPECTION, day(6), problem=True)]

        assert evaluate_health(plant, history, day(8)) == HealthStatus.GOOD

    def test_overdue_and_problem_combine(self, make_plant, day):
        plant = make_plant()
        history = [log(plant.id, CareActivityType.PEST_TREATMENT, day(6), problem=True)]

        assert evaluate_health(plant, history, day(8)) == HealthStatus.FAIR

    def test_later_clean_report_supersedes_problem(self, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        history = [
            log(plant.id, CareActivityType.INSPECTION, day(4), problem=True),
            log(plant.id, CareActivityType.DISEASE_TREATMENT, day(6)),
        ]

        assert evaluate_health(plant, history, day(8)) == HealthStatus.EXCELLENT

    def test_problem_outside_window_is_ignored(self, make_plant, day):
        # Shortest enabled interval is 7 days
        plant = make_plant(last_watered_at=day(18))
        history = [log(plant.id, CareActivityType.INSPECTION, day(10), problem=True)]

        assert evaluate_health(plant, history, day(20)) == HealthStatus.EXCELLENT

    def test_non_condition_activities_never_report_problems(self, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        history = [log(plant.id, CareActivityType.PRUNING, day(6), problem=True)]

        assert evaluate_health(plant, history, day(8)) == HealthStatus.EXCELLENT

    def test_default_problem_window_without_reminders(self, make_plant, day):
        plant = make_plant(watering=None)
        history = [log(plant.id, CareActivityType.INSPECTION, day(0), problem=True)]

        assert evaluate_health(plant, history, day(10)) == HealthStatus.GOOD
        assert evaluate_health(plant, history, day(20)) == HealthStatus.EXCELLENT
        assert evaluate_health(plant, history, day(20), default_problem_window=timedelta(days=30)) == HealthStatus.GOOD

    def test_other_plants_history_is_ignored(self, make_plant, day):
        plant = make_plant(last_watered_at=day(5))
        history = [log("someone-else", CareActivityType.INSPECTION, day(6), problem=True)]

        assert evaluate_health(plant, history, day(8)) == HealthStatus.EXCELLENT

    def test_overdue_reminders_and_problem_stack(self, make_plant, day):
        plant = make_plant(fertilizing=CareFrequency.DAILY, watering=CareFrequency.DAILY)
        history = [log(plant.id, CareActivityType.INSPECTION, day(49.5), problem=True)]

        assert evaluate_health(plant, history, day(50)) == HealthStatus.POOR


class TestEvaluateHealthNeverRaises:
    def test_invalid_reminder_is_ignored(self, make_plant, day):
        broken = ReminderConfig.model_construct(frequency=CareFrequency.CUSTOM, enabled=True)
        plant = make_plant().model_copy(update={"watering_reminder": broken})

        assert evaluate_health(plant, [], day(30)) == HealthStatus.GOOD

    def test_invalid_reminder_does_not_mask_valid_ones(self, make_plant, day):
        broken = ReminderConfig.model_construct(frequency=CareFrequency.CUSTOM, enabled=True)
        plant = make_plant(fertilizing=CareFrequency.WEEKLY).model_copy(update={"watering_reminder": broken})

        assert evaluate_health(plant, [], day(30)) == HealthStatus.GOOD

    def test_unknown_timezone_falls_back_to_utc(self, make_plant, day):
        assert evaluate_health(make_plant(), [], day(8), tz="Not/AZone") == HealthStatus.GOOD

    @pytest.mark.parametrize("tz", ["UTC", "Pacific/Auckland", "America/Los_Angeles"])
    def test_timezone_shifts_but_keeps_rules(self, make_plant, day, tz):
        plant = make_plant(last_watered_at=day(5))
        assert evaluate_health(plant, [], day(6), tz=tz) == HealthStatus.EXCELLENT
