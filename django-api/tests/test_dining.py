"""Unit tests for dining reservation alerts.

Run with: pytest tests/test_dining.py -v
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from dvc.domain import MealType, PlannedDay, PlannedMeal
from dvc.domain.dining import dining_alert_trigger, plan_dining_alerts

EASTERN = ZoneInfo("America/New_York")


class TestDiningAlertTrigger:
    def test_sixty_days_before_at_six_am(self):
        trigger = dining_alert_trigger(date(2026, 7, 4))
        assert trigger == datetime(2026, 5, 5, 6, 0, tzinfo=EASTERN)

    def test_uses_requested_timezone(self):
        trigger = dining_alert_trigger(date(2026, 7, 4), "Europe/Paris")
        assert trigger.tzinfo == ZoneInfo("Europe/Paris")
        assert (trigger.hour, trigger.minute) == (6, 0)

    def test_crosses_year_boundary(self):
        assert dining_alert_trigger(date(2027, 1, 10)).date() == date(2026, 11, 11)


class TestPlanDiningAlerts:
    def test_one_alert_per_meal_with_restaurant(self):
        days = [
            PlannedDay(
                date=date(2026, 8, 2),
                meals={
                    MealType.DINNER: PlannedMeal("ohana", "'Ohana", "18:30"),
                    MealType.BREAKFAST: PlannedMeal("chef-mickeys", "Chef Mickey's", "08:00"),
                },
            ),
            PlannedDay(
                date=date(2026, 8, 1),
                meals={
                    MealType.LUNCH: PlannedMeal("be-our-guest", "Be Our Guest"),
                    MealType.DINNER: PlannedMeal("", "Quick service"),
                },
            ),
            PlannedDay(date=date(2026, 8, 3), meals={}),
        ]

        alerts = plan_dining_alerts(days)

        assert [(a.meal_date, a.meal_type) for a in alerts] == [
            (date(2026, 8, 1), MealType.LUNCH),
            (date(2026, 8, 2), MealType.BREAKFAST),
            (date(2026, 8, 2), MealType.DINNER),
        ]
        assert alerts[0].restaurant_name == "Be Our Guest"
        assert alerts[0].trigger_at == datetime(2026, 6, 2, 6, 0, tzinfo=EASTERN)

    def test_no_days_no_alerts(self):
        assert plan_dining_alerts([]) == []
