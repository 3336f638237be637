"""Dining reservation reminders.

Walt Disney World opens dining reservations 60 days ahead, so each planned
meal gets an alert at 06:00 local time on the day its window opens.
"""

from collections.abc import Iterable
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

from dvc.domain.models import DiningAlert, PlannedDay
from dvc.domain.value_objects import MealType

DINING_WINDOW_DAYS = 60
ALERT_TIME = time(6, 0)
DEFAULT_TIMEZONE = "America/New_York"

_MEAL_ORDER = (MealType.BREAKFAST, MealType.LUNCH, MealType.DINNER)


def dining_alert_trigger(meal_date: date, tz: ZoneInfo | str = DEFAULT_TIMEZONE) -> datetime:
    """Return 06:00 on meal_date - 60 days in the given timezone."""
    zone = ZoneInfo(tz) if isinstance(tz, str) else tz
    return datetime.combine(meal_date - timedelta(days=DINING_WINDOW_DAYS), ALERT_TIME, tzinfo=zone)


def plan_dining_alerts(
    days: Iterable[PlannedDay], tz: ZoneInfo | str = DEFAULT_TIMEZONE
) -> list[DiningAlert]:
    """Build one alert per meal that has a restaurant assigned."""
    alerts: list[DiningAlert] = []
    for day in sorted(days, key=lambda d: d.date):
        for meal_type in _MEAL_ORDER:
            meal = day.meals.get(meal_type)
            if meal is None or not meal.restaurant_id:
                continue
            alerts.append(
                DiningAlert(
                    meal_type=meal_type,
                    restaurant_id=meal.restaurant_id,
                    restaurant_name=meal.restaurant_name,
                    meal_date=day.date,
                    trigger_at=dining_alert_trigger(day.date, tz),
                )
            )
    return alerts
