"""Serializers for request parsing and for rendering domain models."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rest_framework import serializers

from dvc.domain import (
    BookingRequest,
    MealType,
    PlannedDay,
    PlannedMeal,
    Resort,
    UseYear,
)

RESORT_CHOICES = [resort.value for resort in Resort]
USE_YEAR_CHOICES = [month.value for month in UseYear]


def _enum_value(member):
    return member.value if member is not None else None


# Input


class ContractInputSerializer(serializers.Serializer):
    """Validates contract create and partial update payloads."""

    home_resort = serializers.ChoiceField(choices=RESORT_CHOICES)
    annual_points = serializers.IntegerField(min_value=0)
    banked_points = serializers.IntegerField(min_value=0, default=0)
    borrowed_points = serializers.IntegerField(min_value=0, default=0)
    use_year = serializers.ChoiceField(choices=USE_YEAR_CHOICES)

    def to_internal_value(self, data):
        values = super().to_internal_value(data)
        if "home_resort" in values:
            values["home_resort"] = Resort(values["home_resort"])
        if "use_year" in values:
            values["use_year"] = UseYear(values["use_year"])
        return values


class BookingRequestSerializer(serializers.Serializer):
    points_required = serializers.IntegerField(min_value=1)
    check_in_date = serializers.DateField()
    resort = serializers.ChoiceField(choices=RESORT_CHOICES)

    def create(self, validated_data) -> BookingRequest:
        return BookingRequest(
            points_required=validated_data["points_required"],
            check_in_date=validated_data["check_in_date"],
            resort=Resort(validated_data["resort"]),
        )


class PlannedMealSerializer(serializers.Serializer):
    restaurant_id = serializers.CharField(allow_blank=True)
    restaurant_name = serializers.CharField(allow_blank=True, default="")
    time = serializers.CharField(allow_blank=True, default="")


class PlannedDaySerializer(serializers.Serializer):
    date = serializers.DateField()
    breakfast = PlannedMealSerializer(required=False, allow_null=True)
    lunch = PlannedMealSerializer(required=False, allow_null=True)
    dinner = PlannedMealSerializer(required=False, allow_null=True)

    def to_planned_day(self, data) -> PlannedDay:
        meals = {
            meal_type: PlannedMeal(**data[meal_type.value])
            for meal_type in MealType
            if data.get(meal_type.value)
        }
        return PlannedDay(date=data["date"], meals=meals)


class DiningAlertRequestSerializer(serializers.Serializer):
    days = PlannedDaySerializer(many=True)
    timezone = serializers.CharField(required=False)

    def validate_timezone(self, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise serializers.ValidationError("Unknown timezone") from exc
        return value

    def planned_days(self) -> list[PlannedDay]:
        day_serializer = PlannedDaySerializer()
        return [day_serializer.to_planned_day(day) for day in self.validated_data["days"]]


# Output


class ContractSerializer(serializers.Serializer):
    """Serializer for DVCContract domain model."""

    contract_id = serializers.CharField(source="contract_id.value")
    home_resort = serializers.CharField(source="home_resort.value")
    annual_points = serializers.IntegerField()
    banked_points = serializers.IntegerField()
    borrowed_points = serializers.IntegerField()
    use_year = serializers.CharField(source="use_year.value")
    available_points = serializers.IntegerField()


class BookingSerializer(serializers.Serializer):
    """Serializer for DVCBooking domain model."""

    id = serializers.UUIDField(source="id.value")
    contract_id = serializers.CharField(source="contract_id.value")
    resort = serializers.CharField(source="resort.value")
    check_in_date = serializers.DateField()
    points_used = serializers.IntegerField()
    booking_window = serializers.CharField(source="booking_window.value")
    reserved_at = serializers.DateTimeField()


class ValidationResultSerializer(serializers.Serializer):
    """Serializer for ValidationResult domain model."""

    valid = serializers.BooleanField()
    outcome = serializers.SerializerMethodField()
    message = serializers.CharField()
    points_required = serializers.IntegerField(allow_null=True)
    points_available = serializers.IntegerField(allow_null=True)
    booking_window = serializers.SerializerMethodField()
    booking_window_opens_at = serializers.DateField(allow_null=True)

    def get_outcome(self, result) -> str:
        return result.outcome.value

    def get_booking_window(self, result) -> str | None:
        return _enum_value(result.booking_window)


class DiningAlertSerializer(serializers.Serializer):
    meal_type = serializers.CharField(source="meal_type.value")
    restaurant_id = serializers.CharField()
    restaurant_name = serializers.CharField()
    meal_date = serializers.DateField()
    trigger_at = serializers.SerializerMethodField()

    def get_trigger_at(self, alert) -> str:
        # Keep the wall time of the planning timezone, not the server default.
        return alert.trigger_at.isoformat()
