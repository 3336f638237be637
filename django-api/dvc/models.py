"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
Available points are never stored; they are derived from the three buckets.
"""

import uuid

from django.conf import settings
from django.db import models

from dvc.domain.value_objects import BookingWindow, Resort, UseYear

RESORT_CHOICES = [(resort.value, resort.value) for resort in Resort]
USE_YEAR_CHOICES = [(month.value, month.value) for month in UseYear]
BOOKING_WINDOW_CHOICES = [(window.value, window.value) for window in BookingWindow]


class Contract(models.Model):
    """Persistence model for DVC contracts."""

    contract_id = models.CharField(primary_key=True, max_length=120)
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="dvc_contracts",
    )
    home_resort = models.CharField(max_length=64, choices=RESORT_CHOICES)
    annual_points = models.PositiveIntegerField()
    banked_points = models.PositiveIntegerField(default=0)
    borrowed_points = models.PositiveIntegerField(default=0)
    use_year = models.CharField(max_length=3, choices=USE_YEAR_CHOICES)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["owner", "created_at"], name="dvc_contract_owner_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.home_resort} ({self.contract_id})"


class Booking(models.Model):
    """Persistence model for reservations funded with contract points."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    contract = models.ForeignKey(
        Contract, on_delete=models.PROTECT, related_name="bookings"
    )
    resort = models.CharField(max_length=64, choices=RESORT_CHOICES)
    check_in_date = models.DateField()
    points_used = models.PositiveIntegerField()
    booking_window = models.CharField(max_length=8, choices=BOOKING_WINDOW_CHOICES)
    reserved_at = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-reserved_at"]
        indexes = [
            models.Index(fields=["contract", "-reserved_at"], name="dvc_booking_contract_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.resort} - {self.check_in_date} ({self.points_used} pts)"
