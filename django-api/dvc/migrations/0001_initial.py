import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

RESORTS = [
    ("Animal Kingdom Villas - Jambo House", "Animal Kingdom Villas - Jambo House"),
    ("Animal Kingdom Villas - Kidani Village", "Animal Kingdom Villas - Kidani Village"),
    ("Bay Lake Tower", "Bay Lake Tower"),
    ("Beach Club Villas", "Beach Club Villas"),
    ("BoardWalk Villas", "BoardWalk Villas"),
    ("Boulder Ridge Villas", "Boulder Ridge Villas"),
    ("Copper Creek Villas", "Copper Creek Villas"),
    ("Grand Floridian Villas", "Grand Floridian Villas"),
    ("Old Key West", "Old Key West"),
    ("Polynesian Villas", "Polynesian Villas"),
    ("Riviera Resort", "Riviera Resort"),
    ("Saratoga Springs", "Saratoga Springs"),
]

USE_YEARS = [
    (month, month)
    for month in (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Contract",
            fields=[
                ("contract_id", models.CharField(max_length=120, primary_key=True, serialize=False)),
                ("home_resort", models.CharField(choices=RESORTS, max_length=64)),
                ("annual_points", models.PositiveIntegerField()),
                ("banked_points", models.PositiveIntegerField(default=0)),
                ("borrowed_points", models.PositiveIntegerField(default=0)),
                ("use_year", models.CharField(choices=USE_YEARS, max_length=3)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="dvc_contracts",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(fields=["owner", "created_at"], name="dvc_contract_owner_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("resort", models.CharField(choices=RESORTS, max_length=64)),
                ("check_in_date", models.DateField()),
                ("points_used", models.PositiveIntegerField()),
                (
                    "booking_window",
                    models.CharField(
                        choices=[("11_month", "11_month"), ("7_month", "7_month")],
                        max_length=8,
                    ),
                ),
                ("reserved_at", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "contract",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="dvc.contract",
                    ),
                ),
            ],
            options={
                "ordering": ["-reserved_at"],
                "indexes": [
                    models.Index(fields=["contract", "-reserved_at"], name="dvc_booking_contract_idx"),
                ],
            },
        ),
    ]
