from django.contrib import admin

from dvc.models import Booking, Contract


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    readonly_fields = ["resort", "check_in_date", "points_used", "booking_window", "reserved_at"]
    can_delete = False


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = [
        "contract_id",
        "owner",
        "home_resort",
        "use_year",
        "annual_points",
        "banked_points",
        "borrowed_points",
    ]
    list_filter = ["home_resort", "use_year"]
    search_fields = ["contract_id", "owner__username"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["contract", "resort", "check_in_date", "points_used", "booking_window"]
    list_filter = ["booking_window", "resort"]
