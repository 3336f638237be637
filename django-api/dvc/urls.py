from django.urls import path

from dvc.handlers import (
    BookingListView,
    BookingValidateView,
    ContractDetailView,
    ContractListView,
    DiningAlertView,
)

urlpatterns = [
    path("contracts", ContractListView.as_view(), name="contract-list"),
    path("contracts/<str:contract_id>", ContractDetailView.as_view(), name="contract-detail"),
    path(
        "contracts/<str:contract_id>/validate",
        BookingValidateView.as_view(),
        name="booking-validate",
    ),
    path(
        "contracts/<str:contract_id>/bookings",
        BookingListView.as_view(),
        name="booking-list",
    ),
    path("dining-alerts", DiningAlertView.as_view(), name="dining-alerts"),
]
