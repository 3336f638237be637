from dvc.handlers.views import (
    BookingListView,
    BookingValidateView,
    ContractDetailView,
    ContractListView,
    DiningAlertView,
)

__all__ = [
    "BookingListView",
    "BookingValidateView",
    "ContractDetailView",
    "ContractListView",
    "DiningAlertView",
]
