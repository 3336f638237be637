"""Booking window rules for DVC point reservations.

Home resort bookings open 11 months before check-in; every other resort opens
at 7 months. Months are approximated as fixed day counts.
"""

from datetime import date, datetime, time, timedelta

from dvc.domain import ledger
from dvc.domain.errors import InvalidContractStateError
from dvc.domain.models import (
    BookingRequest,
    DVCContract,
    ValidationOutcome,
    ValidationResult,
    WindowClassification,
)
from dvc.domain.value_objects import BookingWindow

HOME_RESORT_WINDOW_DAYS = 330
ALL_RESORTS_WINDOW_DAYS = 210

_ONE_DAY = timedelta(days=1)


def classify_window(check_in_date: date, now: datetime | date) -> WindowClassification:
    """Classify check_in_date against both windows as seen from now.

    The check-in is taken as midnight in now's timezone and the day count is
    floored, so a stay 299.5 days out counts as 299 days.
    """
    if not isinstance(now, datetime):
        now = datetime.combine(now, time.min)
    check_in = datetime.combine(check_in_date, time.min, tzinfo=now.tzinfo)
    days_until_check_in = (check_in - now) // _ONE_DAY
    return WindowClassification(
        days_until_check_in=days_until_check_in,
        is_within_11_months=days_until_check_in <= HOME_RESORT_WINDOW_DAYS,
        is_within_7_months=days_until_check_in <= ALL_RESORTS_WINDOW_DAYS,
    )


def validate(
    contract: DVCContract, request: BookingRequest, now: datetime | date
) -> ValidationResult:
    """Decide whether request may be booked with contract at time now.

    Points are checked before timing. Rejections are returned, never raised.

    Raises:
        InvalidContractStateError: If contract or request is None.
    """
    if request is None:
        raise InvalidContractStateError("booking request is required")

    available = ledger.get_available_points(contract)
    if request.points_required > available:
        return ValidationResult(
            valid=False,
            outcome=ValidationOutcome.INSUFFICIENT_POINTS,
            message=(
                f"Insufficient points. Need {request.points_required}, "
                f"have {available}"
            ),
            points_required=request.points_required,
            points_available=available,
        )

    window = classify_window(request.check_in_date, now)
    today = now.date() if isinstance(now, datetime) else now

    if request.resort == contract.home_resort:
        if not window.is_within_11_months:
            return _not_open_yet(window, today, HOME_RESORT_WINDOW_DAYS, request, available)
        booking_window = BookingWindow.ELEVEN_MONTH
    else:
        if window.is_within_11_months and not window.is_within_7_months:
            return ValidationResult(
                valid=False,
                outcome=ValidationOutcome.WRONG_RESORT_FOR_WINDOW,
                message="Can only book home resort 11 months in advance",
                points_required=request.points_required,
                points_available=available,
                booking_window=BookingWindow.ELEVEN_MONTH,
                booking_window_opens_at=_opens_at(window, today, ALL_RESORTS_WINDOW_DAYS),
            )
        if not window.is_within_7_months:
            return _not_open_yet(window, today, ALL_RESORTS_WINDOW_DAYS, request, available)
        booking_window = BookingWindow.SEVEN_MONTH

    return ValidationResult(
        valid=True,
        outcome=ValidationOutcome.VALID,
        message="Booking is valid",
        points_required=request.points_required,
        points_available=available,
        booking_window=booking_window,
    )


def _opens_at(window: WindowClassification, today: date, window_days: int) -> date:
    return today + timedelta(days=window.days_until_check_in - window_days)


def _not_open_yet(
    window: WindowClassification,
    today: date,
    window_days: int,
    request: BookingRequest,
    available: int,
) -> ValidationResult:
    """Reject a request whose window has not opened.

    The message starts with "Booking window not open yet" and is followed by
    the remaining day count, e.g. "(12 days remaining)". Clients should
    branch on outcome rather than match the message text.
    """
    remaining = window.days_until_check_in - window_days
    return ValidationResult(
        valid=False,
        outcome=ValidationOutcome.WINDOW_NOT_OPEN,
        message=f"Booking window not open yet ({remaining} days remaining)",
        points_required=request.points_required,
        points_available=available,
        booking_window_opens_at=_opens_at(window, today, window_days),
    )
