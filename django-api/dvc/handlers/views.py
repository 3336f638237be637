"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from dvc.cache import contracts_cache_key
from dvc.domain import dining
from dvc.domain.errors import BookingRejectedError, DomainError, ErrorCode
from dvc.handlers.serializers import (
    BookingRequestSerializer,
    BookingSerializer,
    ContractInputSerializer,
    ContractSerializer,
    DiningAlertRequestSerializer,
    DiningAlertSerializer,
    ValidationResultSerializer,
)
from dvc.services.booking_service import BookingService
from dvc.services.contract_service import ContractService
from dvc.stores.django_store import DjangoContractStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.CONTRACT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONTRACT_IN_USE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CONTRACT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CONTRACT_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_BOOKING_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INSUFFICIENT_POINTS: status.HTTP_409_CONFLICT,
    ErrorCode.BOOKING_REJECTED: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    body = {"error": {"code": error.code.value, "message": error.message}}
    if isinstance(error, BookingRejectedError):
        body["result"] = ValidationResultSerializer(error.result).data
    return Response(body, status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))


def contract_service() -> ContractService:
    return ContractService(DjangoContractStore())


def booking_service() -> BookingService:
    return BookingService(DjangoContractStore())


class DomainAPIView(APIView):
    """Base view that renders domain errors as JSON error responses."""

    permission_classes = [IsAuthenticated]

    def handle_exception(self, exc):
        if isinstance(exc, DomainError):
            logger.info("Request failed with %s", exc.code.value)
            return error_response(exc)
        return super().handle_exception(exc)


class ContractListView(DomainAPIView):
    """Handler for GET and POST /api/contracts"""

    def get(self, request: Request) -> Response:
        key = contracts_cache_key(request.user.id)
        data = cache.get(key)
        if data is None:
            contracts = contract_service().list_contracts(request.user.id)
            data = [dict(item) for item in ContractSerializer(contracts, many=True).data]
            cache.set(key, data, timeout=settings.DVC_CONTRACTS_CACHE_TIMEOUT)
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = ContractInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract = contract_service().add_contract(request.user.id, **serializer.validated_data)
        return Response(ContractSerializer(contract).data, status=status.HTTP_201_CREATED)


class ContractDetailView(DomainAPIView):
    """Handler for GET, PATCH and DELETE /api/contracts/{contract_id}"""

    def get(self, request: Request, contract_id: str) -> Response:
        contract = contract_service().get_contract(request.user.id, contract_id)
        return Response(ContractSerializer(contract).data)

    def patch(self, request: Request, contract_id: str) -> Response:
        serializer = ContractInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        contract = contract_service().update_contract(
            request.user.id, contract_id, serializer.validated_data
        )
        return Response(ContractSerializer(contract).data)

    def delete(self, request: Request, contract_id: str) -> Response:
        contract_service().delete_contract(request.user.id, contract_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class BookingValidateView(DomainAPIView):
    """Handler for POST /api/contracts/{contract_id}/validate

    Returns 200 whether or not the booking is allowed; clients branch on "valid".
    """

    def post(self, request: Request, contract_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = booking_service().validate_booking(
            request.user.id, contract_id, serializer.save(), timezone.localtime()
        )
        return Response(ValidationResultSerializer(result).data)


class BookingListView(DomainAPIView):
    """Handler for GET and POST /api/contracts/{contract_id}/bookings"""

    def get(self, request: Request, contract_id: str) -> Response:
        bookings = booking_service().list_bookings(request.user.id, contract_id)
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request: Request, contract_id: str) -> Response:
        serializer = BookingRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        confirmation = booking_service().book(
            request.user.id, contract_id, serializer.save(), timezone.localtime()
        )
        return Response(
            {
                "booking": BookingSerializer(confirmation.booking).data,
                "contract": ContractSerializer(confirmation.contract).data,
            },
            status=status.HTTP_201_CREATED,
        )


class DiningAlertView(DomainAPIView):
    """Handler for POST /api/dining-alerts"""

    def post(self, request: Request) -> Response:
        serializer = DiningAlertRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tz = serializer.validated_data.get("timezone", settings.PLANNING_TIMEZONE)
        alerts = dining.plan_dining_alerts(serializer.planned_days(), tz)
        return Response(DiningAlertSerializer(alerts, many=True).data)
