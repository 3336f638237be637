"""Integration tests for the DVC contracts and bookings API.

Run with: pytest tests/test_contract_api.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from dvc.models import Booking, Contract

CONTRACT_PAYLOAD = {
    "home_resort": "Riviera Resort",
    "annual_points": 150,
    "banked_points": 20,
    "use_year": "Feb",
}


def check_in(days: int) -> str:
    return (timezone.localdate() + timedelta(days=days)).isoformat()


@pytest.fixture
def contract_id(auth_client: APIClient) -> str:
    response = auth_client.post("/api/contracts", CONTRACT_PAYLOAD, format="json")
    assert response.status_code == 201
    return response.json()["contract_id"]


@pytest.mark.django_db
class TestContracts:
    """Tests for /api/contracts"""

    def test_requires_authentication(self, api_client: APIClient):
        response = api_client.get("/api/contracts")
        assert response.status_code == 403

    def test_create_contract(self, auth_client: APIClient, user):
        response = auth_client.post("/api/contracts", CONTRACT_PAYLOAD, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["home_resort"] == "Riviera Resort"
        assert body["borrowed_points"] == 0
        assert body["available_points"] == 170
        assert Contract.objects.get(contract_id=body["contract_id"]).owner == user

    def test_create_contract_rejects_negative_points(self, auth_client: APIClient):
        payload = {**CONTRACT_PAYLOAD, "banked_points": -5}
        response = auth_client.post("/api/contracts", payload, format="json")
        assert response.status_code == 400
        assert "banked_points" in response.json()

    def test_create_contract_rejects_unknown_resort(self, auth_client: APIClient):
        payload = {**CONTRACT_PAYLOAD, "home_resort": "Contemporary"}
        response = auth_client.post("/api/contracts", payload, format="json")
        assert response.status_code == 400

    def test_list_contracts(self, auth_client: APIClient, contract_id: str):
        response = auth_client.get("/api/contracts")
        assert response.status_code == 200
        assert [c["contract_id"] for c in response.json()] == [contract_id]

    def test_list_only_shows_own_contracts(self, contract_id: str, django_user_model):
        other = django_user_model.objects.create_user(username="minnie", password="bow")
        client = APIClient()
        client.force_authenticate(user=other)
        assert client.get("/api/contracts").json() == []
        assert client.get(f"/api/contracts/{contract_id}").status_code == 404

    def test_get_contract_not_found(self, auth_client: APIClient):
        response = auth_client.get("/api/contracts/no-such-contract")
        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "CONTRACT_NOT_FOUND", "message": "DVC contract not found"}
        }

    def test_get_contract_invalid_id_format(self, auth_client: APIClient):
        response = auth_client.get("/api/contracts/bad%20id")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_CONTRACT_ID"

    def test_patch_contract(self, auth_client: APIClient, contract_id: str):
        response = auth_client.patch(
            f"/api/contracts/{contract_id}", {"borrowed_points": 30}, format="json"
        )
        assert response.status_code == 200
        body = response.json()
        assert body["banked_points"] == 20
        assert body["available_points"] == 140

    def test_delete_contract(self, auth_client: APIClient, contract_id: str):
        response = auth_client.delete(f"/api/contracts/{contract_id}")
        assert response.status_code == 204
        assert not Contract.objects.filter(contract_id=contract_id).exists()


@pytest.mark.django_db
class TestBookings:
    """Tests for /api/contracts/{id}/validate and /api/contracts/{id}/bookings"""

    def test_validate_valid_booking(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 100, "check_in_date": check_in(300), "resort": "Riviera Resort"}
        response = auth_client.post(f"/api/contracts/{contract_id}/validate", payload, format="json")

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["booking_window"] == "11_month"
        assert body["points_available"] == 170
        assert body["booking_window_opens_at"] is None

    def test_validate_rejection_is_returned_as_data(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 50, "check_in_date": check_in(250), "resort": "Old Key West"}
        response = auth_client.post(f"/api/contracts/{contract_id}/validate", payload, format="json")

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["outcome"] == "wrong_resort_for_window"
        # now carries a time of day, so 250 calendar days floor to 249
        assert body["booking_window_opens_at"] in {check_in(39), check_in(40)}

    def test_validate_rejects_non_positive_points(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 0, "check_in_date": check_in(30), "resort": "Riviera Resort"}
        response = auth_client.post(f"/api/contracts/{contract_id}/validate", payload, format="json")
        assert response.status_code == 400

    def test_book_deducts_points(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 100, "check_in_date": check_in(300), "resort": "Riviera Resort"}
        response = auth_client.post(f"/api/contracts/{contract_id}/bookings", payload, format="json")

        assert response.status_code == 201
        body = response.json()
        assert body["booking"]["points_used"] == 100
        assert body["booking"]["booking_window"] == "11_month"
        assert body["contract"]["banked_points"] == 0
        assert body["contract"]["annual_points"] == 70
        stored = Contract.objects.get(contract_id=contract_id)
        assert (stored.banked_points, stored.annual_points, stored.borrowed_points) == (0, 70, 0)
        assert Booking.objects.filter(contract_id=contract_id).count() == 1

    def test_book_rejected_returns_conflict(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 500, "check_in_date": check_in(30), "resort": "Riviera Resort"}
        response = auth_client.post(f"/api/contracts/{contract_id}/bookings", payload, format="json")

        assert response.status_code == 409
        body = response.json()
        assert body["error"]["code"] == "BOOKING_REJECTED"
        assert body["result"]["outcome"] == "insufficient_points"
        assert Booking.objects.count() == 0
        assert Contract.objects.get(contract_id=contract_id).annual_points == 150

    def test_list_bookings(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 10, "check_in_date": check_in(30), "resort": "Polynesian Villas"}
        auth_client.post(f"/api/contracts/{contract_id}/bookings", payload, format="json")

        response = auth_client.get(f"/api/contracts/{contract_id}/bookings")

        assert response.status_code == 200
        [booking] = response.json()
        assert booking["resort"] == "Polynesian Villas"
        assert booking["booking_window"] == "7_month"

    def test_contract_with_bookings_cannot_be_deleted(self, auth_client: APIClient, contract_id: str):
        payload = {"points_required": 10, "check_in_date": check_in(30), "resort": "Riviera Resort"}
        auth_client.post(f"/api/contracts/{contract_id}/bookings", payload, format="json")

        response = auth_client.delete(f"/api/contracts/{contract_id}")

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CONTRACT_IN_USE"


@pytest.mark.django_db
class TestDiningAlerts:
    """Tests for POST /api/dining-alerts"""

    def test_alerts_for_planned_meals(self, auth_client: APIClient):
        payload = {
            "days": [
                {
                    "date": "2026-12-20",
                    "breakfast": None,
                    "dinner": {"restaurant_id": "cinderellas-royal-table", "restaurant_name": "Cinderella's Royal Table"},
                },
            ],
        }
        response = auth_client.post("/api/dining-alerts", payload, format="json")

        assert response.status_code == 200
        [alert] = response.json()
        assert alert["meal_type"] == "dinner"
        assert alert["trigger_at"] == "2026-10-21T06:00:00-04:00"

    def test_alerts_keep_requested_timezone(self, auth_client: APIClient):
        payload = {
            "days": [
                {"date": "2026-07-04", "lunch": {"restaurant_id": "le-cellier", "restaurant_name": "Le Cellier"}},
            ],
            "timezone": "Europe/Paris",
        }
        response = auth_client.post("/api/dining-alerts", payload, format="json")

        assert response.status_code == 200
        [alert] = response.json()
        assert alert["meal_type"] == "lunch"
        assert alert["trigger_at"] == "2026-05-05T06:00:00+02:00"

    def test_unknown_timezone(self, auth_client: APIClient):
        payload = {"days": [], "timezone": "Mars/Olympus"}
        response = auth_client.post("/api/dining-alerts", payload, format="json")
        assert response.status_code == 400
