"""API tests for the care endpoints and the error envelope."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.modules.care_management.presentation.dependencies import (
    get_care_log_repository,
    get_catalog_repository,
    get_clock,
    get_plant_repository,
)
from app.shared.config.settings import get_settings
from app.shared.events.publisher import get_event_publisher

CARE = "/api/v1/care"


@pytest.fixture()
def client(plant_repository, care_log_repository, catalog_repository, publisher, clock, settings):
    app.dependency_overrides.update({
        get_plant_repository: lambda: plant_repository,
        get_care_log_repository: lambda: care_log_repository,
        get_catalog_repository: lambda: catalog_repository,
        get_event_publisher: lambda: publisher,
        get_clock: lambda: clock,
        get_settings: lambda: settings,
    })
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def registered_plant(client):
    response = client.post(f"{CARE}/plants", json={
        "user_id": "user-1",
        "catalog_entry_id": "monstera-deliciosa",
        "acquired_at": "2024-01-01T00:00:00Z",
        "nickname": "Monty",
    })
    assert response.status_code == 201
    return response.json()


def error_of(response):
    return response.json()["error"]


class TestRegisterPlant:
    def test_register_seeds_catalog_reminders(self, registered_plant):
        assert registered_plant["nickname"] == "Monty"
        assert registered_plant["watering_reminder"]["frequency"] == "weekly"
        assert registered_plant["fertilizing_reminder"]["frequency"] == "monthly"
        assert registered_plant["health_status"] == "good"

    def test_unknown_catalog_entry_is_404(self, client):
        response = client.post(f"{CARE}/plants", json={
            "user_id": "user-1",
            "catalog_entry_id": "triffid",
            "acquired_at": "2024-01-01T00:00:00Z",
        })

        assert response.status_code == 404
        assert error_of(response)["code"] == "UNKNOWN_ENTITY"
        assert error_of(response)["details"]["resource_id"] == "triffid"

    def test_malformed_reminder_is_422(self, client):
        response = client.post(f"{CARE}/plants", json={
            "user_id": "user-1",
            "catalog_entry_id": "monstera-deliciosa",
            "acquired_at": "2024-01-01T00:00:00Z",
            "watering_reminder": {"frequency": "custom"},
        })

        assert response.status_code == 422
        assert error_of(response)["code"] == "INVALID_CONFIG"
        assert error_of(response)["details"]["field"] == "interval_days"


class TestCareLogs:
    def test_log_watering(self, client, registered_plant):
        response = client.post(f"{CARE}/plants/{registered_plant['id']}/care-logs", json={
            "activity_type": "watering",
            "performed_at": "2024-01-10T00:00:00Z",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["applied"] is True
        assert body["last_watered_at"].startswith("2024-01-10T00:00:00")
        assert body["next_due"]["watering"].startswith("2024-01-17T00:00:00")
        assert body["health_status"] == "excellent"
        assert "history_size" not in body

    def test_resubmitting_entry_id_is_no_op(self, client, registered_plant):
        url = f"{CARE}/plants/{registered_plant['id']}/care-logs"
        payload = {"activity_type": "watering", "performed_at": "2024-01-09T08:00:00Z", "entry_id": "log-1"}

        first = client.post(url, json=payload)
        second = client.post(url, json=payload)

        assert first.json()["applied"] is True
        assert second.status_code == 201
        assert second.json()["applied"] is False

    def test_future_entry_is_422(self, client, registered_plant):
        response = client.post(f"{CARE}/plants/{registered_plant['id']}/care-logs", json={
            "activity_type": "watering",
            "performed_at": "2024-02-01T00:00:00Z",
        })

        assert response.status_code == 422
        assert error_of(response)["code"] == "INVALID_TIMESTAMP"
        assert error_of(response)["details"]["reason"] == "future"
        assert "timestamp" in error_of(response)

    def test_unknown_plant_is_404(self, client):
        response = client.post(f"{CARE}/plants/ghost/care-logs", json={
            "activity_type": "watering",
            "performed_at": "2024-01-09T00:00:00Z",
        })

        assert response.status_code == 404
        assert error_of(response)["code"] == "UNKNOWN_ENTITY"

    def test_unknown_activity_is_request_validation_error(self, client, registered_plant):
        response = client.post(f"{CARE}/plants/{registered_plant['id']}/care-logs", json={
            "activity_type": "singing",
            "performed_at": "2024-01-09T00:00:00Z",
        })

        assert response.status_code == 422


class TestReadModels:
    def test_health(self, client, registered_plant):
        response = client.get(f"{CARE}/plants/{registered_plant['id']}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["health_status"] == "good"   # weekly watering overdue since day 7
        assert body["stored_status"] == "good"
        assert body["next_due"]["watering"].startswith("2024-01-08T00:00:00")

    def test_health_of_unknown_plant(self, client):
        response = client.get(f"{CARE}/plants/ghost/health")
        assert response.status_code == 404

    def test_reminders(self, client, registered_plant):
        response = client.get(f"{CARE}/users/user-1/reminders", params={"timezone": "Europe/Berlin"})

        assert response.status_code == 200
        body = response.json()
        assert body["timezone"] == "Europe/Berlin"
        assert body["total"] == 1
        reminder = body["reminders"][0]
        assert reminder["plant_instance_id"] == registered_plant["id"]
        assert reminder["activity_type"] == "watering"
        assert reminder["status"] == "overdue"
        assert reminder["days_overdue"] == 3
        assert reminder["due_at"] == "2024-01-08T00:00:00+01:00"

    def test_reminder_status_filter(self, client, registered_plant):
        response = client.get(f"{CARE}/users/user-1/reminders", params={"status": "upcoming"})

        assert response.json()["reminders"] == []

    def test_reminders_unknown_timezone(self, client):
        response = client.get(f"{CARE}/users/user-1/reminders", params={"timezone": "Atlantis/Capital"})

        assert response.status_code == 422
        assert error_of(response)["code"] == "INVALID_CONFIG"

    def test_catalog(self, client):
        response = client.get(f"{CARE}/catalog")

        assert response.status_code == 200
        assert [entry["id"] for entry in response.json()] == ["monstera-deliciosa"]


class TestService:
    def test_health_check(self, client):
        assert client.get("/api/v1/health").json()["status"] == "healthy"

    def test_readiness(self, client):
        response = client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json()["checks"]["timezone_data"]["status"] == "ok"

    def test_root(self, client):
        assert client.get("/").json()["api_base"] == "/api/v1"
