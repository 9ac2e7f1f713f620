"""
Tests for the appointments HTTP routes.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from barbershop.application.use_cases.appointment_queries import AppointmentQueries
from barbershop.application.use_cases.record_sale import RecordSaleFromAppointmentUseCase
from barbershop.infrastructure.sales.mock_sale_recorder import MockSaleRecorder
from barbershop.main import app
from barbershop.wiring.dependencies import (
    get_appointment_queries,
    get_conflict_detector,
    get_record_sale_use_case,
    get_scheduling_service,
)


@pytest.fixture
def client(env, catalog):
    app.dependency_overrides[get_scheduling_service] = lambda: env.service
    app.dependency_overrides[get_conflict_detector] = lambda: env.detector
    app.dependency_overrides[get_appointment_queries] = lambda: AppointmentQueries(env.appointments, clock=env.clock)
    app.dependency_overrides[get_record_sale_use_case] = lambda: RecordSaleFromAppointmentUseCase(
        env.appointments, catalog, MockSaleRecorder()
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _payload(start: str = "2026-10-26T10:00:00", **overrides) -> dict:
    payload = {
        "employee_id": "emp-1",
        "client_id": "client-1",
        "service_name": "Haircut",
        "start": start,
        "duration_minutes": 30,
    }
    payload.update(overrides)
    return payload


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_create_and_fetch(client):
    response = client.post("/api/v1/appointments", json=_payload(origin="WHATSAPP"))
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "PENDING"
    assert body["end"] == "2026-10-26T10:30:00"

    fetched = client.get(f"/api/v1/appointments/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["origin"] == "WHATSAPP"


def test_error_kinds_map_to_status_codes(client):
    assert client.post("/api/v1/appointments", json=_payload()).status_code == 201

    conflict = client.post("/api/v1/appointments", json=_payload("2026-10-26T10:15:00"))
    assert conflict.status_code == 409
    assert conflict.json()["detail"] == "Employee already has an appointment in that slot"

    assert client.post("/api/v1/appointments", json=_payload("2026-10-26T17:50:00")).status_code == 409
    assert client.post("/api/v1/appointments", json=_payload("2026-10-18T10:00:00")).status_code == 400
    assert client.post("/api/v1/appointments", json=_payload("2026-10-26T15:00:00", client_id="ghost")).status_code == 404
    assert client.post("/api/v1/appointments", json=_payload(duration_minutes=0)).status_code == 422
    assert client.post("/api/v1/appointments", json=_payload("2026-10-26T12:00:00+02:00")).status_code == 422
    assert client.get("/api/v1/appointments/missing").status_code == 404


def test_availability_endpoint(client):
    free = client.post(
        "/api/v1/appointments/availability",
        json={"employee_id": "emp-1", "start": "2026-10-26T10:00:00", "duration_minutes": 30},
    )
    assert free.json() == {"available": True, "reason": None}

    closed = client.post(
        "/api/v1/appointments/availability",
        json={"employee_id": "emp-1", "start": "2026-10-25T10:00:00", "duration_minutes": 30},
    )
    assert closed.json() == {"available": False, "reason": "Employee does not work this day"}

    unknown = client.post(
        "/api/v1/appointments/availability",
        json={"employee_id": "ghost", "start": "2026-10-26T10:00:00", "duration_minutes": 30},
    )
    assert unknown.status_code == 404


def test_reschedule_status_sale_and_delete_flow(client):
    appointment_id = client.post("/api/v1/appointments", json=_payload()).json()["id"]

    moved = client.put(f"/api/v1/appointments/{appointment_id}", json={"start": "2026-10-26T14:00:00"})
    assert moved.status_code == 200
    assert moved.json()["start"] == "2026-10-26T14:00:00"

    no_reason = client.patch(f"/api/v1/appointments/{appointment_id}/status", json={"status": "CANCELLED"})
    assert no_reason.status_code == 422

    done = client.patch(f"/api/v1/appointments/{appointment_id}/status", json={"status": "COMPLETED"})
    assert done.json()["status"] == "COMPLETED"

    sale = client.post(f"/api/v1/appointments/{appointment_id}/sale")
    assert sale.status_code == 201
    assert sale.json()["transaction_id"] == "mock_sale_1"

    assert client.delete(f"/api/v1/appointments/{appointment_id}").status_code == 409

    other_id = client.post("/api/v1/appointments", json=_payload("2026-10-26T16:30:00")).json()["id"]
    assert client.delete(f"/api/v1/appointments/{other_id}").status_code == 204
    assert client.get(f"/api/v1/appointments/{other_id}").status_code == 404


def test_listings_and_statistics(client):
    client.post("/api/v1/appointments", json=_payload())
    client.post("/api/v1/appointments", json=_payload("2026-10-27T11:00:00"))

    assert client.get("/api/v1/appointments").json()["total"] == 2
    assert client.get("/api/v1/appointments/day/2026-10-26").json()["total"] == 1
    assert client.get("/api/v1/appointments/week/2026-10-26").json()["total"] == 2
    assert client.get("/api/v1/appointments/month/2026/10").json()["total"] == 2
    assert client.get("/api/v1/appointments/month/2026/13").status_code == 422
    assert client.get("/api/v1/appointments/upcoming", params={"limit": 1}).json()["total"] == 1
    assert client.get("/api/v1/appointments", params={"status": "CONFIRMED"}).json()["total"] == 0

    stats = client.get("/api/v1/appointments/statistics").json()
    assert stats == {"total": 2, "pending": 2, "confirmed": 0, "completed": 0, "cancelled": 0}
