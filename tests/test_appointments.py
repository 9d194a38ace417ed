"""Tests for appointment endpoints."""

from datetime import datetime

import pytest
from httpx import AsyncClient

from app.core.store import AppointmentStore
from app.dependencies import get_appointment_store
from app.main import app


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health check endpoint."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_detailed_health_check(client: AsyncClient) -> None:
    """Test detailed health reports the loaded appointment count."""
    response = await client.get("/api/v1/health/detailed")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["appointments_loaded"] == 6


@pytest.mark.asyncio
async def test_ping(client: AsyncClient) -> None:
    """Test ping endpoint."""
    response = await client.get("/api/v1/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "pong"}


@pytest.mark.asyncio
async def test_list_appointments_week(client: AsyncClient) -> None:
    """Test listing the week containing the requested date."""
    response = await client.get(
        "/api/v1/appointments/", params={"view": "week", "date": "2025-01-06"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 4
    assert [item["id"] for item in data["items"]] == ["apt-1", "apt-2", "apt-3", "apt-4"]
    assert data["view_mode"] == "week"
    assert data["title"] == "Mon, Jan 6 - Sun, Jan 12"


@pytest.mark.asyncio
async def test_list_appointments_defaults_to_this_week(client: AsyncClient) -> None:
    """Test the cursor defaults to today's week."""
    response = await client.get("/api/v1/appointments/")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 4
    assert data["window_start"] == "2025-01-06T00:00:00"
    assert data["window_end"] == "2025-01-13T00:00:00"


@pytest.mark.asyncio
async def test_list_appointments_by_status(client: AsyncClient) -> None:
    """Test filtering by status."""
    response = await client.get(
        "/api/v1/appointments/", params={"date": "2025-01-08", "status": "confirmed"}
    )
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == ["apt-3"]


@pytest.mark.asyncio
async def test_list_appointments_search(client: AsyncClient) -> None:
    """Test free-text search matches the doctor's name."""
    response = await client.get(
        "/api/v1/appointments/", params={"date": "2025-01-08", "q": "williams"}
    )
    assert response.status_code == 200
    assert [item["id"] for item in response.json()["items"]] == ["apt-2", "apt-4"]


@pytest.mark.asyncio
async def test_list_appointments_month(client: AsyncClient) -> None:
    """Test month view lists every appointment with no window."""
    response = await client.get("/api/v1/appointments/", params={"view": "month"})
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 6
    assert data["window_start"] is None
    assert data["title"] == "January 2025"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {"view": "year"},
        {"status": "pending"},
        {"date": "not-a-date"},
    ],
)
async def test_list_appointments_invalid_params(client: AsyncClient, params: dict) -> None:
    """Test unknown view modes, statuses and dates are rejected."""
    response = await client.get("/api/v1/appointments/", params=params)
    assert response.status_code == 422
    assert response.json()["error"] == "ValidationError"


@pytest.mark.asyncio
async def test_appointment_stats(client: AsyncClient) -> None:
    """Test appointment statistics."""
    response = await client.get("/api/v1/appointments/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["today"] == 2
    assert data["total"] == 6
    assert data["by_status"]["confirmed"] == 2
    assert data["by_status"]["no_show"] == 0


@pytest.mark.asyncio
async def test_upcoming_appointments(client: AsyncClient) -> None:
    """Test upcoming appointments, soonest first."""
    response = await client.get("/api/v1/appointments/upcoming")
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["apt-4", "apt-5"]

    response = await client.get("/api/v1/appointments/upcoming", params={"days": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_appointment(client: AsyncClient) -> None:
    """Test getting a specific appointment."""
    response = await client.get("/api/v1/appointments/apt-3")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "apt-3"
    assert data["start_time"] == "2025-01-08T10:30:00"
    assert data["status"] == "confirmed"


@pytest.mark.asyncio
async def test_get_appointment_not_found(client: AsyncClient) -> None:
    """Test getting an unknown appointment."""
    response = await client.get("/api/v1/appointments/apt-404")
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "NotFoundException"
    assert data["message"] == "Appointment not found"


@pytest.mark.asyncio
async def test_update_appointment_status(client: AsyncClient) -> None:
    """Test confirming a scheduled appointment."""
    response = await client.patch(
        "/api/v1/appointments/apt-4/status",
        json={"status": "confirmed", "notes": "Confirmed by phone"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "confirmed"
    assert data["notes"] == "Confirmed by phone"
    assert data["updated_at"] == "2025-01-08T12:00:00"

    # The change is visible to later reads
    response = await client.get("/api/v1/appointments/apt-4")
    assert response.json()["status"] == "confirmed"


@pytest.mark.asyncio
async def test_update_appointment_status_conflict(client: AsyncClient) -> None:
    """Test a completed appointment cannot go back to scheduled."""
    response = await client.patch(
        "/api/v1/appointments/apt-1/status",
        json={"status": "scheduled"},
    )
    assert response.status_code == 409
    assert response.json()["error"] == "ConflictException"


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient) -> None:
    """Test the request ID is echoed back alongside the timing header."""
    response = await client.get("/api/v1/ping", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"
    assert "X-Process-Time" in response.headers


@pytest.mark.asyncio
async def test_list_appointments_display_names(client: AsyncClient) -> None:
    """Test listed appointments carry patient, doctor, service and clinic names."""
    response = await client.get("/api/v1/appointments/", params={"view": "day"})
    assert response.status_code == 200
    first = response.json()["items"][0]
    assert first["id"] == "apt-3"
    assert first["patient_name"] == "Lisa Johnson"
    assert first["doctor_name"] == "David Smith"
    assert first["service_name"] == "Fluoride Treatment"
    assert first["clinic_name"] == "SmileBright Dental Care"


@pytest.mark.asyncio
async def test_unknown_patient_renders_placeholder(
    client: AsyncClient,
    appointment_factory,
) -> None:
    """Test an appointment whose patient is not in the directory still renders."""
    orphan = appointment_factory(
        "orphan", datetime(2025, 1, 8, 15, 0), patient_id="patient-999"
    )
    app.dependency_overrides[get_appointment_store] = lambda: AppointmentStore([orphan])

    response = await client.get("/api/v1/appointments/", params={"view": "day"})
    assert response.status_code == 200
    assert response.json()["items"][0]["patient_name"] == "Unknown Patient"

    response = await client.get("/api/v1/appointments/upcoming")
    assert response.json()[0]["patient_name"] == "Unknown Patient"

    response = await client.get("/api/v1/calendar/", params={"view": "month"})
    group = response.json()["groups"][0]
    assert group["appointments"][0]["patient_name"] == "Unknown Patient"


@pytest.mark.asyncio
async def test_list_appointments_by_doctor_and_patient(client: AsyncClient) -> None:
    """Test narrowing the list to one doctor or one patient."""
    response = await client.get(
        "/api/v1/appointments/", params={"view": "month", "doctor_id": "doctor-002"}
    )
    assert [item["id"] for item in response.json()["items"]] == ["apt-2", "apt-4", "apt-6"]

    response = await client.get(
        "/api/v1/appointments/", params={"view": "month", "patient_id": "patient-001"}
    )
    assert [item["id"] for item in response.json()["items"]] == ["apt-1", "apt-6"]


@pytest.mark.asyncio
async def test_validation_error_names_fields(client: AsyncClient) -> None:
    """Test a rejected request lists the offending query parameters."""
    response = await client.get(
        "/api/v1/appointments/", params={"view": "year", "status": "pending"}
    )
    assert response.status_code == 422
    data = response.json()
    assert data["message"] == "Request validation failed"
    assert data["fields"] == ["status", "view"]
    assert data["path"].endswith("/api/v1/appointments/?view=year&status=pending")


@pytest.mark.asyncio
async def test_get_appointment_display_names(client: AsyncClient) -> None:
    """Test a single appointment and a status update both carry display names."""
    response = await client.get("/api/v1/appointments/apt-5")
    assert response.json()["patient_name"] == "James Taylor"

    response = await client.patch(
        "/api/v1/appointments/apt-5/status", json={"status": "in_progress"}
    )
    assert response.status_code == 200
    assert response.json()["doctor_name"] == "David Smith"
