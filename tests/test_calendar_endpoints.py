"""Tests for calendar and directory endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_day_view(client: AsyncClient) -> None:
    """Test day view returns every half-hour slot of the grid."""
    response = await client.get("/api/v1/calendar/", params={"view": "day", "date": "2025-01-08"})
    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "day"
    assert len(data["slots"]) == 21
    filled = {
        slot["slot"]: [apt["id"] for apt in slot["appointments"]]
        for slot in data["slots"]
        if slot["appointments"]
    }
    assert filled == {"10:30:00": ["apt-3"], "14:00:00": ["apt-4"]}


@pytest.mark.asyncio
async def test_week_view(client: AsyncClient) -> None:
    """Test week view returns a seven-column hourly grid."""
    response = await client.get("/api/v1/calendar/", params={"view": "week", "date": "2025-01-08"})
    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "week"
    assert data["week_start"] == "2025-01-06"
    assert len(data["days"]) == 7
    assert len(data["rows"]) == 11
    nine = next(row for row in data["rows"] if row["hour"] == "09:00:00")
    assert [apt["id"] for apt in nine["cells"][0]["appointments"]] == ["apt-1", "apt-2"]


@pytest.mark.asyncio
async def test_month_view(client: AsyncClient) -> None:
    """Test month view groups appointments by day."""
    response = await client.get(
        "/api/v1/calendar/", params={"view": "month", "status": "scheduled"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "month"
    assert [group["date"] for group in data["groups"]] == ["2025-01-08", "2025-01-27"]


@pytest.mark.asyncio
async def test_navigate_next_month_clamps(client: AsyncClient) -> None:
    """Test stepping a month from the 31st lands on the last day of February."""
    response = await client.post(
        "/api/v1/calendar/navigate",
        json={
            "cursor": {"current_date": "2025-01-31", "view_mode": "month"},
            "direction": "next",
        },
    )
    assert response.status_code == 200
    assert response.json() == {"current_date": "2025-02-28", "view_mode": "month"}


@pytest.mark.asyncio
async def test_navigate_previous_week(client: AsyncClient) -> None:
    """Test stepping back a week."""
    response = await client.post(
        "/api/v1/calendar/navigate",
        json={
            "cursor": {"current_date": "2025-01-08", "view_mode": "week"},
            "direction": "previous",
        },
    )
    assert response.status_code == 200
    assert response.json()["current_date"] == "2025-01-01"


@pytest.mark.asyncio
async def test_navigate_invalid_direction(client: AsyncClient) -> None:
    """Test an unknown direction is rejected."""
    response = await client.post(
        "/api/v1/calendar/navigate",
        json={"cursor": {"current_date": "2025-01-08"}, "direction": "sideways"},
    )
    assert response.status_code == 422
    assert response.json()["fields"] == ["direction"]


@pytest.mark.asyncio
async def test_go_to_today(client: AsyncClient) -> None:
    """Test today resets the date and keeps the view mode."""
    response = await client.post(
        "/api/v1/calendar/today",
        json={"current_date": "2024-05-01", "view_mode": "day"},
    )
    assert response.status_code == 200
    assert response.json() == {"current_date": "2025-01-08", "view_mode": "day"}


@pytest.mark.asyncio
async def test_switch_view_mode(client: AsyncClient) -> None:
    """Test switching view mode keeps the date."""
    response = await client.post(
        "/api/v1/calendar/view-mode",
        json={"cursor": {"current_date": "2025-01-15", "view_mode": "week"}, "view_mode": "month"},
    )
    assert response.status_code == 200
    assert response.json() == {"current_date": "2025-01-15", "view_mode": "month"}


@pytest.mark.asyncio
async def test_directory_lookups(client: AsyncClient) -> None:
    """Test directory records resolve by ID."""
    response = await client.get("/api/v1/directory/users/doctor-001")
    assert response.status_code == 200
    assert response.json()["last_name"] == "Smith"

    response = await client.get("/api/v1/directory/services/service-009")
    assert response.status_code == 200
    assert response.json()["name"] == "Teeth Whitening"

    response = await client.get("/api/v1/directory/clinics/clinic-002")
    assert response.status_code == 200
    assert response.json()["name"] == "Family Dental Care Center"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/directory/users/nobody",
        "/api/v1/directory/services/service-999",
        "/api/v1/directory/clinics/clinic-999",
    ],
)
async def test_directory_not_found(client: AsyncClient, path: str) -> None:
    """Test unknown directory IDs return 404."""
    response = await client.get(path)
    assert response.status_code == 404
    assert response.json()["error"] == "NotFoundException"
