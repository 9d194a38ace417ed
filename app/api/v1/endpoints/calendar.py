"""Calendar view and navigation endpoints."""

from fastapi import APIRouter, Query, status

from app.dependencies import AppointmentServiceDep, ClockDep, CursorDep, FiltersDep
from app.schemas.appointments import (
    CursorNavigationRequest,
    CursorViewModeRequest,
    NavigationCursor,
    ViewBuckets,
)
from app.services.navigation_service import advance_cursor, change_view_mode, reset_cursor

router = APIRouter()


@router.get(
    "/",
    response_model=ViewBuckets,
    status_code=status.HTTP_200_OK,
    tags=["Calendar"],
    summary="Calendar view",
)
async def get_calendar_view(
    service: AppointmentServiceDep,
    cursor: CursorDep,
    filters: FiltersDep,
    doctor_id: str | None = Query(None, description="Only this doctor's appointments"),
    patient_id: str | None = Query(None, description="Only this patient's appointments"),
) -> ViewBuckets:
    """
    Get filtered appointments bucketed for the day, week or month view.

    Args:
        service: Appointment service
        cursor: Displayed date and view mode
        filters: Status filter and search query
        doctor_id: Optional doctor to narrow to
        patient_id: Optional patient to narrow to

    Returns:
        Day slots, week grid or per-day groups
    """
    return service.calendar(cursor, filters, doctor_id, patient_id)


@router.post(
    "/navigate",
    response_model=NavigationCursor,
    status_code=status.HTTP_200_OK,
    tags=["Calendar"],
    summary="Step the navigation cursor",
)
async def navigate(data: CursorNavigationRequest) -> NavigationCursor:
    """Move the cursor to the previous or next window."""
    return advance_cursor(data.cursor, data.direction)


@router.post(
    "/today",
    response_model=NavigationCursor,
    status_code=status.HTTP_200_OK,
    tags=["Calendar"],
    summary="Reset the navigation cursor to today",
)
async def go_to_today(cursor: NavigationCursor, clock: ClockDep) -> NavigationCursor:
    """Move the cursor to today, keeping its view mode."""
    return reset_cursor(cursor, clock)


@router.post(
    "/view-mode",
    response_model=NavigationCursor,
    status_code=status.HTTP_200_OK,
    tags=["Calendar"],
    summary="Switch the calendar view mode",
)
async def switch_view_mode(data: CursorViewModeRequest) -> NavigationCursor:
    """Change the view mode, keeping the displayed date."""
    return change_view_mode(data.cursor, data.view_mode)
