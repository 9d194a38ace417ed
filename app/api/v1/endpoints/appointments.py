"""Appointment endpoints."""

from fastapi import APIRouter, Query, status

from app.config import settings
from app.dependencies import AppointmentServiceDep, CursorDep, FiltersDep
from app.schemas.appointments import (
    AppointmentDetail,
    AppointmentListResponse,
    AppointmentStats,
    AppointmentStatusUpdate,
)

router = APIRouter()


@router.get(
    "/",
    response_model=AppointmentListResponse,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="List appointments",
)
async def list_appointments(
    service: AppointmentServiceDep,
    cursor: CursorDep,
    filters: FiltersDep,
    doctor_id: str | None = Query(None, description="Only this doctor's appointments"),
    patient_id: str | None = Query(None, description="Only this patient's appointments"),
) -> AppointmentListResponse:
    """
    List appointments in the displayed window with filtering.

    Args:
        service: Appointment service
        cursor: Displayed date and view mode
        filters: Status filter and search query
        doctor_id: Optional doctor to narrow to
        patient_id: Optional patient to narrow to

    Returns:
        Filtered list of appointments with display names
    """
    return service.list_appointments(cursor, filters, doctor_id, patient_id)


@router.get(
    "/stats",
    response_model=AppointmentStats,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Appointment statistics",
)
async def get_appointment_stats(service: AppointmentServiceDep) -> AppointmentStats:
    """
    Get today's appointment count and totals per status.

    Args:
        service: Appointment service

    Returns:
        Appointment statistics
    """
    return service.stats()


@router.get(
    "/upcoming",
    response_model=list[AppointmentDetail],
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Upcoming appointments",
)
async def list_upcoming_appointments(
    service: AppointmentServiceDep,
    days: int = Query(settings.upcoming_window_days, ge=1, le=90),
) -> list[AppointmentDetail]:
    """
    List appointments starting within the next few days, soonest first.

    Args:
        service: Appointment service
        days: Number of days to look ahead

    Returns:
        Upcoming appointments
    """
    return service.upcoming(days)


@router.get(
    "/{appointment_id}",
    response_model=AppointmentDetail,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: str,
    service: AppointmentServiceDep,
) -> AppointmentDetail:
    """
    Get a specific appointment by ID.

    Args:
        appointment_id: Appointment ID
        service: Appointment service

    Returns:
        Appointment details

    Raises:
        NotFoundException: If appointment not found
    """
    return service.describe(service.get_appointment(appointment_id))


@router.patch(
    "/{appointment_id}/status",
    response_model=AppointmentDetail,
    status_code=status.HTTP_200_OK,
    tags=["Appointments"],
    summary="Update appointment status",
)
async def update_appointment_status(
    appointment_id: str,
    data: AppointmentStatusUpdate,
    service: AppointmentServiceDep,
) -> AppointmentDetail:
    """
    Update appointment status (e.g., confirm, cancel, complete).

    Args:
        appointment_id: Appointment ID
        data: Status update data
        service: Appointment service

    Returns:
        Updated appointment

    Raises:
        NotFoundException: If appointment not found
        ConflictException: If the status change is not allowed
    """
    return service.describe(service.update_status(appointment_id, data))
