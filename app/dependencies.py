"""FastAPI dependencies."""

from datetime import date
from typing import Annotated, Literal

from fastapi import Depends, Query

from app.config import settings
from app.core.clock import Clock, SystemClock
from app.core.store import AppointmentStore
from app.schemas.appointments import AppointmentStatus, FilterState, NavigationCursor, ViewMode
from app.services.appointment_service import AppointmentService, build_store
from app.services.directory_service import DirectoryService

# Session-wide instances
_clock: Clock | None = None
_directory: DirectoryService | None = None
_appointment_store: AppointmentStore | None = None


def get_clock() -> Clock:
    """Get or create the clinic clock."""
    global _clock

    if _clock is None:
        timezone = settings.clinic_timezone or get_directory().clinic_timezone(
            settings.default_clinic_id
        )
        _clock = SystemClock(timezone)

    return _clock


def get_directory() -> DirectoryService:
    """Get or create the directory lookups."""
    global _directory

    if _directory is None:
        _directory = DirectoryService()

    return _directory


def get_appointment_store() -> AppointmentStore:
    """
    Get or create the canonical appointment store.

    Appointments are generated on first use and kept for the lifetime of the
    process.

    Returns:
        Appointment store
    """
    global _appointment_store

    if _appointment_store is None:
        _appointment_store = build_store(settings, get_directory(), get_clock())

    return _appointment_store


def close_appointment_store() -> None:
    """Drop the appointment store so the next session regenerates it."""
    global _appointment_store

    _appointment_store = None


def get_appointment_service(
    store: Annotated[AppointmentStore, Depends(get_appointment_store)],
    directory: Annotated[DirectoryService, Depends(get_directory)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> AppointmentService:
    """Build an appointment service over the session store."""
    return AppointmentService(store, directory, clock)


def get_cursor(
    clock: Annotated[Clock, Depends(get_clock)],
    view: ViewMode = Query(ViewMode.WEEK, description="Calendar view mode"),
    on: date | None = Query(None, alias="date", description="Displayed date, defaults to today"),
) -> NavigationCursor:
    """Build the navigation cursor from query parameters."""
    return NavigationCursor(current_date=on or clock.today(), view_mode=view)


def get_filters(
    status_filter: AppointmentStatus | Literal["all"] = Query("all", alias="status"),
    q: str = Query("", max_length=200, description="Free-text search"),
) -> FilterState:
    """Build the filter state from query parameters."""
    return FilterState(status_filter=status_filter, search_query=q)


# Type aliases for dependency injection
ClockDep = Annotated[Clock, Depends(get_clock)]
DirectoryDep = Annotated[DirectoryService, Depends(get_directory)]
AppointmentStoreDep = Annotated[AppointmentStore, Depends(get_appointment_store)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
CursorDep = Annotated[NavigationCursor, Depends(get_cursor)]
FiltersDep = Annotated[FilterState, Depends(get_filters)]
