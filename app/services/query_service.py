"""Appointment query and filter engine."""

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time, timedelta

from app.schemas.appointments import (
    Appointment,
    AppointmentStats,
    AppointmentStatus,
    FilterState,
    NavigationCursor,
    ViewMode,
)
from app.services.calendar_service import DAYS_PER_WEEK, day_bounds, week_start
from app.services.directory_service import DirectoryService


def date_window(cursor: NavigationCursor) -> tuple[datetime | None, datetime | None]:
    """
    Half-open ``[start, end)`` window shown by the cursor.

    Week mode covers Monday 00:00 to the following Monday 00:00, day mode the
    cursor's calendar day. Month mode is unbounded and returns ``(None, None)``.
    """
    if cursor.view_mode == ViewMode.WEEK:
        start = datetime.combine(week_start(cursor.current_date), time.min)
        return start, start + timedelta(days=DAYS_PER_WEEK)
    if cursor.view_mode == ViewMode.DAY:
        return day_bounds(cursor.current_date)
    return None, None


def filter_by_window(
    appointments: Iterable[Appointment], cursor: NavigationCursor
) -> list[Appointment]:
    start, end = date_window(cursor)
    if start is None or end is None:
        return list(appointments)
    return [appointment for appointment in appointments if start <= appointment.start_time < end]


def filter_by_status(
    appointments: Iterable[Appointment], status_filter: AppointmentStatus | str
) -> list[Appointment]:
    if status_filter == "all":
        return list(appointments)
    return appointments_with_status(appointments, status_filter)


def search_fields(appointment: Appointment, directory: DirectoryService) -> list[str]:
    """Text a search query is matched against; unresolved references read as empty."""
    patient = directory.resolve_user(appointment.patient_id)
    doctor = directory.resolve_user(appointment.doctor_id)
    service = directory.resolve_service(
        appointment.service_ids[0] if appointment.service_ids else None
    )
    return [
        patient.full_name if patient else "",
        patient.email if patient else "",
        doctor.full_name if doctor else "",
        service.name if service else "",
        appointment.symptoms or "",
        appointment.notes or "",
    ]


def filter_by_search(
    appointments: Iterable[Appointment],
    search_query: str,
    directory: DirectoryService,
) -> list[Appointment]:
    if not search_query:
        return list(appointments)

    query = search_query.lower()
    return [
        appointment
        for appointment in appointments
        if any(query in field.lower() for field in search_fields(appointment, directory))
    ]


def filter_appointments(
    appointments: Sequence[Appointment],
    cursor: NavigationCursor,
    filters: FilterState,
    directory: DirectoryService,
) -> list[Appointment]:
    """
    Narrow the canonical list to what the console should display.

    Stages run in a fixed order: the date window first, then the status
    filter, then the free-text search, which is the only stage that has to
    resolve directory references.

    Args:
        appointments: Canonical appointment list, left untouched
        cursor: Navigation cursor selecting the date window
        filters: Status filter and search query
        directory: Lookups for patient, doctor and service names

    Returns:
        New list of matching appointments in input order
    """
    result = filter_by_window(appointments, cursor)
    result = filter_by_status(result, filters.status_filter)
    return filter_by_search(result, filters.search_query, directory)


def appointments_on(appointments: Iterable[Appointment], day: date) -> list[Appointment]:
    return [appointment for appointment in appointments if appointment.start_time.date() == day]


def appointments_for_doctor(
    appointments: Iterable[Appointment], doctor_id: str
) -> list[Appointment]:
    return [appointment for appointment in appointments if appointment.doctor_id == doctor_id]


def appointments_for_patient(
    appointments: Iterable[Appointment], patient_id: str
) -> list[Appointment]:
    return [appointment for appointment in appointments if appointment.patient_id == patient_id]


def appointments_with_status(
    appointments: Iterable[Appointment], status: AppointmentStatus | str
) -> list[Appointment]:
    return [appointment for appointment in appointments if appointment.status == status]


def upcoming_appointments(
    appointments: Iterable[Appointment], now: datetime, days: int = 7
) -> list[Appointment]:
    """Appointments starting between ``now`` and ``days`` days later, soonest first."""
    horizon = now + timedelta(days=days)
    upcoming = [
        appointment for appointment in appointments if now <= appointment.start_time <= horizon
    ]
    return sorted(upcoming, key=lambda appointment: appointment.start_time)


def appointment_stats(appointments: Sequence[Appointment], today: date) -> AppointmentStats:
    """Today's count and per-status totals across the whole list."""
    counts = Counter(appointment.status for appointment in appointments)
    return AppointmentStats(
        today=len(appointments_on(appointments, today)),
        total=len(appointments),
        by_status={status: counts.get(status, 0) for status in AppointmentStatus},
    )
