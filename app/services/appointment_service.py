"""Appointment service for business logic."""

import random
from datetime import timedelta

import structlog

from app.config import Settings
from app.core.clock import Clock
from app.core.exceptions import ConflictException, NotFoundException
from app.core.store import AppointmentStore
from app.models.directory import GENERATED_SERVICE_CATEGORY
from app.schemas.appointments import (
    Appointment,
    AppointmentDetail,
    AppointmentListResponse,
    AppointmentStats,
    AppointmentStatusUpdate,
    FilterState,
    NavigationCursor,
    ViewBuckets,
)
from app.services.appointment_generator import generate_appointments
from app.services.calendar_service import bucket_for_view, view_title
from app.services.directory_service import DirectoryService
from app.services.query_service import (
    appointment_stats,
    appointments_for_doctor,
    appointments_for_patient,
    date_window,
    filter_appointments,
    upcoming_appointments,
)
from app.services.status_service import ensure_transition

logger = structlog.get_logger()


def build_store(settings: Settings, directory: DirectoryService, clock: Clock) -> AppointmentStore:
    """
    Generate the canonical appointment list for a session.

    Args:
        settings: Generation settings
        directory: Rosters of doctors, patients and services
        clock: Source of the generation time

    Returns:
        Store holding the generated appointments
    """
    clinic_id = settings.default_clinic_id
    appointments = generate_appointments(
        random.Random(settings.generator_seed),
        clock.now(),
        doctor_ids=directory.doctor_ids(clinic_id),
        patient_ids=directory.patient_ids(),
        service_ids=directory.service_ids(GENERATED_SERVICE_CATEGORY),
        clinic_id=clinic_id,
        window_days=settings.generation_window_days,
        min_per_day=settings.min_appointments_per_day,
        max_per_day=settings.max_appointments_per_day,
        duration=timedelta(minutes=settings.appointment_duration_minutes),
    )
    return AppointmentStore(appointments)


class AppointmentService:
    """Service for querying and updating appointments."""

    def __init__(self, store: AppointmentStore, directory: DirectoryService, clock: Clock):
        """Initialize service with the store, directory and clock it reads from."""
        self.store = store
        self.directory = directory
        self.clock = clock

    def describe(self, appointment: Appointment) -> AppointmentDetail:
        return self.directory.describe_appointment(appointment)

    def _visible(
        self,
        cursor: NavigationCursor,
        filters: FilterState,
        doctor_id: str | None,
        patient_id: str | None,
    ) -> list[AppointmentDetail]:
        items = filter_appointments(self.store.snapshot(), cursor, filters, self.directory)
        if doctor_id is not None:
            items = appointments_for_doctor(items, doctor_id)
        if patient_id is not None:
            items = appointments_for_patient(items, patient_id)
        return [self.describe(appointment) for appointment in items]

    def list_appointments(
        self,
        cursor: NavigationCursor,
        filters: FilterState,
        doctor_id: str | None = None,
        patient_id: str | None = None,
    ) -> AppointmentListResponse:
        """
        List appointments visible under the cursor and filters.

        Args:
            cursor: Displayed date and view mode
            filters: Status filter and search query
            doctor_id: Only this doctor's appointments, when given
            patient_id: Only this patient's appointments, when given

        Returns:
            Filtered appointments with display names and the window they
            were taken from
        """
        items = self._visible(cursor, filters, doctor_id, patient_id)
        window_start, window_end = date_window(cursor)

        return AppointmentListResponse(
            total=len(items),
            view_mode=cursor.view_mode,
            window_start=window_start,
            window_end=window_end,
            title=view_title(cursor),
            items=items,
        )

    def calendar(
        self,
        cursor: NavigationCursor,
        filters: FilterState,
        doctor_id: str | None = None,
        patient_id: str | None = None,
    ) -> ViewBuckets:
        """Filtered appointments bucketed for the cursor's view mode."""
        items = self._visible(cursor, filters, doctor_id, patient_id)
        return bucket_for_view(items, cursor.view_mode, cursor)

    def get_appointment(self, appointment_id: str) -> Appointment:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found
        """
        appointment = self.store.get(appointment_id)
        if appointment is None:
            raise NotFoundException("Appointment not found")
        return appointment

    def stats(self) -> AppointmentStats:
        return appointment_stats(self.store.snapshot(), self.clock.today())

    def upcoming(self, days: int = 7) -> list[AppointmentDetail]:
        upcoming = upcoming_appointments(self.store.snapshot(), self.clock.now(), days)
        return [self.describe(appointment) for appointment in upcoming]

    def update_status(
        self,
        appointment_id: str,
        data: AppointmentStatusUpdate,
    ) -> Appointment:
        """
        Move an appointment to a new lifecycle status.

        Args:
            appointment_id: Appointment ID
            data: Target status and optional notes

        Returns:
            Updated appointment

        Raises:
            NotFoundException: If appointment not found
            ConflictException: If the lifecycle does not allow the change
        """
        current = self.get_appointment(appointment_id)

        try:
            ensure_transition(current.status, data.status)
        except ConflictException:
            logger.warning(
                "appointment_status_transition_rejected",
                appointment_id=appointment_id,
                current_status=current.status.value,
                requested_status=data.status.value,
            )
            raise

        update_values = {
            "status": data.status,
            "updated_at": self.clock.now(),
        }
        if data.notes:
            update_values["notes"] = data.notes

        updated = self.store.replace(current.model_copy(update=update_values))

        logger.info(
            "appointment_status_updated",
            appointment_id=appointment_id,
            old_status=current.status.value,
            new_status=updated.status.value,
        )
        return updated
