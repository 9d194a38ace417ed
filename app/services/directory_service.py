"""Directory service for resolving user, service and clinic references."""

from collections.abc import Iterable

from app.models import directory
from app.schemas.appointments import Appointment, AppointmentDetail
from app.schemas.directory import ClinicRecord, ServiceRecord, UserRecord, UserRole

UNKNOWN_PATIENT = "Unknown Patient"
UNKNOWN_DOCTOR = "Unknown Doctor"
UNKNOWN_SERVICE = "Unknown Service"
UNKNOWN_CLINIC = "Unknown Clinic"
DEFAULT_TIMEZONE = "UTC"


class DirectoryService:
    """
    Read-only id -> record lookups.

    Appointments reference users, services and clinics by opaque id with no
    referential integrity, so every lookup returns ``None`` for an unknown id
    and the display helpers fall back to placeholder names.
    """

    def __init__(
        self,
        users: Iterable[UserRecord] = directory.users,
        services: Iterable[ServiceRecord] = directory.services,
        clinics: Iterable[ClinicRecord] = directory.clinics,
    ):
        """Initialize service with the records to index."""
        self._users = {user.id: user for user in users}
        self._services = {service.id: service for service in services}
        self._clinics = {clinic.id: clinic for clinic in clinics}

    def resolve_user(self, user_id: str | None) -> UserRecord | None:
        """Get user by ID."""
        if user_id is None:
            return None
        return self._users.get(user_id)

    def resolve_service(self, service_id: str | None) -> ServiceRecord | None:
        """Get service by ID."""
        if service_id is None:
            return None
        return self._services.get(service_id)

    def resolve_clinic(self, clinic_id: str | None) -> ClinicRecord | None:
        """Get clinic by ID."""
        if clinic_id is None:
            return None
        return self._clinics.get(clinic_id)

    def patient_name(self, patient_id: str | None) -> str:
        patient = self.resolve_user(patient_id)
        return patient.full_name if patient else UNKNOWN_PATIENT

    def doctor_name(self, doctor_id: str | None) -> str:
        doctor = self.resolve_user(doctor_id)
        return doctor.full_name if doctor else UNKNOWN_DOCTOR

    def service_name(self, service_id: str | None) -> str:
        service = self.resolve_service(service_id)
        return service.name if service else UNKNOWN_SERVICE

    def clinic_name(self, clinic_id: str | None) -> str:
        clinic = self.resolve_clinic(clinic_id)
        return clinic.name if clinic else UNKNOWN_CLINIC

    def clinic_timezone(self, clinic_id: str | None) -> str:
        """IANA timezone of a clinic, UTC when the clinic is unknown."""
        clinic = self.resolve_clinic(clinic_id)
        return clinic.timezone if clinic else DEFAULT_TIMEZONE

    def describe_appointment(self, appointment: Appointment) -> AppointmentDetail:
        """
        Attach display names to an appointment.

        Only the first service is named. Unknown references render as the
        placeholder names rather than failing.
        """
        return AppointmentDetail(
            **appointment.model_dump(),
            patient_name=self.patient_name(appointment.patient_id),
            doctor_name=self.doctor_name(appointment.doctor_id),
            service_name=self.service_name(appointment.service_ids[0]),
            clinic_name=self.clinic_name(appointment.clinic_id),
        )

    def doctor_ids(self, clinic_id: str | None = None) -> list[str]:
        """Active doctors, optionally restricted to one clinic, in roster order."""
        return self._user_ids(UserRole.DOCTOR, clinic_id)

    def patient_ids(self, clinic_id: str | None = None) -> list[str]:
        """Active patients, optionally restricted to one clinic, in roster order."""
        return self._user_ids(UserRole.PATIENT, clinic_id)

    def service_ids(self, category: str | None = None) -> list[str]:
        """Active services, optionally restricted to one category, in catalogue order."""
        return [
            service.id
            for service in self._services.values()
            if service.is_active and (category is None or service.category == category)
        ]

    def _user_ids(self, role: UserRole, clinic_id: str | None) -> list[str]:
        return [
            user.id
            for user in self._users.values()
            if user.role == role
            and user.is_active
            and (clinic_id is None or user.clinic_id == clinic_id)
        ]
