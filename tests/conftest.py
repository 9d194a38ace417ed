import random
from collections.abc import AsyncGenerator, Callable
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.clock import FixedClock
from app.core.store import AppointmentStore
from app.dependencies import get_appointment_store, get_clock, get_directory
from app.main import app
from app.schemas.appointments import Appointment, AppointmentDetail, AppointmentStatus
from app.services.directory_service import DirectoryService

# Wednesday, midday: Mon 6th and Tue 7th are in the past, Wed 8th is today
NOW = datetime(2025, 1, 8, 12, 0)


@pytest.fixture
def now() -> datetime:
    """Fixed current time used across the suite."""
    return NOW


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to NOW."""
    return FixedClock(NOW)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def directory() -> DirectoryService:
    """Directory over the seed rosters."""
    return DirectoryService()


@pytest.fixture
def appointment_factory() -> Callable[..., Appointment]:
    """Build hand-crafted appointments with sensible defaults."""

    def make(
        appointment_id: str,
        start_time: datetime,
        *,
        doctor_id: str = "doctor-001",
        patient_id: str = "patient-001",
        service_ids: list[str] | None = None,
        status: AppointmentStatus = AppointmentStatus.SCHEDULED,
        notes: str | None = None,
        symptoms: str | None = None,
    ) -> Appointment:
        return Appointment(
            id=appointment_id,
            patient_id=patient_id,
            doctor_id=doctor_id,
            clinic_id="clinic-001",
            service_ids=service_ids or ["service-001"],
            start_time=start_time,
            end_time=start_time + timedelta(minutes=30),
            status=status,
            notes=notes,
            symptoms=symptoms,
            created_at=NOW - timedelta(days=3),
            updated_at=NOW - timedelta(days=3),
        )

    return make


@pytest.fixture
def sample_appointments(appointment_factory) -> list[Appointment]:
    """Six appointments across three weeks, ascending by start time."""
    return [
        appointment_factory(
            "apt-1",
            datetime(2025, 1, 6, 9, 0),
            doctor_id="doctor-001",
            patient_id="patient-001",
            service_ids=["service-001"],
            status=AppointmentStatus.COMPLETED,
        ),
        appointment_factory(
            "apt-2",
            datetime(2025, 1, 6, 9, 0),
            doctor_id="doctor-002",
            patient_id="patient-002",
            service_ids=["service-002"],
            status=AppointmentStatus.CANCELLED,
        ),
        appointment_factory(
            "apt-3",
            datetime(2025, 1, 8, 10, 30),
            doctor_id="doctor-001",
            patient_id="patient-004",
            service_ids=["service-003"],
            status=AppointmentStatus.CONFIRMED,
            symptoms="Jaw pain",
        ),
        appointment_factory(
            "apt-4",
            datetime(2025, 1, 8, 14, 0),
            doctor_id="doctor-002",
            patient_id="patient-005",
            service_ids=["service-004"],
            status=AppointmentStatus.SCHEDULED,
            notes="Insurance pre-authorization required",
        ),
        appointment_factory(
            "apt-5",
            datetime(2025, 1, 13, 9, 0),
            doctor_id="doctor-001",
            patient_id="patient-003",
            service_ids=["service-001"],
            status=AppointmentStatus.CONFIRMED,
        ),
        appointment_factory(
            "apt-6",
            datetime(2025, 1, 27, 11, 0),
            doctor_id="doctor-002",
            patient_id="patient-001",
            service_ids=["service-002"],
            status=AppointmentStatus.SCHEDULED,
        ),
    ]


@pytest.fixture
def appointment_store(sample_appointments) -> AppointmentStore:
    """Store holding the sample appointments."""
    return AppointmentStore(sample_appointments)


@pytest_asyncio.fixture
async def client(
    appointment_store: AppointmentStore,
    directory: DirectoryService,
    fixed_clock: FixedClock,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client over the sample appointments."""
    app.dependency_overrides[get_appointment_store] = lambda: appointment_store
    app.dependency_overrides[get_directory] = lambda: directory
    app.dependency_overrides[get_clock] = lambda: fixed_clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def detail_factory(appointment_factory, directory) -> Callable[..., AppointmentDetail]:
    """Build hand-crafted appointments with display names attached."""

    def make(*args, **kwargs) -> AppointmentDetail:
        return directory.describe_appointment(appointment_factory(*args, **kwargs))

    return make


@pytest.fixture
def sample_details(sample_appointments, directory) -> list[AppointmentDetail]:
    """The sample appointments with display names attached."""
    return [directory.describe_appointment(appointment) for appointment in sample_appointments]
