"""Synthetic appointment generation for the clinic console."""

import random
from collections.abc import Sequence
from datetime import datetime, time, timedelta

import structlog

from app.schemas.appointments import Appointment
from app.services.calendar_service import week_start
from app.services.status_service import derive_status

logger = structlog.get_logger()

# Morning and afternoon clinic sessions, every half hour
DEFAULT_TIME_SLOTS: tuple[time, ...] = (
    time(9, 0),
    time(9, 30),
    time(10, 0),
    time(10, 30),
    time(11, 0),
    time(11, 30),
    time(14, 0),
    time(14, 30),
    time(15, 0),
    time(15, 30),
    time(16, 0),
    time(16, 30),
)

# None entries are weighted in so that roughly a third of appointments carry no text
NOTES_POOL: tuple[str | None, ...] = (
    "Patient requested morning appointment",
    "Follow-up after root canal treatment",
    "Regular cleaning and checkup",
    "Patient has dental anxiety - extra time needed",
    "Insurance pre-authorization required",
    None,
    None,
)

SYMPTOMS_POOL: tuple[str | None, ...] = (
    "Tooth pain in upper right",
    "Sensitivity to cold",
    "Routine cleaning",
    "Gum bleeding",
    "Broken tooth",
    "Jaw pain",
    None,
    None,
    None,
)

SATURDAY = 5
FOLLOW_UP_RATE = 0.2
CREATED_AT_LOOKBACK = timedelta(days=7)


def generate_appointments(
    rng: random.Random,
    now: datetime,
    doctor_ids: Sequence[str],
    patient_ids: Sequence[str],
    service_ids: Sequence[str],
    clinic_id: str,
    *,
    time_slots: Sequence[time] = DEFAULT_TIME_SLOTS,
    window_days: int = 14,
    min_per_day: int = 2,
    max_per_day: int = 4,
    duration: timedelta = timedelta(minutes=30),
) -> list[Appointment]:
    """
    Generate a plausible appointment set starting on the Monday of ``now``'s week.

    Each weekday in the window draws between ``min_per_day`` and
    ``max_per_day`` appointments. A draw that would put a doctor in a time
    slot already taken that day is dropped without a retry, so a day can end
    up with fewer appointments than drawn.

    Args:
        rng: Random source; seed it for a reproducible set
        now: Current time, used for the window start and status derivation
        doctor_ids: Doctor roster, assigned round-robin by draw index
        patient_ids: Patient roster, assigned round-robin by day and draw index
        service_ids: Services to book; one is picked per appointment
        clinic_id: Clinic every appointment belongs to
        time_slots: Candidate start times
        window_days: Number of calendar days to cover
        min_per_day: Fewest appointments drawn for a weekday
        max_per_day: Most appointments drawn for a weekday
        duration: Length of every appointment

    Returns:
        Appointments sorted ascending by start time
    """
    if not (time_slots and doctor_ids and patient_ids and service_ids):
        logger.warning(
            "appointment_generation_skipped",
            slots=len(time_slots),
            doctors=len(doctor_ids),
            patients=len(patient_ids),
            services=len(service_ids),
        )
        return []

    first_day = week_start(now.date())
    appointments: list[Appointment] = []
    dropped = 0

    for day_index in range(window_days):
        day = first_day + timedelta(days=day_index)
        if day.weekday() >= SATURDAY:
            continue

        booked: set[tuple[str, datetime]] = set()
        for draw in range(rng.randint(min_per_day, max_per_day)):
            start_time = datetime.combine(day, rng.choice(time_slots))
            doctor_id = doctor_ids[draw % len(doctor_ids)]

            if (doctor_id, start_time) in booked:
                dropped += 1
                logger.debug(
                    "appointment_draw_skipped",
                    doctor_id=doctor_id,
                    start_time=start_time.isoformat(),
                )
                continue
            booked.add((doctor_id, start_time))

            appointments.append(
                Appointment(
                    id=f"appointment-{day_index}-{draw}",
                    patient_id=patient_ids[(day_index + draw) % len(patient_ids)],
                    doctor_id=doctor_id,
                    clinic_id=clinic_id,
                    service_ids=[rng.choice(service_ids)],
                    start_time=start_time,
                    end_time=start_time + duration,
                    status=derive_status(start_time, now, rng),
                    notes=rng.choice(NOTES_POOL),
                    symptoms=rng.choice(SYMPTOMS_POOL),
                    is_follow_up=rng.random() < FOLLOW_UP_RATE,
                    created_at=now - rng.random() * CREATED_AT_LOOKBACK,
                    updated_at=now,
                )
            )

    appointments.sort(key=lambda appointment: appointment.start_time)

    logger.info(
        "appointments_generated",
        count=len(appointments),
        dropped_conflicts=dropped,
        window_start=first_day.isoformat(),
        window_days=window_days,
    )
    return appointments
