"""Appointment lifecycle: status derivation and legal transitions."""

import random
from datetime import datetime

from app.core.exceptions import ConflictException
from app.schemas.appointments import AppointmentStatus

# scheduled -> confirmed -> in_progress -> completed. cancelled is reachable
# until completion and no_show until the visit starts.
ALLOWED_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset(
        {
            AppointmentStatus.CONFIRMED,
            AppointmentStatus.IN_PROGRESS,
            AppointmentStatus.CANCELLED,
            AppointmentStatus.NO_SHOW,
        }
    ),
    AppointmentStatus.CONFIRMED: frozenset(
        {
            AppointmentStatus.IN_PROGRESS,
            AppointmentStatus.CANCELLED,
            AppointmentStatus.NO_SHOW,
        }
    ),
    AppointmentStatus.IN_PROGRESS: frozenset(
        {
            AppointmentStatus.COMPLETED,
            AppointmentStatus.CANCELLED,
        }
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.NO_SHOW: frozenset(),
}


def derive_status(start_time: datetime, now: datetime, rng: random.Random) -> AppointmentStatus:
    """
    Pick a plausible status for a synthetic appointment.

    Args:
        start_time: Scheduled start of the appointment
        now: Current time, as reported by the clock
        rng: Random source shared with the generator

    Returns:
        Derived status, biased by where the appointment sits relative to now
    """
    if start_time.date() < now.date():
        return AppointmentStatus.COMPLETED if rng.random() > 0.2 else AppointmentStatus.CANCELLED

    if start_time.date() == now.date():
        if start_time < now:
            return (
                AppointmentStatus.COMPLETED if rng.random() > 0.3 else AppointmentStatus.IN_PROGRESS
            )
        return AppointmentStatus.CONFIRMED if rng.random() > 0.5 else AppointmentStatus.SCHEDULED

    return AppointmentStatus.CONFIRMED if rng.random() > 0.3 else AppointmentStatus.SCHEDULED


def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    """Check whether ``current`` may move to ``target``."""
    return target in ALLOWED_TRANSITIONS[current]


def ensure_transition(current: AppointmentStatus, target: AppointmentStatus) -> None:
    """
    Validate a status change.

    Raises:
        ConflictException: If the lifecycle does not allow the change
    """
    if not can_transition(current, target):
        raise ConflictException(
            f"Cannot change appointment status from {current.value} to {target.value}"
        )
