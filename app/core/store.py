"""Canonical in-memory appointment store."""

from collections.abc import Iterable

from app.schemas.appointments import Appointment


class AppointmentStore:
    """
    Owner of the canonical appointment list.

    The list is held as a tuple and replaced wholesale on every write, so a
    snapshot handed to a reader never changes underneath it. Readers (the
    filter engine and calendar bucketer) only ever see snapshots.
    """

    def __init__(self, appointments: Iterable[Appointment] = ()):
        """Initialize store with appointments already in start-time order."""
        self._appointments: tuple[Appointment, ...] = tuple(appointments)
        self._index = {
            appointment.id: position for position, appointment in enumerate(self._appointments)
        }

    def __len__(self) -> int:
        return len(self._appointments)

    def snapshot(self) -> tuple[Appointment, ...]:
        """Get the current canonical list."""
        return self._appointments

    def get(self, appointment_id: str) -> Appointment | None:
        """Get appointment by ID."""
        position = self._index.get(appointment_id)
        if position is None:
            return None
        return self._appointments[position]

    def replace(self, appointment: Appointment) -> Appointment:
        """
        Swap in a new version of an existing appointment.

        Args:
            appointment: Updated appointment; its ID must already be stored

        Returns:
            The stored appointment

        Raises:
            KeyError: If no appointment with that ID is stored
        """
        position = self._index[appointment.id]
        appointments = list(self._appointments)
        appointments[position] = appointment
        self._appointments = tuple(appointments)
        return appointment
