import threading

from booking.models.appointment import Appointment


class AppointmentStore:
    """In-memory appointment list owned by one application instance.

    Nothing is persisted; the list lives as long as the process.
    """

    def __init__(self) -> None:
        self._appointments: list[Appointment] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._appointments)

    def snapshot(self) -> list[Appointment]:
        with self._lock:
            return list(self._appointments)

    def booked_times(self, date: str) -> set[str]:
        with self._lock:
            return {a.time for a in self._appointments if a.date == date}

    def add_if_free(self, appointment: Appointment) -> bool:
        """Append unless (date, time) is already held. Returns False on conflict."""
        with self._lock:
            for existing in self._appointments:
                if existing.date == appointment.date and existing.time == appointment.time:
                    return False
            self._appointments.append(appointment)
            return True
