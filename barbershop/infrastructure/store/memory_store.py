from __future__ import annotations

import threading
from collections.abc import Iterable

from barbershop.application.ports.appointment_repository import AppointmentFilters, AppointmentRepositoryPort
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus, TimeRange


class MemoryAppointmentRepository(AppointmentRepositoryPort):
    def __init__(self, appointments: Iterable[Appointment] | None = None) -> None:
        self._appointments: dict[str, Appointment] = {a.id: a for a in appointments or []}
        self._lock = threading.Lock()

    def find_by_id(self, appointment_id: str) -> Appointment | None:
        with self._lock:
            return self._appointments.get(appointment_id)

    def find_by_employee_and_window(
        self,
        employee_id: str,
        statuses: Iterable[AppointmentStatus],
        window: TimeRange,
        exclude_id: str | None = None,
    ) -> list[Appointment]:
        wanted = set(statuses)
        with self._lock:
            matches = [
                a
                for a in self._appointments.values()
                if a.employee_id == employee_id
                and a.status in wanted
                and a.id != exclude_id
                and window.contains(a.start)
            ]
        return sorted(matches, key=lambda a: a.start)

    def save(self, appointment: Appointment) -> Appointment:
        with self._lock:
            self._appointments[appointment.id] = appointment
        return appointment

    def delete(self, appointment_id: str) -> bool:
        with self._lock:
            return self._appointments.pop(appointment_id, None) is not None

    def search(self, filters: AppointmentFilters | None = None, limit: int | None = None) -> list[Appointment]:
        filters = filters or AppointmentFilters()
        with self._lock:
            matches = [a for a in self._appointments.values() if filters.matches(a)]
        matches.sort(key=lambda a: a.start)
        return matches[:limit] if limit is not None else matches
