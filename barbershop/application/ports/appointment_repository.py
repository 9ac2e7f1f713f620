from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from barbershop.domain.entities.appointment import Appointment, AppointmentStatus, TimeRange


@dataclass(frozen=True)
class AppointmentFilters:
    start_from: datetime | None = None  # inclusive
    start_until: datetime | None = None  # inclusive
    employee_id: str | None = None
    client_id: str | None = None
    status: AppointmentStatus | None = None
    statuses: frozenset[AppointmentStatus] | None = None

    def matches(self, appointment: Appointment) -> bool:
        if self.start_from is not None and appointment.start < self.start_from:
            return False
        if self.start_until is not None and appointment.start > self.start_until:
            return False
        if self.employee_id is not None and appointment.employee_id != self.employee_id:
            return False
        if self.client_id is not None and appointment.client_id != self.client_id:
            return False
        if self.status is not None and appointment.status != self.status:
            return False
        if self.statuses is not None and appointment.status not in self.statuses:
            return False
        return True


class AppointmentRepositoryPort(ABC):
    @abstractmethod
    def find_by_id(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_employee_and_window(
        self,
        employee_id: str,
        statuses: Iterable[AppointmentStatus],
        window: TimeRange,
        exclude_id: str | None = None,
    ) -> list[Appointment]:
        """Appointments of `employee_id` in `statuses` whose start lies in `window` (half-open)."""
        raise NotImplementedError

    @abstractmethod
    def save(self, appointment: Appointment) -> Appointment:
        """Insert or replace by id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, appointment_id: str) -> bool:
        """Delete by id. Returns True if something was removed."""
        raise NotImplementedError

    @abstractmethod
    def search(self, filters: AppointmentFilters | None = None, limit: int | None = None) -> list[Appointment]:
        """Appointments matching `filters`, ordered by start."""
        raise NotImplementedError
