from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from barbershop.domain.entities.appointment import AppointmentOrigin


@dataclass(frozen=True)
class CreateAppointmentRequest:
    employee_id: str
    client_id: str
    service_name: str
    start: datetime
    duration_minutes: int
    origin: AppointmentOrigin = AppointmentOrigin.MANUAL
    notes: str | None = None


@dataclass(frozen=True)
class RescheduleRequest:
    """Fields left as None keep the appointment's current value."""

    start: datetime | None = None
    employee_id: str | None = None
    duration_minutes: int | None = None
    client_id: str | None = None
    service_name: str | None = None
    notes: str | None = None

    @property
    def moves_slot(self) -> bool:
        return self.start is not None or self.employee_id is not None or self.duration_minutes is not None
