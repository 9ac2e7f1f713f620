from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


class AppointmentStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class AppointmentOrigin(str, Enum):
    WHATSAPP = "WHATSAPP"
    MANUAL = "MANUAL"
    PHONE = "PHONE"


ACTIVE_STATUSES: frozenset[AppointmentStatus] = frozenset(
    {AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED}
)


@dataclass(frozen=True)
class TimeRange:
    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


@dataclass(frozen=True)
class Appointment:
    id: str
    employee_id: str
    client_id: str
    service_name: str
    start: datetime
    duration_minutes: int
    status: AppointmentStatus = AppointmentStatus.PENDING
    origin: AppointmentOrigin = AppointmentOrigin.MANUAL
    notes: str | None = None
    cancellation_reason: str | None = None
    reference: str | None = None  # human readable booking number shown on tickets
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES


@dataclass(frozen=True)
class AppointmentStatistics:
    total: int = 0
    pending: int = 0
    confirmed: int = 0
    completed: int = 0
    cancelled: int = 0
