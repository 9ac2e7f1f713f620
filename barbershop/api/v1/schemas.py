from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from barbershop.domain.entities.appointment import Appointment, AppointmentOrigin, AppointmentStatus


def _naive(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is not None:
        raise ValueError("Use local wall-clock time without a timezone offset")
    return value


class AppointmentCreateSchema(BaseModel):
    employee_id: str = Field(min_length=1)
    client_id: str = Field(min_length=1)
    service_name: str = Field(min_length=1)
    start: datetime
    duration_minutes: int = Field(gt=0)
    origin: AppointmentOrigin = AppointmentOrigin.MANUAL
    notes: str | None = None

    @field_validator("start")
    @classmethod
    def start_is_naive(cls, value: datetime | None) -> datetime | None:
        return _naive(value)


class AppointmentUpdateSchema(BaseModel):
    employee_id: str | None = Field(default=None, min_length=1)
    client_id: str | None = Field(default=None, min_length=1)
    service_name: str | None = Field(default=None, min_length=1)
    start: datetime | None = None
    duration_minutes: int | None = Field(default=None, gt=0)
    notes: str | None = None

    @field_validator("start")
    @classmethod
    def start_is_naive(cls, value: datetime | None) -> datetime | None:
        return _naive(value)


class StatusChangeSchema(BaseModel):
    status: AppointmentStatus
    cancellation_reason: str | None = None


class AvailabilityRequestSchema(BaseModel):
    employee_id: str = Field(min_length=1)
    start: datetime
    duration_minutes: int = Field(gt=0)
    exclude_appointment_id: str | None = None

    @field_validator("start")
    @classmethod
    def start_is_naive(cls, value: datetime | None) -> datetime | None:
        return _naive(value)


class AvailabilityResponseSchema(BaseModel):
    available: bool
    reason: str | None = None


class AppointmentSchema(BaseModel):
    id: str
    reference: str | None = None
    employee_id: str
    client_id: str
    service_name: str
    start: datetime
    end: datetime
    duration_minutes: int
    status: AppointmentStatus
    origin: AppointmentOrigin
    notes: str | None = None
    cancellation_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, appointment: Appointment) -> "AppointmentSchema":
        return cls(
            id=appointment.id,
            reference=appointment.reference,
            employee_id=appointment.employee_id,
            client_id=appointment.client_id,
            service_name=appointment.service_name,
            start=appointment.start,
            end=appointment.end,
            duration_minutes=appointment.duration_minutes,
            status=appointment.status,
            origin=appointment.origin,
            notes=appointment.notes,
            cancellation_reason=appointment.cancellation_reason,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )


class AppointmentListSchema(BaseModel):
    data: list[AppointmentSchema]
    total: int


class StatisticsSchema(BaseModel):
    total: int
    pending: int
    confirmed: int
    completed: int
    cancelled: int


class SaleResponseSchema(BaseModel):
    transaction_id: str
