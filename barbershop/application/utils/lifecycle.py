from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from barbershop.application.exceptions import AppointmentValidationError, IllegalStateTransitionError
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus


class AppointmentLifecycle:
    """
    Status rules for appointments.

    PENDING and CONFIRMED move freely between each other and to COMPLETED or
    CANCELLED. COMPLETED is terminal. CANCELLED may only go back to PENDING.
    Cancelling always needs a reason.
    """

    def ensure_can_transition(
        self,
        appointment: Appointment,
        new_status: AppointmentStatus,
        cancellation_reason: str | None = None,
    ) -> None:
        if appointment.status == AppointmentStatus.COMPLETED:
            raise IllegalStateTransitionError("Cannot modify a completed appointment")

        if appointment.status == AppointmentStatus.CANCELLED and new_status != AppointmentStatus.PENDING:
            raise IllegalStateTransitionError("A cancelled appointment may only be reactivated to PENDING")

        if new_status == AppointmentStatus.CANCELLED and not (cancellation_reason or "").strip():
            raise AppointmentValidationError("A cancellation reason is required")

    def apply_transition(
        self,
        appointment: Appointment,
        new_status: AppointmentStatus,
        cancellation_reason: str | None = None,
        now: datetime | None = None,
    ) -> Appointment:
        self.ensure_can_transition(appointment, new_status, cancellation_reason)
        reason = cancellation_reason.strip() if new_status == AppointmentStatus.CANCELLED and cancellation_reason else None
        return replace(
            appointment,
            status=new_status,
            cancellation_reason=reason,
            updated_at=now or appointment.updated_at,
        )

    def requires_availability_check(self, appointment: Appointment, new_status: AppointmentStatus) -> bool:
        """A reactivated appointment occupies its slot again."""
        return appointment.status == AppointmentStatus.CANCELLED and new_status == AppointmentStatus.PENDING

    def ensure_can_reschedule(self, appointment: Appointment) -> None:
        if appointment.status == AppointmentStatus.COMPLETED:
            raise IllegalStateTransitionError("Cannot modify a completed appointment")
        if appointment.status == AppointmentStatus.CANCELLED:
            raise IllegalStateTransitionError("Reactivate a cancelled appointment before rescheduling it")

    def ensure_can_delete(self, appointment: Appointment) -> None:
        if appointment.status == AppointmentStatus.COMPLETED:
            raise IllegalStateTransitionError("Cannot delete a completed appointment")
