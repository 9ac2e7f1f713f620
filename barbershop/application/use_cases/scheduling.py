from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime

from barbershop.application.dto.appointment_requests import CreateAppointmentRequest, RescheduleRequest
from barbershop.application.exceptions import AppointmentValidationError, NotFoundError, PastDateRejectedError
from barbershop.application.ports.appointment_repository import AppointmentRepositoryPort
from barbershop.application.ports.client_directory import ClientDirectoryPort
from barbershop.application.ports.employee_directory import EmployeeDirectoryPort
from barbershop.application.use_cases.conflict_detector import ConflictDetector
from barbershop.application.utils.employee_locks import EmployeeLockRegistry
from barbershop.application.utils.lifecycle import AppointmentLifecycle
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus


class SchedulingService:
    def __init__(
        self,
        appointments: AppointmentRepositoryPort,
        employees: EmployeeDirectoryPort,
        clients: ClientDirectoryPort,
        detector: ConflictDetector,
        lifecycle: AppointmentLifecycle | None = None,
        locks: EmployeeLockRegistry | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._appointments = appointments
        self._employees = employees
        self._clients = clients
        self._detector = detector
        self._lifecycle = lifecycle or AppointmentLifecycle()
        self._locks = locks or EmployeeLockRegistry()
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def get(self, appointment_id: str) -> Appointment:
        appointment = self._appointments.find_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found")
        return appointment

    def create(self, request: CreateAppointmentRequest) -> Appointment:
        _require_text(request.employee_id, "An employee is required")
        _require_text(request.client_id, "A client is required")
        _require_text(request.service_name, "A service is required")
        _require_positive_duration(request.duration_minutes)

        now = self._clock()
        if request.start < now:
            raise PastDateRejectedError("Appointments cannot be created in the past")

        with self._locks.hold(request.employee_id):
            self._employees.get_employee(request.employee_id)
            self._detector.require_available(request.employee_id, request.start, request.duration_minutes)

            if not self._clients.client_exists(request.client_id):
                raise NotFoundError("Client not found")

            appointment = Appointment(
                id=str(uuid.uuid4()),
                employee_id=request.employee_id,
                client_id=request.client_id,
                service_name=request.service_name.strip(),
                start=request.start,
                duration_minutes=request.duration_minutes,
                status=AppointmentStatus.PENDING,
                origin=request.origin,
                notes=request.notes or None,
                reference=_new_reference(now),
                created_at=now,
                updated_at=now,
            )
            saved = self._appointments.save(appointment)

        self._logger.info(
            "Appointment created",
            extra={"appointment_id": saved.id, "employee_id": saved.employee_id, "start": saved.start.isoformat()},
        )
        return saved

    def reschedule(self, appointment_id: str, changes: RescheduleRequest) -> Appointment:
        if changes.employee_id is not None:
            _require_text(changes.employee_id, "An employee is required")
        if changes.duration_minutes is not None:
            _require_positive_duration(changes.duration_minutes)
        if changes.service_name is not None:
            _require_text(changes.service_name, "A service is required")

        with self._locked(appointment_id, changes.employee_id) as current:
            self._lifecycle.ensure_can_reschedule(current)

            employee_id = changes.employee_id or current.employee_id
            start = changes.start or current.start
            duration = changes.duration_minutes or current.duration_minutes
            now = self._clock()

            if changes.moves_slot:
                if start < now:
                    raise PastDateRejectedError("Appointments cannot be rescheduled into the past")
                self._employees.get_employee(employee_id)
                self._detector.require_available(employee_id, start, duration, exclude_appointment_id=current.id)

            client_id = changes.client_id or current.client_id
            if client_id != current.client_id and not self._clients.client_exists(client_id):
                raise NotFoundError("Client not found")

            updated = replace(
                current,
                employee_id=employee_id,
                client_id=client_id,
                start=start,
                duration_minutes=duration,
                service_name=(changes.service_name or current.service_name).strip(),
                notes=(changes.notes or None) if changes.notes is not None else current.notes,
                updated_at=now,
            )
            saved = self._appointments.save(updated)

        self._logger.info(
            "Appointment rescheduled",
            extra={"appointment_id": saved.id, "employee_id": saved.employee_id, "start": saved.start.isoformat()},
        )
        return saved

    def change_status(
        self,
        appointment_id: str,
        new_status: AppointmentStatus,
        cancellation_reason: str | None = None,
    ) -> Appointment:
        with self._locked(appointment_id) as current:
            self._lifecycle.ensure_can_transition(current, new_status, cancellation_reason)
            if self._lifecycle.requires_availability_check(current, new_status):
                self._detector.require_available(
                    current.employee_id,
                    current.start,
                    current.duration_minutes,
                    exclude_appointment_id=current.id,
                )
            updated = self._lifecycle.apply_transition(current, new_status, cancellation_reason, now=self._clock())
            saved = self._appointments.save(updated)

        self._logger.info(
            "Appointment status changed",
            extra={"appointment_id": saved.id, "status": saved.status.value, "reason": saved.cancellation_reason},
        )
        return saved

    def delete(self, appointment_id: str) -> None:
        with self._locked(appointment_id) as current:
            self._lifecycle.ensure_can_delete(current)
            self._appointments.delete(current.id)
        self._logger.info("Appointment deleted", extra={"appointment_id": current.id})

    @contextmanager
    def _locked(self, appointment_id: str, target_employee_id: str | None = None) -> Iterator[Appointment]:
        """
        Yield a fresh copy of the appointment while the lock of its employee,
        and of the target employee when moving it, is held.

        The employee may change between the unlocked read and the acquire;
        in that case the locks are released and taken again.
        """
        while True:
            employee_id = self.get(appointment_id).employee_id
            with self._locks.hold(employee_id, target_employee_id or employee_id):
                current = self.get(appointment_id)
                if current.employee_id == employee_id:
                    yield current
                    return


def _require_text(value: str | None, message: str) -> None:
    if not value or not value.strip():
        raise AppointmentValidationError(message)


def _require_positive_duration(duration_minutes: int) -> None:
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
        raise AppointmentValidationError("Duration must be a positive number of minutes")


def _new_reference(now: datetime) -> str:
    return f"APT-{now.strftime('%Y%m%d')}-{uuid.uuid4().hex[:6].upper()}"
