from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from barbershop.application.exceptions import OutOfWorkingHoursError, SchedulingConflictError
from barbershop.application.ports.appointment_repository import AppointmentRepositoryPort
from barbershop.application.use_cases.weekly_availability import WeeklyAvailability
from barbershop.application.utils.time_helpers import minutes_of_day
from barbershop.domain.entities.appointment import ACTIVE_STATUSES, Appointment, TimeRange
from barbershop.domain.entities.availability import AvailabilityResult, UnavailableKind

DEFAULT_LOOKBACK_MINUTES = 120

# (candidate_start, candidate_end, existing) -> does `existing` block the candidate slot?
ConflictRule = Callable[[datetime, datetime, Appointment], bool]


def lookback_start_rule(
    candidate_start: datetime,
    candidate_end: datetime,
    existing: Appointment,
    lookback_minutes: int = DEFAULT_LOOKBACK_MINUTES,
) -> bool:
    """
    Current booking rule. Only the existing appointment's start is inspected:
    it blocks when it lies in [candidate_start - lookback, candidate_start]
    or in [candidate_start, candidate_end).

    This is not an interval-overlap test. The existing duration is ignored, so
    a long appointment that started more than `lookback_minutes` earlier does
    not block, and a short one that ended before the candidate starts still does.
    """
    lookback_start = candidate_start - timedelta(minutes=lookback_minutes)
    if lookback_start <= existing.start <= candidate_start:
        return True
    return candidate_start <= existing.start < candidate_end


class ConflictDetector:
    def __init__(
        self,
        availability: WeeklyAvailability,
        appointments: AppointmentRepositoryPort,
        lookback_minutes: int = DEFAULT_LOOKBACK_MINUTES,
        rule: ConflictRule | None = None,
    ) -> None:
        self._availability = availability
        self._appointments = appointments
        self._lookback_minutes = lookback_minutes
        self._rule = rule or (
            lambda start, end, existing: lookback_start_rule(start, end, existing, lookback_minutes)
        )
        self._logger = logging.getLogger(__name__)

    def check_availability(
        self,
        employee_id: str,
        start: datetime,
        duration_minutes: int,
        exclude_appointment_id: str | None = None,
    ) -> AvailabilityResult:
        interval = self._availability.interval_on(employee_id, start)
        if interval is None:
            return AvailabilityResult.blocked(
                UnavailableKind.OUT_OF_WORKING_HOURS, "Employee does not work this day"
            )

        start_minutes = minutes_of_day(start)
        if start_minutes < interval.start_minutes or start_minutes + duration_minutes > interval.end_minutes:
            return AvailabilityResult.blocked(
                UnavailableKind.OUT_OF_WORKING_HOURS, f"Working hours: {interval.label()}"
            )

        end = start + timedelta(minutes=duration_minutes)
        window = TimeRange(start=start - timedelta(minutes=self._lookback_minutes), end=end)
        candidates = self._appointments.find_by_employee_and_window(
            employee_id,
            ACTIVE_STATUSES,
            window,
            exclude_id=exclude_appointment_id,
        )
        conflicts = [a for a in candidates if self._rule(start, end, a)]

        if conflicts:
            self._logger.info(
                "Slot rejected by existing appointment",
                extra={
                    "employee_id": employee_id,
                    "start": start.isoformat(),
                    "appointment_id": conflicts[0].id,
                },
            )
            return AvailabilityResult.blocked(
                UnavailableKind.SCHEDULING_CONFLICT, "Employee already has an appointment in that slot"
            )

        return AvailabilityResult.free()

    def require_available(
        self,
        employee_id: str,
        start: datetime,
        duration_minutes: int,
        exclude_appointment_id: str | None = None,
    ) -> None:
        """Same as check_availability, but raises the matching SchedulingError."""
        result = self.check_availability(employee_id, start, duration_minutes, exclude_appointment_id)
        if result.available:
            return
        reason = result.reason or "Employee is not available at that time"
        if result.kind == UnavailableKind.SCHEDULING_CONFLICT:
            raise SchedulingConflictError(reason)
        raise OutOfWorkingHoursError(reason)
