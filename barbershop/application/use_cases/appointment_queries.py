from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import date, datetime

from barbershop.application.ports.appointment_repository import AppointmentFilters, AppointmentRepositoryPort
from barbershop.application.utils.time_helpers import day_bounds, month_bounds, week_bounds
from barbershop.domain.entities.appointment import (
    ACTIVE_STATUSES,
    Appointment,
    AppointmentStatistics,
    AppointmentStatus,
)


class AppointmentQueries:
    def __init__(
        self,
        appointments: AppointmentRepositoryPort,
        clock: Callable[[], datetime] = datetime.now,
        upcoming_limit: int = 10,
    ) -> None:
        self._appointments = appointments
        self._clock = clock
        self._upcoming_limit = upcoming_limit

    def find(self, filters: AppointmentFilters | None = None) -> list[Appointment]:
        return self._appointments.search(filters or AppointmentFilters())

    def for_day(self, day: date, employee_id: str | None = None) -> list[Appointment]:
        start, end = day_bounds(day)
        return self.find(AppointmentFilters(start_from=start, start_until=end, employee_id=employee_id))

    def for_week(self, first_day: date, employee_id: str | None = None) -> list[Appointment]:
        start, end = week_bounds(first_day)
        return self.find(AppointmentFilters(start_from=start, start_until=end, employee_id=employee_id))

    def for_month(self, year: int, month: int, employee_id: str | None = None) -> list[Appointment]:
        start, end = month_bounds(year, month)
        return self.find(AppointmentFilters(start_from=start, start_until=end, employee_id=employee_id))

    def upcoming(self, limit: int | None = None, employee_id: str | None = None) -> list[Appointment]:
        """Active appointments from now on, soonest first."""
        filters = AppointmentFilters(
            start_from=self._clock(),
            employee_id=employee_id,
            statuses=ACTIVE_STATUSES,
        )
        return self._appointments.search(filters, limit=limit or self._upcoming_limit)

    def statistics(self, start: datetime | None = None, end: datetime | None = None) -> AppointmentStatistics:
        appointments = self.find(AppointmentFilters(start_from=start, start_until=end))
        counts = Counter(a.status for a in appointments)
        return AppointmentStatistics(
            total=len(appointments),
            pending=counts[AppointmentStatus.PENDING],
            confirmed=counts[AppointmentStatus.CONFIRMED],
            completed=counts[AppointmentStatus.COMPLETED],
            cancelled=counts[AppointmentStatus.CANCELLED],
        )
