from __future__ import annotations

from datetime import datetime

from barbershop.application.ports.employee_directory import EmployeeDirectoryPort
from barbershop.domain.entities.employee import Weekday, WorkingInterval


class WeeklyAvailability:
    def __init__(self, employees: EmployeeDirectoryPort) -> None:
        self._employees = employees

    def interval_for(self, employee_id: str, weekday: Weekday) -> WorkingInterval | None:
        """Working interval for the weekday, or None if the employee does not work that day."""
        employee = self._employees.get_employee(employee_id)
        return employee.interval_for(weekday)

    def interval_on(self, employee_id: str, instant: datetime) -> WorkingInterval | None:
        return self.interval_for(employee_id, Weekday.of(instant))
