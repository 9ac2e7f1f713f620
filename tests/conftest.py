from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

import pytest

from barbershop.application.dto.appointment_requests import CreateAppointmentRequest
from barbershop.application.use_cases.conflict_detector import ConflictDetector
from barbershop.application.use_cases.scheduling import SchedulingService
from barbershop.application.use_cases.weekly_availability import WeeklyAvailability
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus
from barbershop.domain.entities.employee import Employee, Weekday, WorkingInterval
from barbershop.domain.entities.service_catalog import ServiceCatalogEntry
from barbershop.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from barbershop.infrastructure.directory.memory_directory import MemoryClientDirectory, MemoryEmployeeDirectory
from barbershop.infrastructure.store.memory_store import MemoryAppointmentRepository

# Monday 2026-10-19, 08:00. Bookings go on the following Monday.
NOW = datetime(2026, 10, 19, 8, 0)
MONDAY = date(2026, 10, 26)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@dataclass
class SchedulingEnv:
    appointments: MemoryAppointmentRepository
    employees: MemoryEmployeeDirectory
    clients: MemoryClientDirectory
    detector: ConflictDetector
    service: SchedulingService
    clock: FakeClock

    def book(self, start: datetime, duration_minutes: int = 30, employee_id: str = "emp-1") -> Appointment:
        return self.service.create(
            CreateAppointmentRequest(
                employee_id=employee_id,
                client_id="client-1",
                service_name="Haircut",
                start=start,
                duration_minutes=duration_minutes,
            )
        )

    def seed(
        self,
        appointment_id: str,
        start: datetime,
        duration_minutes: int = 30,
        status: AppointmentStatus = AppointmentStatus.PENDING,
        employee_id: str = "emp-1",
    ) -> Appointment:
        """Store an appointment directly, bypassing the booking checks."""
        return self.appointments.save(
            Appointment(
                id=appointment_id,
                employee_id=employee_id,
                client_id="client-1",
                service_name="Haircut",
                start=start,
                duration_minutes=duration_minutes,
                status=status,
                cancellation_reason="No show" if status == AppointmentStatus.CANCELLED else None,
            )
        )


def at(hour: int, minute: int = 0, day: date = MONDAY) -> datetime:
    return datetime.combine(day, time(hour, minute))


def build_employee(employee_id: str = "emp-1", active: bool = True) -> Employee:
    return Employee(
        id=employee_id,
        name="Carlos",
        weekly_schedule={
            Weekday.MONDAY: WorkingInterval.parse("09:00", "18:00"),
            Weekday.TUESDAY: WorkingInterval.parse("10:00", "14:00"),
            Weekday.SATURDAY: WorkingInterval.parse("08:00", "12:30"),
        },
        active=active,
    )


@pytest.fixture
def slot():
    return at


@pytest.fixture
def env() -> SchedulingEnv:
    appointments = MemoryAppointmentRepository()
    employees = MemoryEmployeeDirectory([build_employee("emp-1"), build_employee("emp-2")])
    clients = MemoryClientDirectory(["client-1", "client-2"])
    detector = ConflictDetector(WeeklyAvailability(employees), appointments)
    clock = FakeClock()
    service = SchedulingService(
        appointments=appointments,
        employees=employees,
        clients=clients,
        detector=detector,
        clock=clock,
    )
    return SchedulingEnv(appointments, employees, clients, detector, service, clock)


@pytest.fixture
def catalog() -> ServiceCatalogStore:
    return ServiceCatalogStore(
        [
            ServiceCatalogEntry(name="Haircut", price=Decimal("25.00"), duration_minutes=30),
            ServiceCatalogEntry(name="Beard Trim", price=Decimal("12.50"), duration_minutes=20),
            ServiceCatalogEntry(name="Hot Towel Shave", price=Decimal("30.00"), duration_minutes=45, active=False),
        ]
    )
