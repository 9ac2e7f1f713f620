from functools import lru_cache
import logging

from barbershop.core.config import settings
from barbershop.application.ports.appointment_repository import AppointmentRepositoryPort
from barbershop.application.ports.sale_recorder import SaleRecorderPort
from barbershop.application.use_cases.appointment_queries import AppointmentQueries
from barbershop.application.use_cases.conflict_detector import ConflictDetector
from barbershop.application.use_cases.record_sale import RecordSaleFromAppointmentUseCase
from barbershop.application.use_cases.scheduling import SchedulingService
from barbershop.application.use_cases.weekly_availability import WeeklyAvailability
from barbershop.application.utils.employee_locks import EmployeeLockRegistry
from barbershop.infrastructure.catalog.service_catalog_store import ServiceCatalogStore
from barbershop.infrastructure.directory.memory_directory import MemoryClientDirectory, MemoryEmployeeDirectory
from barbershop.infrastructure.directory.seed_loader import DirectorySeed, load_seed
from barbershop.infrastructure.sales.http_sale_recorder import HttpSaleRecorder
from barbershop.infrastructure.sales.mock_sale_recorder import MockSaleRecorder
from barbershop.infrastructure.store.json_store import JsonAppointmentRepository
from barbershop.infrastructure.store.memory_store import MemoryAppointmentRepository


@lru_cache
def get_directory_seed() -> DirectorySeed:
    if not settings.DIRECTORY_SEED_FILE:
        return DirectorySeed()
    return load_seed(settings.DIRECTORY_SEED_FILE)


@lru_cache
def get_appointment_repository() -> AppointmentRepositoryPort:
    if settings.STORE_PROVIDER.lower() == "json":
        return JsonAppointmentRepository(data_dir=settings.DATA_DIR)
    return MemoryAppointmentRepository()


@lru_cache
def get_employee_directory() -> MemoryEmployeeDirectory:
    return MemoryEmployeeDirectory(get_directory_seed().employees)


@lru_cache
def get_client_directory() -> MemoryClientDirectory:
    return MemoryClientDirectory(get_directory_seed().client_ids)


@lru_cache
def get_service_catalog() -> ServiceCatalogStore:
    return ServiceCatalogStore(get_directory_seed().services)


@lru_cache
def get_sale_recorder() -> SaleRecorderPort:
    logger = logging.getLogger(__name__)
    if not settings.SALES_API_BASE_URL or settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockSaleRecorder (ENV=%s)", settings.ENV)
        return MockSaleRecorder()
    return HttpSaleRecorder()


@lru_cache
def get_employee_locks() -> EmployeeLockRegistry:
    return EmployeeLockRegistry()


def get_conflict_detector() -> ConflictDetector:
    return ConflictDetector(
        availability=WeeklyAvailability(get_employee_directory()),
        appointments=get_appointment_repository(),
        lookback_minutes=settings.CONFLICT_LOOKBACK_MINUTES,
    )


def get_scheduling_service() -> SchedulingService:
    return SchedulingService(
        appointments=get_appointment_repository(),
        employees=get_employee_directory(),
        clients=get_client_directory(),
        detector=get_conflict_detector(),
        locks=get_employee_locks(),
    )


def get_appointment_queries() -> AppointmentQueries:
    return AppointmentQueries(
        appointments=get_appointment_repository(),
        upcoming_limit=settings.UPCOMING_LIMIT,
    )


def get_record_sale_use_case() -> RecordSaleFromAppointmentUseCase:
    return RecordSaleFromAppointmentUseCase(
        appointments=get_appointment_repository(),
        catalog=get_service_catalog(),
        recorder=get_sale_recorder(),
    )
