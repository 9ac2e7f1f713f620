from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from barbershop.api.v1.schemas import (
    AppointmentCreateSchema, AppointmentListSchema, AppointmentSchema, AppointmentUpdateSchema,
    AvailabilityRequestSchema, AvailabilityResponseSchema,
    SaleResponseSchema, StatisticsSchema, StatusChangeSchema,
)
from barbershop.wiring.dependencies import (
    get_appointment_queries, get_conflict_detector, get_record_sale_use_case, get_scheduling_service,
)
from barbershop.application.dto.appointment_requests import CreateAppointmentRequest, RescheduleRequest
from barbershop.application.exceptions import (
    AppointmentValidationError, IllegalStateTransitionError, NotFoundError, OutOfWorkingHoursError,
    PastDateRejectedError, SaleRecordingError, SchedulingConflictError, SchedulingError,
)
from barbershop.application.ports.appointment_repository import AppointmentFilters
from barbershop.application.use_cases.appointment_queries import AppointmentQueries
from barbershop.application.use_cases.conflict_detector import ConflictDetector
from barbershop.application.use_cases.record_sale import RecordSaleFromAppointmentUseCase
from barbershop.application.use_cases.scheduling import SchedulingService
from barbershop.domain.entities.appointment import Appointment, AppointmentStatus

router = APIRouter()

_STATUS_CODES: dict[type[SchedulingError], int] = {
    NotFoundError: 404,
    AppointmentValidationError: 422,
    PastDateRejectedError: 400,
    OutOfWorkingHoursError: 409,
    SchedulingConflictError: 409,
    IllegalStateTransitionError: 409,
}


def _http_error(error: SchedulingError) -> HTTPException:
    return HTTPException(status_code=_STATUS_CODES.get(type(error), 400), detail=error.reason)


def _listing(appointments: list[Appointment]) -> AppointmentListSchema:
    return AppointmentListSchema(
        data=[AppointmentSchema.from_entity(a) for a in appointments],
        total=len(appointments),
    )


@router.get("/appointments", response_model=AppointmentListSchema)
def list_appointments(
    start_from: datetime | None = None,
    start_until: datetime | None = None,
    employee_id: str | None = None,
    client_id: str | None = None,
    status: AppointmentStatus | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    filters = AppointmentFilters(
        start_from=start_from,
        start_until=start_until,
        employee_id=employee_id,
        client_id=client_id,
        status=status,
    )
    return _listing(queries.find(filters))


@router.get("/appointments/upcoming", response_model=AppointmentListSchema)
def upcoming_appointments(
    limit: int = Query(10, gt=0),
    employee_id: str | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    return _listing(queries.upcoming(limit=limit, employee_id=employee_id))


@router.get("/appointments/statistics", response_model=StatisticsSchema)
def appointment_statistics(
    start_from: datetime | None = None,
    start_until: datetime | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    stats = queries.statistics(start_from, start_until)
    return StatisticsSchema(
        total=stats.total,
        pending=stats.pending,
        confirmed=stats.confirmed,
        completed=stats.completed,
        cancelled=stats.cancelled,
    )


@router.get("/appointments/day/{day}", response_model=AppointmentListSchema)
def appointments_for_day(
    day: date,
    employee_id: str | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    return _listing(queries.for_day(day, employee_id))


@router.get("/appointments/week/{first_day}", response_model=AppointmentListSchema)
def appointments_for_week(
    first_day: date,
    employee_id: str | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    return _listing(queries.for_week(first_day, employee_id))


@router.get("/appointments/month/{year}/{month}", response_model=AppointmentListSchema)
def appointments_for_month(
    year: int,
    month: int,
    employee_id: str | None = None,
    queries: AppointmentQueries = Depends(get_appointment_queries),
):
    try:
        return _listing(queries.for_month(year, month, employee_id))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/appointments/availability", response_model=AvailabilityResponseSchema)
def check_availability(
    req: AvailabilityRequestSchema,
    detector: ConflictDetector = Depends(get_conflict_detector),
):
    try:
        result = detector.check_availability(
            req.employee_id, req.start, req.duration_minutes, req.exclude_appointment_id
        )
    except SchedulingError as e:
        raise _http_error(e)
    return AvailabilityResponseSchema(available=result.available, reason=result.reason)


@router.get("/appointments/{appointment_id}", response_model=AppointmentSchema)
def get_appointment(
    appointment_id: str,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        return AppointmentSchema.from_entity(service.get(appointment_id))
    except SchedulingError as e:
        raise _http_error(e)


@router.post("/appointments", response_model=AppointmentSchema, status_code=201)
def create_appointment(
    req: AppointmentCreateSchema,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        appointment = service.create(
            CreateAppointmentRequest(
                employee_id=req.employee_id,
                client_id=req.client_id,
                service_name=req.service_name,
                start=req.start,
                duration_minutes=req.duration_minutes,
                origin=req.origin,
                notes=req.notes,
            )
        )
    except SchedulingError as e:
        raise _http_error(e)
    return AppointmentSchema.from_entity(appointment)


@router.put("/appointments/{appointment_id}", response_model=AppointmentSchema)
def reschedule_appointment(
    appointment_id: str,
    req: AppointmentUpdateSchema,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        appointment = service.reschedule(appointment_id, RescheduleRequest(**req.model_dump()))
    except SchedulingError as e:
        raise _http_error(e)
    return AppointmentSchema.from_entity(appointment)


@router.patch("/appointments/{appointment_id}/status", response_model=AppointmentSchema)
def change_appointment_status(
    appointment_id: str,
    req: StatusChangeSchema,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        appointment = service.change_status(appointment_id, req.status, req.cancellation_reason)
    except SchedulingError as e:
        raise _http_error(e)
    return AppointmentSchema.from_entity(appointment)


@router.delete("/appointments/{appointment_id}", status_code=204)
def delete_appointment(
    appointment_id: str,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        service.delete(appointment_id)
    except SchedulingError as e:
        raise _http_error(e)


@router.post("/appointments/{appointment_id}/sale", response_model=SaleResponseSchema, status_code=201)
def record_sale(
    appointment_id: str,
    uc: RecordSaleFromAppointmentUseCase = Depends(get_record_sale_use_case),
):
    try:
        transaction_id = uc.execute(appointment_id)
    except SchedulingError as e:
        raise _http_error(e)
    except SaleRecordingError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return SaleResponseSchema(transaction_id=transaction_id)
