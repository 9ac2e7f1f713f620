from __future__ import annotations

import logging

from barbershop.application.exceptions import IllegalStateTransitionError, NotFoundError
from barbershop.application.ports.appointment_repository import AppointmentRepositoryPort
from barbershop.application.ports.sale_recorder import SaleRecorderPort
from barbershop.application.ports.service_catalog import ServiceCatalogPort
from barbershop.domain.entities.appointment import AppointmentStatus
from barbershop.domain.entities.sale import SaleRequest


class RecordSaleFromAppointmentUseCase:
    """Turns a completed appointment into an income transaction. Only run on explicit request."""

    def __init__(
        self,
        appointments: AppointmentRepositoryPort,
        catalog: ServiceCatalogPort,
        recorder: SaleRecorderPort,
    ) -> None:
        self._appointments = appointments
        self._catalog = catalog
        self._recorder = recorder
        self._logger = logging.getLogger(__name__)

    def execute(self, appointment_id: str) -> str:
        appointment = self._appointments.find_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found")

        if appointment.status != AppointmentStatus.COMPLETED:
            raise IllegalStateTransitionError("Only completed appointments can be turned into a sale")

        price = self._catalog.get_price(appointment.service_name)
        if price is None:
            raise NotFoundError(f'Service "{appointment.service_name}" not found')

        sale = SaleRequest(
            appointment_id=appointment.id,
            client_id=appointment.client_id,
            employee_id=appointment.employee_id,
            service_name=appointment.service_name,
            unit_price=price,
            occurred_at=appointment.start,
            notes=f"Generated from appointment {appointment.reference or appointment.id}",
        )
        transaction_id = self._recorder.record_sale(sale)
        self._logger.info(
            "Sale recorded from appointment",
            extra={"appointment_id": appointment.id, "transaction_id": transaction_id},
        )
        return transaction_id
