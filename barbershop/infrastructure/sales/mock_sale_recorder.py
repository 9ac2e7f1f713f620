from __future__ import annotations

import logging

from barbershop.application.ports.sale_recorder import SaleRecorderPort
from barbershop.domain.entities.sale import SaleRequest


class MockSaleRecorder(SaleRecorderPort):
    def __init__(self) -> None:
        self.sales: dict[str, SaleRequest] = {}
        self._logger = logging.getLogger(__name__)

    def record_sale(self, sale: SaleRequest) -> str:
        transaction_id = f"mock_sale_{len(self.sales) + 1}"
        self.sales[transaction_id] = sale
        self._logger.info(
            "Mock sale recorded",
            extra={
                "transaction_id": transaction_id,
                "appointment_id": sale.appointment_id,
                "service": sale.service_name,
                "total": str(sale.unit_price),
            },
        )
        return transaction_id
