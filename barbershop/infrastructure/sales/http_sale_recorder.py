from __future__ import annotations

import logging

import httpx

from barbershop.application.exceptions import SaleRecordingError
from barbershop.application.ports.sale_recorder import SaleRecorderPort
from barbershop.core.config import settings
from barbershop.domain.entities.sale import SaleRequest


class HttpSaleRecorder(SaleRecorderPort):
    """Posts income transactions to the back-office transactions API."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.SALES_API_BASE_URL or "").rstrip("/")
        self._api_key = api_key or settings.SALES_API_KEY
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("SALES_API_BASE_URL is required for the HTTP sale recorder")

    def record_sale(self, sale: SaleRequest) -> str:
        payload = {
            "type": "INCOME",
            "client_id": sale.client_id,
            "employee_id": sale.employee_id,
            "date": sale.occurred_at.isoformat(),
            "total": str(sale.unit_price),
            "payment_method": "CASH",
            "notes": sale.notes,
            "appointment_id": sale.appointment_id,
            "items": [
                {
                    "service_name": sale.service_name,
                    "quantity": 1,
                    "unit_price": str(sale.unit_price),
                    "subtotal": str(sale.unit_price),
                }
            ],
        }
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}

        try:
            response = self._client.post(f"{self._base_url}/transactions", json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self._logger.error(
                "Sale recording failed",
                extra={"appointment_id": sale.appointment_id, "error": str(e)},
            )
            raise SaleRecordingError(f"Sale recording failed: {e}") from e

        data = response.json()
        transaction_id = data.get("id") or (data.get("data") or {}).get("id")
        if not transaction_id:
            raise SaleRecordingError("Sale recording response did not include a transaction id")
        return str(transaction_id)
