from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class SaleRequest:
    appointment_id: str
    client_id: str
    employee_id: str
    service_name: str
    unit_price: Decimal
    occurred_at: datetime
    notes: str | None = None
