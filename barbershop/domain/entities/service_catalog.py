from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ServiceCatalogEntry:
    name: str
    price: Decimal
    duration_minutes: int
    description: str | None = None
    active: bool = True
