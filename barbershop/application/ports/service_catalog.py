from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_price(self, service_name: str) -> Decimal | None:
        """Get the current price of a service by name. Returns None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_duration_minutes(self, service_name: str) -> int | None:
        """Get the default duration of a service. Returns None if not found."""
        raise NotImplementedError
