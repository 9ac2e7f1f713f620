from __future__ import annotations

from abc import ABC, abstractmethod

from barbershop.domain.entities.sale import SaleRequest


class SaleRecorderPort(ABC):
    @abstractmethod
    def record_sale(self, sale: SaleRequest) -> str:
        """Record an income transaction. Returns the transaction id."""
        raise NotImplementedError
