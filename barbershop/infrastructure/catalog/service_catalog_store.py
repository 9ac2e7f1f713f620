from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from barbershop.application.ports.service_catalog import ServiceCatalogPort
from barbershop.domain.entities.service_catalog import ServiceCatalogEntry


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, entries: Iterable[ServiceCatalogEntry] | None = None) -> None:
        self._catalog = {_normalize(e.name): e for e in entries or []}

    def get_service(self, service_name: str) -> ServiceCatalogEntry | None:
        entry = self._catalog.get(_normalize(service_name))
        if entry is None or not entry.active:
            return None
        return entry

    def get_price(self, service_name: str) -> Decimal | None:
        entry = self.get_service(service_name)
        return entry.price if entry else None

    def get_duration_minutes(self, service_name: str) -> int | None:
        entry = self.get_service(service_name)
        return entry.duration_minutes if entry else None


def _normalize(name: str) -> str:
    return " ".join(name.lower().split())
