"""
Loads employees, clients and services from a JSON seed file.

Expected shape:

    {
      "employees": [
        {"id": "e1", "name": "Carlos", "active": true,
         "weekly_schedule": {"monday": {"start": "09:00", "end": "18:00"}}}
      ],
      "clients": [{"id": "c1", "name": "Ana"}],
      "services": [{"name": "Haircut", "price": "25.00", "duration_minutes": 30}]
    }

Weekdays missing from `weekly_schedule` (or set to null) are days off.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

from barbershop.domain.entities.employee import Employee, Weekday, WorkingInterval
from barbershop.domain.entities.service_catalog import ServiceCatalogEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectorySeed:
    employees: list[Employee] = field(default_factory=list)
    client_ids: list[str] = field(default_factory=list)
    services: list[ServiceCatalogEntry] = field(default_factory=list)


def load_seed(path: str | Path) -> DirectorySeed:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    seed = DirectorySeed(
        employees=[parse_employee(e) for e in data.get("employees", [])],
        client_ids=[str(c["id"]) if isinstance(c, dict) else str(c) for c in data.get("clients", [])],
        services=[parse_service(s) for s in data.get("services", [])],
    )
    logger.info(
        "Directory seed loaded",
        extra={"employees": len(seed.employees), "clients": len(seed.client_ids), "services": len(seed.services)},
    )
    return seed


def parse_employee(data: dict[str, Any]) -> Employee:
    schedule: dict[Weekday, WorkingInterval] = {}
    for day_name, interval in (data.get("weekly_schedule") or {}).items():
        if not interval:
            continue
        weekday = Weekday[day_name.strip().upper()]
        schedule[weekday] = WorkingInterval.parse(interval["start"], interval["end"])

    return Employee(
        id=str(data["id"]),
        name=data.get("name", ""),
        weekly_schedule=schedule,
        active=bool(data.get("active", True)),
    )


def parse_service(data: dict[str, Any]) -> ServiceCatalogEntry:
    return ServiceCatalogEntry(
        name=data["name"],
        price=Decimal(str(data["price"])),
        duration_minutes=int(data["duration_minutes"]),
        description=data.get("description"),
        active=bool(data.get("active", True)),
    )
