from __future__ import annotations

import json
import threading
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from barbershop.application.ports.appointment_repository import AppointmentFilters, AppointmentRepositoryPort
from barbershop.domain.entities.appointment import (
    Appointment,
    AppointmentOrigin,
    AppointmentStatus,
    TimeRange,
)


class JsonAppointmentRepository(AppointmentRepositoryPort):
    """Keeps all appointments in one JSON file, rewritten atomically on every change."""

    def __init__(self, data_dir: str = "./data", filename: str = "appointments.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()

    def find_by_id(self, appointment_id: str) -> Appointment | None:
        with self._lock:
            return self._load().get(appointment_id)

    def find_by_employee_and_window(
        self,
        employee_id: str,
        statuses: Iterable[AppointmentStatus],
        window: TimeRange,
        exclude_id: str | None = None,
    ) -> list[Appointment]:
        wanted = set(statuses)
        with self._lock:
            appointments = self._load().values()
        matches = [
            a
            for a in appointments
            if a.employee_id == employee_id and a.status in wanted and a.id != exclude_id and window.contains(a.start)
        ]
        return sorted(matches, key=lambda a: a.start)

    def save(self, appointment: Appointment) -> Appointment:
        with self._lock:
            appointments = self._load()
            appointments[appointment.id] = appointment
            self._save(appointments)
        return appointment

    def delete(self, appointment_id: str) -> bool:
        with self._lock:
            appointments = self._load()
            if appointments.pop(appointment_id, None) is None:
                return False
            self._save(appointments)
            return True

    def search(self, filters: AppointmentFilters | None = None, limit: int | None = None) -> list[Appointment]:
        filters = filters or AppointmentFilters()
        with self._lock:
            appointments = self._load().values()
        matches = sorted((a for a in appointments if filters.matches(a)), key=lambda a: a.start)
        return matches[:limit] if limit is not None else matches

    def _load(self) -> dict[str, Appointment]:
        """Load every appointment, empty if the file does not exist yet."""
        if not self._file_path.exists():
            return {}
        with open(self._file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return {item["id"]: _deserialize(item) for item in data.get("appointments", [])}

    def _save(self, appointments: dict[str, Appointment]) -> None:
        """Write to a temp file and rename it over the real one."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        payload = {
            "version": 1,
            "appointments": [_serialize(a) for a in sorted(appointments.values(), key=lambda a: a.start)],
        }
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise


def _serialize(appointment: Appointment) -> dict[str, Any]:
    return {
        "id": appointment.id,
        "employee_id": appointment.employee_id,
        "client_id": appointment.client_id,
        "service_name": appointment.service_name,
        "start": appointment.start.isoformat(),
        "duration_minutes": appointment.duration_minutes,
        "status": appointment.status.value,
        "origin": appointment.origin.value,
        "notes": appointment.notes,
        "cancellation_reason": appointment.cancellation_reason,
        "reference": appointment.reference,
        "created_at": appointment.created_at.isoformat() if appointment.created_at else None,
        "updated_at": appointment.updated_at.isoformat() if appointment.updated_at else None,
    }


def _deserialize(data: dict[str, Any]) -> Appointment:
    return Appointment(
        id=data["id"],
        employee_id=data["employee_id"],
        client_id=data["client_id"],
        service_name=data["service_name"],
        start=datetime.fromisoformat(data["start"]),
        duration_minutes=int(data["duration_minutes"]),
        status=AppointmentStatus(data.get("status", AppointmentStatus.PENDING.value)),
        origin=AppointmentOrigin(data.get("origin", AppointmentOrigin.MANUAL.value)),
        notes=data.get("notes"),
        cancellation_reason=data.get("cancellation_reason"),
        reference=data.get("reference"),
        created_at=_parse_optional(data.get("created_at")),
        updated_at=_parse_optional(data.get("updated_at")),
    )


def _parse_optional(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
