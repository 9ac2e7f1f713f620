from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnavailableKind(str, Enum):
    OUT_OF_WORKING_HOURS = "out_of_working_hours"
    SCHEDULING_CONFLICT = "scheduling_conflict"


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    reason: str | None = None
    kind: UnavailableKind | None = None  # set only when available is False

    @classmethod
    def free(cls) -> "AvailabilityResult":
        return cls(available=True)

    @classmethod
    def blocked(cls, kind: UnavailableKind, reason: str) -> "AvailabilityResult":
        return cls(available=False, reason=reason, kind=kind)
