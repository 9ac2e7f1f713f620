from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from enum import IntEnum


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, instant: datetime) -> "Weekday":
        # datetime.weekday() is Monday=0
        return cls((instant.weekday() + 1) % 7)


@dataclass(frozen=True)
class WorkingInterval:
    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"Working interval start {self.start} must be before end {self.end}")

    @property
    def start_minutes(self) -> int:
        return self.start.hour * 60 + self.start.minute

    @property
    def end_minutes(self) -> int:
        return self.end.hour * 60 + self.end.minute

    def label(self) -> str:
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"

    @classmethod
    def parse(cls, start: str, end: str) -> "WorkingInterval":
        """Build an interval from HH:MM strings."""
        return cls(start=time.fromisoformat(start), end=time.fromisoformat(end))


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    weekly_schedule: dict[Weekday, WorkingInterval] = field(default_factory=dict)
    active: bool = True

    def interval_for(self, weekday: Weekday) -> WorkingInterval | None:
        return self.weekly_schedule.get(weekday)
