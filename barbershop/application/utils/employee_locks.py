from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager


class EmployeeLockRegistry:
    """One lock per employee id, so check-then-write on a calendar runs as a single unit."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # guards the locks dict

    def _get_lock(self, employee_id: str) -> threading.Lock:
        with self._lock_lock:
            if employee_id not in self._locks:
                self._locks[employee_id] = threading.Lock()
            return self._locks[employee_id]

    @contextmanager
    def hold(self, *employee_ids: str) -> Iterator[None]:
        """Hold the locks of every given employee, acquired in sorted id order."""
        with ExitStack() as stack:
            for employee_id in sorted(set(employee_ids)):
                stack.enter_context(self._get_lock(employee_id))
            yield
