class SchedulingError(RuntimeError):
    """Base class for caller-facing scheduling errors. `reason` is safe to show to end users."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotFoundError(SchedulingError):
    """Raised when an employee, client, appointment or service id does not resolve."""
    pass


class OutOfWorkingHoursError(SchedulingError):
    """Raised when a slot falls outside the employee's working interval for that weekday."""
    pass


class SchedulingConflictError(SchedulingError):
    """Raised when an active appointment already occupies the requested slot."""
    pass


class PastDateRejectedError(SchedulingError):
    """Raised when a new or rescheduled start time lies in the past."""
    pass


class IllegalStateTransitionError(SchedulingError):
    """Raised when a lifecycle guard is violated."""
    pass


class AppointmentValidationError(SchedulingError):
    """Raised on malformed input (missing fields, non-positive duration, missing cancellation reason)."""
    pass


class SaleRecordingError(RuntimeError):
    """Raised when the sale-recording service fails (timeouts, network errors, bad responses)."""
    pass
