class ScheduleError(Exception):
    """Base exception for all appointment schedule errors."""


class StoreUnavailableError(ScheduleError):
    """Raised when the appointment store is unreachable or a store call fails."""


class AppointmentNotFoundError(ScheduleError):
    """Raised when a referenced appointment does not exist."""

    def __init__(self, appointment_id: str) -> None:
        self.appointment_id = appointment_id
        super().__init__(f"Appointment not found: {appointment_id}")


class StatusValidationError(ScheduleError):
    """Raised for a malformed status value or a disallowed status transition."""

    def __init__(self, reason: str, value: str, current: str | None = None) -> None:
        self.reason = reason
        self.value = value
        self.current = current
        super().__init__(f"Invalid status change: {reason}")
