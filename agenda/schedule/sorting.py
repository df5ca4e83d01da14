import datetime as dt
from collections.abc import Iterable

from agenda.domain.models import Appointment


def sort_key(appointment: Appointment) -> tuple[dt.datetime, str]:
    return (appointment.starts_at, appointment.appointment_id)


def sort_appointments(appointments: Iterable[Appointment]) -> list[Appointment]:
    """Return a new list ordered by start date-time, then by id for equal starts."""
    return sorted(appointments, key=sort_key)
