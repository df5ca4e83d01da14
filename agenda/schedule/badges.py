import datetime as dt

from agenda.domain.models import Appointment, AppointmentStatus, Bucket, Severity, StatusBadge
from agenda.schedule.classifier import classify

MISSED_LABEL = "Missed"


def _capitalize(value: str) -> str:
    # Only the first character changes: "no-show" -> "No-show".
    return value[:1].upper() + value[1:]


def evaluate(status: AppointmentStatus, bucket: Bucket) -> StatusBadge:
    """Derive the display label and severity for a status in a bucket.

    The "Missed" label is a read-side projection of a past scheduled
    appointment; the stored status stays ``scheduled``.
    """
    if status is AppointmentStatus.COMPLETED:
        return StatusBadge(label="Completed", severity=Severity.SUCCESS)
    if status is AppointmentStatus.CANCELLED:
        return StatusBadge(label="Cancelled", severity=Severity.DANGER)
    if status is AppointmentStatus.SCHEDULED and bucket is Bucket.PAST:
        return StatusBadge(label=MISSED_LABEL, severity=Severity.WARNING)

    label = _capitalize(status.value)
    if bucket is Bucket.TODAY:
        return StatusBadge(label=label, severity=Severity.INFO)
    return StatusBadge(label=label, severity=Severity.NEUTRAL)


def badge_for(appointment: Appointment, now: dt.datetime) -> StatusBadge:
    return evaluate(appointment.status, classify(appointment, now))
