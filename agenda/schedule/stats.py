import datetime as dt
from collections.abc import Iterable

from agenda.domain.models import Appointment, AppointmentStats, AppointmentStatus, Bucket
from agenda.schedule.classifier import classify


def aggregate(appointments: Iterable[Appointment], now: dt.datetime) -> AppointmentStats:
    """Compute the summary counters in a single pass against one ``now``."""
    today = completed = missed = upcoming_scheduled = total = 0

    for appointment in appointments:
        total += 1
        bucket = classify(appointment, now)
        scheduled = appointment.status is AppointmentStatus.SCHEDULED

        if bucket is Bucket.TODAY:
            today += 1
        if appointment.status is AppointmentStatus.COMPLETED:
            completed += 1
        if scheduled and bucket is Bucket.PAST:
            missed += 1
        if scheduled and bucket in (Bucket.TODAY, Bucket.UPCOMING):
            upcoming_scheduled += 1

    return AppointmentStats(
        today_count=today,
        completed_count=completed,
        missed_count=missed,
        upcoming_scheduled_count=upcoming_scheduled,
        total_count=total,
    )
