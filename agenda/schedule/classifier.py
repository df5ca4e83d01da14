import datetime as dt

from agenda.domain.models import Appointment, Bucket


def classify(appointment: Appointment, now: dt.datetime) -> Bucket:
    """Place ``appointment`` in exactly one bucket relative to ``now``'s calendar date.

    Only the appointment's date is considered; the time of day never moves an
    appointment between buckets.
    """
    today = now.date()
    if appointment.date == today:
        return Bucket.TODAY
    if appointment.date > today:
        return Bucket.UPCOMING
    return Bucket.PAST


def matches_bucket(appointment: Appointment, bucket: Bucket, now: dt.datetime) -> bool:
    """Membership test where ``UPCOMING`` also covers appointments dated today."""
    actual = classify(appointment, now)
    if bucket is Bucket.UPCOMING:
        return actual in (Bucket.TODAY, Bucket.UPCOMING)
    return actual is bucket
