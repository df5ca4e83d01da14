import datetime as dt
from collections.abc import Callable, Iterable

from loguru import logger

from agenda.domain.models import Appointment, AppointmentStatus, Bucket, FilterKey
from agenda.schedule.classifier import matches_bucket

Predicate = Callable[[Appointment, dt.datetime], bool]


def _in_bucket(bucket: Bucket) -> Predicate:
    return lambda appointment, now: matches_bucket(appointment, bucket, now)


def _has_status(status: AppointmentStatus) -> Predicate:
    return lambda appointment, now: appointment.status is status


_PREDICATES: dict[FilterKey, Predicate] = {
    FilterKey.TODAY: _in_bucket(Bucket.TODAY),
    FilterKey.UPCOMING: _in_bucket(Bucket.UPCOMING),
    FilterKey.PAST: _in_bucket(Bucket.PAST),
    FilterKey.SCHEDULED: _has_status(AppointmentStatus.SCHEDULED),
    FilterKey.COMPLETED: _has_status(AppointmentStatus.COMPLETED),
    FilterKey.CANCELLED: _has_status(AppointmentStatus.CANCELLED),
}


def resolve_filter_key(key: FilterKey | str) -> FilterKey:
    """Map a raw key to a ``FilterKey``; anything unrecognised means ``ALL``."""
    if isinstance(key, FilterKey):
        return key
    try:
        return FilterKey(key)
    except ValueError:
        logger.debug("Unknown filter key '{}', showing all appointments", key)
        return FilterKey.ALL


def filter_appointments(
    appointments: Iterable[Appointment], key: FilterKey | str, now: dt.datetime
) -> list[Appointment]:
    """Keep the appointments matching ``key``, preserving their relative order.

    Status keys compare the stored status, so a past scheduled appointment
    still matches ``scheduled`` even though it is displayed as missed.
    """
    predicate = _PREDICATES.get(resolve_filter_key(key))
    if predicate is None:
        return list(appointments)
    return [a for a in appointments if predicate(a, now)]
