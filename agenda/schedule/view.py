import datetime as dt
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from agenda.domain.models import Appointment, AppointmentStats, FilterKey, StatusBadge
from agenda.schedule.badges import badge_for
from agenda.schedule.filters import filter_appointments, resolve_filter_key
from agenda.schedule.sorting import sort_appointments
from agenda.schedule.stats import aggregate


class ScheduleRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    appointment: Appointment
    badge: StatusBadge


class ScheduleView(BaseModel):
    """Everything the presentation layer receives for one render pass."""

    model_config = ConfigDict(frozen=True)

    filter_key: FilterKey
    rows: list[ScheduleRow]
    stats: AppointmentStats


def build_view(
    appointments: Sequence[Appointment], key: FilterKey | str, now: dt.datetime
) -> ScheduleView:
    """Filter, sort and badge ``appointments``; stats always cover the full collection."""
    filter_key = resolve_filter_key(key)
    ordered = sort_appointments(filter_appointments(appointments, filter_key, now))
    return ScheduleView(
        filter_key=filter_key,
        rows=[ScheduleRow(appointment=a, badge=badge_for(a, now)) for a in ordered],
        stats=aggregate(appointments, now),
    )
