import datetime as dt
from collections.abc import Callable

import pytest

from agenda.domain.models import Appointment, AppointmentStatus, PatientRef
from agenda.schedule.service import ScheduleService
from agenda.store.adapters.fake import FakeAppointmentStore

NOW = dt.datetime(2024, 2, 25, 10, 0)


def make_appointment(
    appointment_id: str = "1",
    *,
    date: dt.date = dt.date(2024, 2, 25),
    time: dt.time = dt.time(9, 0),
    status: AppointmentStatus = AppointmentStatus.SCHEDULED,
    duration_minutes: int = 30,
    reason: str | None = None,
    notes: str | None = None,
) -> Appointment:
    return Appointment(
        appointment_id=appointment_id,
        patient=PatientRef(patient_id=f"p{appointment_id}", first_name="Ada", last_name="Lovelace"),
        date=date,
        time=time,
        duration_minutes=duration_minutes,
        status=status,
        reason=reason,
        notes=notes,
        created_at=dt.datetime(2024, 1, 1, 8, 0, tzinfo=dt.timezone.utc),
    )


@pytest.fixture
def now() -> dt.datetime:
    return NOW


@pytest.fixture
def appointment_factory() -> Callable[..., Appointment]:
    return make_appointment


@pytest.fixture
def fake_store() -> FakeAppointmentStore:
    return FakeAppointmentStore()


@pytest.fixture
def service(fake_store: FakeAppointmentStore) -> ScheduleService:
    return ScheduleService(store=fake_store, clock=lambda: NOW)
