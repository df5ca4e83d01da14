import datetime as dt

from loguru import logger

from agenda.domain.exceptions import AppointmentNotFoundError
from agenda.domain.models import Appointment, AppointmentPatch, AppointmentStatus, PatientRef
from agenda.store.ports import AbstractAppointmentStore


def sample_appointments() -> list[Appointment]:
    """Deterministic records used when no backend is reachable."""
    return [
        Appointment(
            appointment_id="1",
            patient=PatientRef(patient_id="1", first_name="John", last_name="Doe"),
            date=dt.date(2024, 2, 20),
            time=dt.time(9, 0),
            duration_minutes=30,
            status=AppointmentStatus.SCHEDULED,
            reason="Annual checkup",
            notes=None,
            created_at=dt.datetime(2024, 2, 15, 10, 30, tzinfo=dt.timezone.utc),
        ),
        Appointment(
            appointment_id="2",
            patient=PatientRef(patient_id="2", first_name="Sarah", last_name="Johnson"),
            date=dt.date(2024, 2, 21),
            time=dt.time(14, 30),
            duration_minutes=45,
            status=AppointmentStatus.SCHEDULED,
            reason="Follow-up consultation",
            notes="Follow up on lab results",
            created_at=dt.datetime(2024, 2, 16, 14, 20, tzinfo=dt.timezone.utc),
        ),
    ]


class InMemoryAppointmentStore(AbstractAppointmentStore):
    """Process-local appointment store, keyed by appointment ID."""

    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._records: dict[str, Appointment] = {
            a.appointment_id: a for a in (appointments if appointments is not None else [])
        }

    @classmethod
    def seeded(cls) -> "InMemoryAppointmentStore":
        return cls(sample_appointments())

    async def get_all(self) -> list[Appointment]:
        return list(self._records.values())

    async def update(self, appointment_id: str, patch: AppointmentPatch) -> Appointment:
        current = self._records.get(appointment_id)
        if current is None:
            raise AppointmentNotFoundError(appointment_id)

        updated = Appointment.model_validate({**current.model_dump(), **patch.changes()})
        self._records[appointment_id] = updated
        logger.debug("In-memory appointment updated: id={}", appointment_id)
        return updated

    async def delete(self, appointment_id: str) -> None:
        if self._records.pop(appointment_id, None) is None:
            raise AppointmentNotFoundError(appointment_id)
        logger.debug("In-memory appointment deleted: id={}", appointment_id)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass
