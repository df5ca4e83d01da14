from agenda.domain.models import Appointment, AppointmentPatch
from agenda.store.adapters.memory import InMemoryAppointmentStore


class FakeAppointmentStore(InMemoryAppointmentStore):
    """In-memory test double for ``AbstractAppointmentStore``.

    Pre-load ``appointments`` to control what the store returns.  Set
    ``get_all_error``, ``update_error``, etc. to make the corresponding
    method raise on every call until cleared.

    After calls, inspect ``updates``, ``deleted`` and ``get_all_calls`` to
    verify what was passed to the store.
    """

    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        super().__init__(appointments)
        self.updates: list[tuple[str, AppointmentPatch]] = []
        self.deleted: list[str] = []
        self.get_all_calls: int = 0
        self.closed: bool = False
        self.healthy: bool = True

        self.get_all_error: Exception | None = None
        self.update_error: Exception | None = None
        self.delete_error: Exception | None = None

    @property
    def appointments(self) -> list[Appointment]:
        return list(self._records.values())

    @appointments.setter
    def appointments(self, appointments: list[Appointment]) -> None:
        self._records = {a.appointment_id: a for a in appointments}

    async def get_all(self) -> list[Appointment]:
        self.get_all_calls += 1
        if self.get_all_error:
            raise self.get_all_error
        return await super().get_all()

    async def update(self, appointment_id: str, patch: AppointmentPatch) -> Appointment:
        if self.update_error:
            raise self.update_error
        self.updates.append((appointment_id, patch))
        return await super().update(appointment_id, patch)

    async def delete(self, appointment_id: str) -> None:
        if self.delete_error:
            raise self.delete_error
        self.deleted.append(appointment_id)
        await super().delete(appointment_id)

    async def health_check(self) -> bool:
        return self.healthy

    async def close(self) -> None:
        self.closed = True
