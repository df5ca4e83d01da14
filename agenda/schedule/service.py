import datetime as dt
from collections.abc import Callable

from loguru import logger

from agenda.domain.exceptions import (
    AppointmentNotFoundError,
    StatusValidationError,
    StoreUnavailableError,
)
from agenda.domain.models import Appointment, AppointmentPatch, AppointmentStatus, FilterKey
from agenda.schedule.transitions import STRICT_TRANSITIONS, check_transition, parse_status
from agenda.schedule.view import ScheduleView, build_view
from agenda.store.adapters.datetime_helpers import resolve_timezone
from agenda.store.ports import AbstractAppointmentStore

Clock = Callable[[], dt.datetime]


def delete_prompt(appointment: Appointment) -> str:
    return (
        f"Are you sure you want to delete the appointment for {appointment.patient.full_name}? "
        "This action cannot be undone."
    )


class ScheduleService:
    """Appointment schedule operations on top of an ``AbstractAppointmentStore``.

    Every call starts from a fresh snapshot of the store; nothing is cached
    between calls.
    """

    def __init__(
        self,
        store: AbstractAppointmentStore,
        *,
        clinic_timezone: str = "America/New_York",
        clock: Clock | None = None,
        strict_transitions: bool = False,
    ) -> None:
        self._store = store
        tz = resolve_timezone(clinic_timezone)
        self._clock: Clock = clock or (lambda: dt.datetime.now(tz))
        self._transitions = STRICT_TRANSITIONS if strict_transitions else None

    async def load(self) -> list[Appointment]:
        """Fetch the full appointment collection from the store."""
        try:
            appointments = await self._store.get_all()
        except Exception as exc:
            logger.error("Error loading appointments: {}", exc)
            raise StoreUnavailableError(
                "Failed to load appointments. Please try again."
            ) from exc

        logger.info("Loaded {} appointment(s)", len(appointments))
        return appointments

    async def view(self, key: FilterKey | str = FilterKey.ALL) -> ScheduleView:
        """Load once and build the filtered, sorted view with stats for one instant."""
        appointments = await self.load()
        return build_view(appointments, key, self._clock())

    async def _find(self, appointment_id: str) -> Appointment:
        for appointment in await self.load():
            if appointment.appointment_id == appointment_id:
                return appointment
        raise AppointmentNotFoundError(appointment_id)

    async def _reload_after(self, action: str) -> list[Appointment] | None:
        """Re-read the store after a saved mutation; a failed read is logged, not raised."""
        try:
            appointments = await self._store.get_all()
        except Exception as exc:
            logger.warning("Reload after {} failed, change was saved: {}", action, exc)
            return None

        logger.info("Reloaded {} appointment(s) after {}", len(appointments), action)
        return appointments

    async def apply_status(
        self, appointment_id: str, new_status: AppointmentStatus | str
    ) -> Appointment:
        """Change an appointment's status and return it as the store now reports it.

        Raises:
            StatusValidationError: If ``new_status`` is malformed or the transition is disallowed.
            AppointmentNotFoundError: If the appointment does not exist.
            StoreUnavailableError: If the store cannot be read or updated.
        """
        target = parse_status(new_status)
        current = await self._find(appointment_id)
        check_transition(current.status, target, self._transitions)

        logger.info(
            "Updating appointment status: id={}, {} -> {}",
            appointment_id,
            current.status.value,
            target.value,
        )

        patch = AppointmentPatch.from_appointment(current, status=target)
        try:
            updated = await self._store.update(appointment_id, patch)
        except (AppointmentNotFoundError, StatusValidationError):
            raise
        except Exception as exc:
            logger.error("Error updating appointment status: {}", exc)
            raise StoreUnavailableError("Failed to update appointment status.") from exc

        for appointment in await self._reload_after("status update") or []:
            if appointment.appointment_id == appointment_id:
                return appointment
        return updated

    async def delete_appointment(
        self, appointment_id: str, confirm: Callable[[str], bool]
    ) -> bool:
        """Delete an appointment once ``confirm`` approves the prompt.

        Returns:
            True if the appointment was deleted, False if the caller declined.

        Raises:
            AppointmentNotFoundError: If the appointment does not exist.
            StoreUnavailableError: If the store cannot be read or updated.
        """
        appointment = await self._find(appointment_id)
        if not confirm(delete_prompt(appointment)):
            logger.info("Deletion declined: id={}", appointment_id)
            return False

        try:
            await self._store.delete(appointment_id)
        except AppointmentNotFoundError:
            raise
        except Exception as exc:
            logger.error("Error deleting appointment: {}", exc)
            raise StoreUnavailableError("Failed to delete appointment.") from exc

        logger.info("Appointment deleted: id={}", appointment_id)
        await self._reload_after("deletion")
        return True

    async def health_check(self) -> bool:
        return await self._store.health_check()

    async def close(self) -> None:
        await self._store.close()
