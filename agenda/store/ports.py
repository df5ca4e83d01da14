from abc import ABC, abstractmethod

from agenda.domain.models import Appointment, AppointmentPatch


class AbstractAppointmentStore(ABC):
    """Abstract base class for appointment persistence."""

    @abstractmethod
    async def get_all(self) -> list[Appointment]:
        """Fetch every appointment.

        Returns:
            The full collection, in no particular order.

        Raises:
            StoreUnavailableError: If the store is unreachable.
        """

    @abstractmethod
    async def update(self, appointment_id: str, patch: AppointmentPatch) -> Appointment:
        """Apply ``patch`` to an existing appointment.

        Args:
            appointment_id: The appointment's unique ID.
            patch: The fields to change. Unset fields are left untouched.

        Returns:
            The updated appointment.

        Raises:
            AppointmentNotFoundError: If no appointment has this ID.
            StoreUnavailableError: If the store is unreachable.
        """

    @abstractmethod
    async def delete(self, appointment_id: str) -> None:
        """Remove an appointment.

        Raises:
            AppointmentNotFoundError: If no appointment has this ID.
            StoreUnavailableError: If the store is unreachable.
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable and responding.

        Returns:
            True if the store is healthy, False otherwise.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by this store."""
