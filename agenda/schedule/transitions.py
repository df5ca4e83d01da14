from collections.abc import Mapping

from agenda.domain.exceptions import StatusValidationError
from agenda.domain.models import AppointmentStatus

# Allowed edges when strict transitions are enabled. Completed is terminal;
# cancelled and no-show appointments can only be rebooked.
STRICT_TRANSITIONS: Mapping[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset(
        {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW}
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset({AppointmentStatus.SCHEDULED}),
    AppointmentStatus.NO_SHOW: frozenset({AppointmentStatus.SCHEDULED}),
}


def parse_status(value: AppointmentStatus | str) -> AppointmentStatus:
    """Coerce a raw status value, rejecting anything outside the four known states."""
    if isinstance(value, AppointmentStatus):
        return value
    try:
        return AppointmentStatus(value)
    except ValueError:
        raise StatusValidationError(reason=f"unknown status '{value}'", value=str(value)) from None


def check_transition(
    current: AppointmentStatus,
    target: AppointmentStatus,
    allowed: Mapping[AppointmentStatus, frozenset[AppointmentStatus]] | None = None,
) -> None:
    """Validate ``current`` -> ``target`` against ``allowed``.

    With no table every transition is accepted. Re-applying the current
    status is always accepted.
    """
    if allowed is None or current is target:
        return
    if target not in allowed.get(current, frozenset()):
        raise StatusValidationError(
            reason=f"cannot move from '{current.value}' to '{target.value}'",
            value=target.value,
            current=current.value,
        )
