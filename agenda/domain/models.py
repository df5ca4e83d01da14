import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AppointmentStatus(str, Enum):
    """Persisted lifecycle states of an appointment."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class Bucket(str, Enum):
    """Temporal classification of an appointment relative to now."""

    TODAY = "today"
    UPCOMING = "upcoming"
    PAST = "past"


class Severity(str, Enum):
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"
    NEUTRAL = "neutral"


class FilterKey(str, Enum):
    ALL = "all"
    TODAY = "today"
    UPCOMING = "upcoming"
    PAST = "past"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PatientRef(BaseModel):
    """The patient an appointment belongs to (reference only)."""

    model_config = ConfigDict(frozen=True)

    patient_id: str
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Appointment(BaseModel):
    """A scheduled appointment as reported by the appointment store."""

    model_config = ConfigDict(frozen=True)

    appointment_id: str
    patient: PatientRef
    date: dt.date
    time: dt.time
    duration_minutes: int = Field(gt=0)
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    reason: str | None = None
    notes: str | None = None
    created_at: dt.datetime

    @property
    def starts_at(self) -> dt.datetime:
        """The combined local date and time of the appointment."""
        return dt.datetime.combine(self.date, self.time)


class AppointmentPatch(BaseModel):
    """A partial update of an appointment.

    Only fields that were explicitly set are applied by the store; the
    identifier and creation timestamp are never patchable.
    """

    model_config = ConfigDict(frozen=True)

    patient: PatientRef | None = None
    date: dt.date | None = None
    time: dt.time | None = None
    duration_minutes: int | None = Field(default=None, gt=0)
    status: AppointmentStatus | None = None
    reason: str | None = None
    notes: str | None = None

    @classmethod
    def from_appointment(cls, appointment: Appointment, **changes: object) -> "AppointmentPatch":
        """Build a patch carrying every mutable field of ``appointment``, overridden by ``changes``."""
        fields = appointment.model_dump(exclude={"appointment_id", "created_at"})
        fields.update(changes)
        return cls.model_validate(fields)

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_unset=True)


class StatusBadge(BaseModel):
    """The display label and severity tier derived for an appointment."""

    model_config = ConfigDict(frozen=True)

    label: str
    severity: Severity


class AppointmentStats(BaseModel):
    """Summary counts over one snapshot of the appointment collection."""

    model_config = ConfigDict(frozen=True)

    today_count: int = 0
    completed_count: int = 0
    missed_count: int = 0
    upcoming_scheduled_count: int = 0
    total_count: int = 0
