from typing import Any

from agenda.domain.models import Appointment, AppointmentPatch, PatientRef
from agenda.store.adapters.datetime_helpers import (
    parse_timestamp,
    parse_wire_date,
    parse_wire_time,
    time_to_wire,
)


def appointment_from_record(record: dict[str, Any]) -> Appointment:
    """Build an ``Appointment`` from a flat backend record.

    Raises:
        KeyError: If a required field is missing.
        ValueError: If a field cannot be parsed (pydantic errors included).
    """
    return Appointment(
        appointment_id=str(record["id"]),
        patient=PatientRef(
            patient_id=str(record["patient_id"]),
            first_name=record.get("first_name") or "",
            last_name=record.get("last_name") or "",
        ),
        date=parse_wire_date(record["appointment_date"]),
        time=parse_wire_time(record["appointment_time"]),
        duration_minutes=int(record["duration"]),
        status=record["status"],
        reason=record.get("reason") or None,
        notes=record.get("notes") or None,
        created_at=parse_timestamp(record["created_at"]),
    )


def record_from_patch(patch: AppointmentPatch) -> dict[str, Any]:
    """Flatten the explicitly set fields of ``patch`` into backend record keys."""
    record: dict[str, Any] = {}
    changes = patch.model_fields_set

    if "patient" in changes and patch.patient is not None:
        record["patient_id"] = patch.patient.patient_id
        record["first_name"] = patch.patient.first_name
        record["last_name"] = patch.patient.last_name
    if "date" in changes and patch.date is not None:
        record["appointment_date"] = patch.date.isoformat()
    if "time" in changes and patch.time is not None:
        record["appointment_time"] = time_to_wire(patch.time)
    if "duration_minutes" in changes and patch.duration_minutes is not None:
        record["duration"] = patch.duration_minutes
    if "status" in changes and patch.status is not None:
        record["status"] = patch.status.value
    if "reason" in changes:
        record["reason"] = patch.reason or ""
    if "notes" in changes:
        record["notes"] = patch.notes or ""
    return record
