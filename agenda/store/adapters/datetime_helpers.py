import datetime as dt
from zoneinfo import ZoneInfo

from loguru import logger


def parse_wire_date(value: str) -> dt.date:
    """Parse the backend's ``YYYY-MM-DD`` appointment date."""
    return dt.date.fromisoformat(value)


def parse_wire_time(value: str) -> dt.time:
    """Parse the backend's ``HH:MM`` appointment time, dropping any seconds."""
    return dt.time.fromisoformat(value).replace(second=0, microsecond=0)


def time_to_wire(time: dt.time) -> str:
    """Convert ``time(9, 5)`` → ``09:05``."""
    return time.strftime("%H:%M")


def parse_timestamp(value: str) -> dt.datetime:
    """Parse an ISO 8601 timestamp such as ``2024-02-15T10:30:00Z``."""
    return dt.datetime.fromisoformat(value)


def resolve_timezone(name: str) -> dt.tzinfo:
    """Resolve a timezone name, falling back to UTC if invalid."""
    try:
        return ZoneInfo(name)
    except Exception:
        logger.warning("Invalid clinic timezone '{}'; defaulting to UTC", name)
        return dt.timezone.utc
