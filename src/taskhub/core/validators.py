"""Reusable field validators shared by request schemas."""

from datetime import datetime

from src.taskhub.models.base import to_naive_utc, utc_now


def blank_to_none(value: str | None) -> str | None:
    """Strip text and collapse empty strings to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_future(value: datetime | None, field_label: str) -> datetime | None:
    """Normalize to naive UTC and reject instants that are not in the future.

    Args:
        value: Incoming datetime, naive (assumed UTC) or timezone-aware.
        field_label: Human-readable field name used in the error message.

    Raises:
        ValueError: If the datetime is now or in the past.
    """
    if value is None:
        return None
    value = to_naive_utc(value)
    if value <= utc_now():
        raise ValueError(f"{field_label} must be in the future")
    return value
