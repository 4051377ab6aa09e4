"""Shared helper functions."""

from datetime import datetime


def current_timestamp() -> datetime:
    """Get current UTC timestamp."""
    return datetime.utcnow()


def is_blank(value: str) -> bool:
    """Check if a string is missing or only whitespace."""
    return not value or not value.strip()
