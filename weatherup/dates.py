"""Date helpers."""

from __future__ import annotations

from datetime import datetime

_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def weekday_from_string(date_str: str) -> str | None:
    """Return the English weekday name of a YYYY-MM-DD date, or None if it is invalid."""
    try:
        date = datetime.strptime(date_str, "%Y-%m-%d").date()
    except (ValueError, TypeError):
        return None
    return _WEEKDAYS[date.weekday()]