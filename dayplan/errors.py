"""Exceptions raised by dayplan parsing helpers.

The registry never lets these escape its public operations; they are caught
at the operation boundary and reported as an `Outcome` instead.
"""

from __future__ import annotations


class DayPlanError(ValueError):
    """Base class for dayplan input errors."""


class InvalidTimeError(DayPlanError):
    """Raised when time text is not a valid HH:MM wall-clock time."""


class InvalidPriorityError(DayPlanError):
    """Raised when a priority token is not one of HIGH/MEDIUM/LOW."""


__all__ = [
    "DayPlanError",
    "InvalidTimeError",
    "InvalidPriorityError",
]
