"""dayplan.api

Stable *library* entrypoint for dayplan.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from dayplan.config import PlannerConfig
from dayplan.errors import DayPlanError, InvalidPriorityError, InvalidTimeError
from dayplan.interval import overlaps
from dayplan.model import Activity, ActivitySnapshot, Priority, parse_priority
from dayplan.notify import CollectingSink, ConsoleSink, LoggingSink, NotificationSink
from dayplan.outcome import ErrorKind, Outcome, PlanView
from dayplan.registry import Registry
from dayplan.util.timeparse import format_hhmm, parse_time


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "Activity",
    "ActivitySnapshot",
    "CollectingSink",
    "ConsoleSink",
    "DayPlanError",
    "ErrorKind",
    "InvalidPriorityError",
    "InvalidTimeError",
    "LoggingSink",
    "NotificationSink",
    "Outcome",
    "PlanView",
    "PlannerConfig",
    "Priority",
    "Registry",
    "format_hhmm",
    "overlaps",
    "parse_priority",
    "parse_time",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
