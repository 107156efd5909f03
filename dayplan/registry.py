# dayplan/registry.py
"""Conflict-checking day-plan registry.

Invariant: no two stored activities overlap as half-open intervals
[start, end). Every public operation returns an `Outcome` and reports it
through the registered notification sinks; input errors never escape.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from dayplan.errors import InvalidPriorityError, InvalidTimeError
from dayplan.interval import Interval, find_overlapping_pairs, first_conflict
from dayplan.model import Activity, Priority, PriorityLike, name_key, parse_priority
from dayplan.notify import NotificationSink, Notifier
from dayplan.outcome import ErrorKind, Outcome, PlanView
from dayplan.util.timeparse import TimeLike, parse_time

logger = logging.getLogger(__name__)

MSG_ADDED = "Added: {name}"
MSG_BAD_INTERVAL = "Start must be before End!"
MSG_CLASH = "Clash with: {name}"
MSG_EDIT_CLASH = "Edit clashes with: {name}"
MSG_DUPLICATE = "Name already in use: {name}"
MSG_REMOVED = "Removed {name}"
MSG_NOT_FOUND = "Not found!"
MSG_COMPLETED = "Marked completed."
MSG_EDITED = "Edited successfully."
MSG_BAD_TIME = "Bad time format."
MSG_BAD_INPUT = "Bad input."
MSG_NO_PLANS = "No plans today."
MSG_NO_LEVEL = "No tasks with {token}"
MSG_BAD_LEVEL = "Invalid level."


class Registry:
    """In-memory store of activities for one day.

    Construct one per planner and hand it to whatever needs it; there is no
    shared default instance.
    """

    def __init__(self, sinks: Iterable[NotificationSink] = ()):
        self._plans: List[Activity] = []
        self._notifier = Notifier(sinks)
        # One critical section per operation (lookup -> validate -> mutate).
        self._lock = threading.Lock()

    # --- sinks ----------------------------------------------------------------
    def add_sink(self, sink: NotificationSink) -> None:
        self._notifier.add(sink)

    def remove_sink(self, sink: NotificationSink) -> bool:
        return self._notifier.remove(sink)

    @property
    def sinks(self) -> tuple[NotificationSink, ...]:
        return self._notifier.sinks

    # --- read-only helpers (no notifications) ---------------------------------
    def __len__(self) -> int:
        with self._lock:
            return len(self._plans)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return self._find(name) is not None

    def find(self, name: str) -> Optional[Activity]:
        with self._lock:
            return self._find(name)

    def names(self) -> list[str]:
        """Stored names in insertion order (the conflict-check order)."""
        with self._lock:
            return [a.name for a in self._plans]

    def conflicts(self) -> list[tuple[Activity, Activity]]:
        """Overlapping stored pairs; always empty while the invariant holds."""
        with self._lock:
            return find_overlapping_pairs(self._plans)

    # --- operations -----------------------------------------------------------
    def add(self, activity: Activity) -> Outcome:
        if not isinstance(activity, Activity):
            raise TypeError(f"add() expects an Activity, got {type(activity).__name__}")
        with self._lock:
            outcome = self._add_locked(activity)
        return self._finish("add", outcome)

    def remove(self, name: str) -> Outcome:
        with self._lock:
            found = self._find(name)
            if found is None:
                outcome = Outcome.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            else:
                self._plans.remove(found)
                outcome = Outcome.success(MSG_REMOVED.format(name=name), activity=found)
        return self._finish("remove", outcome)

    def complete(self, name: str) -> Outcome:
        with self._lock:
            found = self._find(name)
            if found is None:
                outcome = Outcome.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            else:
                found.completed = True
                outcome = Outcome.success(MSG_COMPLETED, activity=found)
        return self._finish("complete", outcome)

    def edit(
        self,
        old_name: str,
        new_name: str,
        new_start: TimeLike,
        new_end: TimeLike,
        new_priority: PriorityLike,
    ) -> Outcome:
        """All-or-nothing edit: on any failure the activity keeps its prior fields."""
        with self._lock:
            found = self._find(old_name)
            if found is None:
                outcome = Outcome.failure(ErrorKind.NOT_FOUND, MSG_NOT_FOUND)
            else:
                before = found.snapshot()
                try:
                    outcome = self._edit_locked(found, new_name, new_start, new_end, new_priority)
                except Exception:
                    found.restore(before)
                    raise
                if not outcome.ok:
                    found.restore(before)
        return self._finish("edit", outcome)

    def list_all(self) -> Outcome:
        with self._lock:
            items = tuple(self._plans)
        view = PlanView(items)
        if not items:
            return self._finish("list_all", Outcome.success(MSG_NO_PLANS, view=view))
        return self._finish("list_all", Outcome.success(f"{len(items)} plans", view=view), notify=False)

    def list_by_priority(self, priority: PriorityLike) -> Outcome:
        try:
            level = parse_priority(priority)
        except InvalidPriorityError:
            return self._finish("list_by_priority", Outcome.failure(ErrorKind.INVALID_PRIORITY, MSG_BAD_LEVEL))

        with self._lock:
            items = tuple(self._plans)
        view = PlanView(items, predicate=lambda a: a.priority is level)
        if not view:
            token = priority.value if isinstance(priority, Priority) else priority
            return self._finish("list_by_priority", Outcome.success(MSG_NO_LEVEL.format(token=token), view=view))
        return self._finish(
            "list_by_priority",
            Outcome.success(f"{len(view)} plans at {level.value}", view=view),
            notify=False,
        )

    # --- internals --------------------------------------------------------------
    def _find(self, name: str) -> Optional[Activity]:
        key = name_key(name)
        if not key:
            return None
        for p in self._plans:
            if p.key == key:
                return p
        return None

    def _find_other(self, name: str, exclude: Activity) -> Optional[Activity]:
        key = name_key(name)
        for p in self._plans:
            if p is not exclude and p.key == key:
                return p
        return None

    def _add_locked(self, activity: Activity) -> Outcome:
        if not activity.key:
            return Outcome.failure(ErrorKind.INVALID_INPUT, MSG_BAD_INPUT)
        if not Interval(activity.start, activity.end).ok:
            return Outcome.failure(ErrorKind.INVALID_INTERVAL, MSG_BAD_INTERVAL)

        dup = self._find(activity.name)
        if dup is not None:
            return Outcome.failure(
                ErrorKind.DUPLICATE_NAME,
                MSG_DUPLICATE.format(name=dup.name),
                conflict=dup.name,
            )

        clash = first_conflict(activity.start, activity.end, self._plans)
        if clash is not None:
            return Outcome.failure(
                ErrorKind.OVERLAP,
                MSG_CLASH.format(name=clash.name),
                conflict=clash.name,
            )

        self._plans.append(activity)
        return Outcome.success(MSG_ADDED.format(name=activity.name), activity=activity)

    def _edit_locked(
        self,
        found: Activity,
        new_name: str,
        new_start: TimeLike,
        new_end: TimeLike,
        new_priority: PriorityLike,
    ) -> Outcome:
        try:
            start = parse_time(new_start)
            end = parse_time(new_end)
        except InvalidTimeError:
            return Outcome.failure(ErrorKind.INVALID_INPUT, MSG_BAD_TIME, activity=found)
        try:
            level = parse_priority(new_priority)
        except InvalidPriorityError:
            return Outcome.failure(ErrorKind.INVALID_INPUT, MSG_BAD_INPUT, activity=found)

        if not isinstance(new_name, str) or not name_key(new_name):
            return Outcome.failure(ErrorKind.INVALID_INPUT, MSG_BAD_INPUT, activity=found)
        if not Interval(start, end).ok:
            return Outcome.failure(ErrorKind.INVALID_INTERVAL, MSG_BAD_INTERVAL, activity=found)

        dup = self._find_other(new_name, exclude=found)
        if dup is not None:
            return Outcome.failure(
                ErrorKind.DUPLICATE_NAME,
                MSG_DUPLICATE.format(name=dup.name),
                activity=found,
                conflict=dup.name,
            )

        # The activity being edited never conflicts with itself.
        clash = first_conflict(start, end, self._plans, exclude=found)
        if clash is not None:
            return Outcome.failure(
                ErrorKind.OVERLAP,
                MSG_EDIT_CLASH.format(name=clash.name),
                activity=found,
                conflict=clash.name,
            )

        found.name = new_name
        found.start = start
        found.end = end
        found.priority = level
        return Outcome.success(MSG_EDITED, activity=found)

    def _finish(self, op: str, outcome: Outcome, *, notify: bool = True) -> Outcome:
        # Sinks run outside the lock so they may call back into the registry.
        if outcome.ok:
            logger.debug("%s ok: %s", op, outcome.message)
        else:
            logger.info("%s rejected (%s): %s", op, outcome.error.value if outcome.error else "?", outcome.message)
        if notify:
            self._notifier.emit(outcome.message)
        return outcome


__all__ = [
    "Registry",
]
