"""Result values returned by every registry operation.

Callers branch on `bool(outcome)` (e.g. to re-prompt) and may inspect
`outcome.error` for the failure kind; the human-readable text is the same
string that was pushed to the notification sinks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from dayplan.model import Activity


class ErrorKind(Enum):
    INVALID_INTERVAL = "invalid_interval"
    OVERLAP = "overlap"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INVALID_PRIORITY = "invalid_priority"
    DUPLICATE_NAME = "duplicate_name"


class PlanView:
    """Lazy, finite, restartable view over a snapshot of activities.

    Sorting (stable, ascending start) happens on each iteration, so the view can
    be walked any number of times.
    """

    def __init__(self, items: Tuple[Activity, ...] = (), predicate: Optional[Callable[[Activity], bool]] = None):
        self._items = tuple(items)
        self._predicate = predicate

    def __iter__(self) -> Iterator[Activity]:
        items = self._items
        if self._predicate is not None:
            items = tuple(a for a in items if self._predicate(a))
        return iter(sorted(items, key=lambda a: a.sort_key))

    def __len__(self) -> int:
        if self._predicate is None:
            return len(self._items)
        return sum(1 for a in self._items if self._predicate(a))

    def __bool__(self) -> bool:
        return len(self) > 0

    def names(self) -> list[str]:
        return [a.name for a in self]

    def render(self) -> list[str]:
        return [a.render() for a in self]


EMPTY_VIEW = PlanView()


@dataclass(frozen=True)
class Outcome:
    ok: bool
    message: str
    error: Optional[ErrorKind] = None
    activity: Optional[Activity] = None
    conflict: Optional[str] = None
    view: PlanView = field(default=EMPTY_VIEW)

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str, **kw) -> "Outcome":
        return cls(ok=True, message=message, **kw)

    @classmethod
    def failure(cls, error: ErrorKind, message: str, **kw) -> "Outcome":
        return cls(ok=False, message=message, error=error, **kw)


__all__ = [
    "EMPTY_VIEW",
    "ErrorKind",
    "Outcome",
    "PlanView",
]
