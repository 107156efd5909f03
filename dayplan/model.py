# dayplan/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from dayplan.errors import InvalidPriorityError
from dayplan.util.timeparse import TimeLike, format_hhmm, parse_time, truncate_to_minute


class Priority(Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


PriorityLike = Union[Priority, str]


def parse_priority(value: PriorityLike) -> Priority:
    """Case-insensitive priority lookup ("high", " Medium ", Priority.LOW)."""
    if isinstance(value, Priority):
        return value
    if not isinstance(value, str):
        raise InvalidPriorityError(f"Invalid priority: {value!r}")
    token = value.strip().upper()
    try:
        return Priority[token]
    except KeyError:
        raise InvalidPriorityError(f"Invalid priority: {value!r}") from None


def name_key(name: str) -> str:
    # Identity used for lookup and uniqueness.
    return str(name or "").strip().casefold()


@dataclass(frozen=True)
class ActivitySnapshot:
    name: str
    start: dt.time
    end: dt.time
    priority: Priority
    completed: bool


@dataclass(eq=False)
class Activity:
    """A named, prioritized, time-bounded task.

    `start < end` is not enforced here; the registry rejects invalid intervals
    when the activity is added or edited.
    """

    name: str
    start: dt.time
    end: dt.time
    priority: Priority = Priority.MEDIUM
    completed: bool = field(default=False)

    def __post_init__(self) -> None:
        self.start = truncate_to_minute(self.start)
        self.end = truncate_to_minute(self.end)
        self.priority = parse_priority(self.priority)

    @classmethod
    def from_text(cls, name: str, start: TimeLike, end: TimeLike, priority: PriorityLike) -> "Activity":
        return cls(
            name=name,
            start=parse_time(start),
            end=parse_time(end),
            priority=parse_priority(priority),
        )

    @property
    def key(self) -> str:
        return name_key(self.name)

    @property
    def sort_key(self) -> dt.time:
        return self.start

    def __lt__(self, other: "Activity") -> bool:
        if not isinstance(other, Activity):
            return NotImplemented
        return self.start < other.start

    def snapshot(self) -> ActivitySnapshot:
        return ActivitySnapshot(
            name=self.name,
            start=self.start,
            end=self.end,
            priority=self.priority,
            completed=self.completed,
        )

    def restore(self, snap: ActivitySnapshot) -> None:
        self.name = snap.name
        self.start = snap.start
        self.end = snap.end
        self.priority = snap.priority
        self.completed = snap.completed

    def render(self) -> str:
        line = f"{format_hhmm(self.start)}-{format_hhmm(self.end)} : {self.name} [{self.priority.value}]"
        if self.completed:
            line += " Completed"
        return line

    def __str__(self) -> str:
        return self.render()


__all__ = [
    "Activity",
    "ActivitySnapshot",
    "Priority",
    "PriorityLike",
    "name_key",
    "parse_priority",
]
