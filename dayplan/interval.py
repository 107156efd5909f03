# dayplan/interval.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Iterable, Optional

from dayplan.model import Activity


@dataclass(frozen=True)
class Interval:
    start: dt.time
    end: dt.time

    @property
    def ok(self) -> bool:
        return self.start < self.end


def overlaps(a_start: dt.time, a_end: dt.time, b_start: dt.time, b_end: dt.time) -> bool:
    """
    Half-open overlap test for [a_start, a_end) and [b_start, b_end).
    Touching endpoints (a_end == b_start) do not overlap.
    """
    return a_start < b_end and a_end > b_start


def first_conflict(
    start: dt.time,
    end: dt.time,
    stored: Iterable[Activity],
    *,
    exclude: Optional[Activity] = None,
) -> Optional[Activity]:
    """Return the first stored activity (in iteration order) overlapping [start, end)."""
    for other in stored:
        if exclude is not None and other is exclude:
            continue
        if overlaps(start, end, other.start, other.end):
            return other
    return None


def find_overlapping_pairs(stored: Iterable[Activity]) -> list[tuple[Activity, Activity]]:
    """All overlapping pairs, sweep over start-sorted activities (invariant checks)."""
    items = sorted(stored, key=lambda a: (a.start, a.end))
    pairs: list[tuple[Activity, Activity]] = []
    active: list[Activity] = []
    for cur in items:
        active = [a for a in active if a.end > cur.start]
        for a in active:
            pairs.append((a, cur))
        active.append(cur)
    return pairs
