# dayplan/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Tuple, Union

from dayplan.errors import InvalidTimeError

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

TimeLike = Union[dt.time, str]


def parse_hhmm(s: str) -> Tuple[int, int]:
    if not isinstance(s, str):
        raise InvalidTimeError(f"Invalid HH:MM: {s!r}")
    m = _HHMM_RE.match(s.strip())
    if not m:
        raise InvalidTimeError(f"Invalid HH:MM: {s!r}")
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise InvalidTimeError(f"Invalid HH:MM: {s!r}")
    return hh, mm


def truncate_to_minute(t: dt.time) -> dt.time:
    """Drop seconds/microseconds/tzinfo; plans live at hour:minute resolution."""
    return dt.time(t.hour, t.minute)


def parse_time(value: TimeLike) -> dt.time:
    """Accept a `datetime.time` or `HH:MM` text and return a minute-resolution time."""
    if isinstance(value, dt.time):
        return truncate_to_minute(value)
    hh, mm = parse_hhmm(value)
    return dt.time(hh, mm)


def format_hhmm(t: dt.time) -> str:
    return f"{t.hour:02d}:{t.minute:02d}"
