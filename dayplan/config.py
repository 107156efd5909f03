# dayplan/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

DEFAULT_BANNER = "=== Astronaut Day Planner ==="
DEFAULT_LOG_LEVEL = "WARNING"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_log_level(name: Optional[str]) -> str:
    """Canonical level name; None/"" -> default. Raises ValueError on unknown names."""
    if name is None:
        return DEFAULT_LOG_LEVEL
    s = str(name).strip().upper()
    if not s:
        return DEFAULT_LOG_LEVEL
    if s == "WARN":
        s = "WARNING"
    if s not in _LEVELS:
        raise ValueError(f"Invalid log level: {name!r} (expected one of {', '.join(_LEVELS)})")
    return s


@dataclass(frozen=True)
class PlannerConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    banner: str = DEFAULT_BANNER

    @property
    def log_level_no(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PlannerConfig":
        env = os.environ if environ is None else environ
        log_file = (env.get("DAYPLAN_LOG_FILE", "") or "").strip() or None
        banner = env.get("DAYPLAN_BANNER") or DEFAULT_BANNER
        return cls(
            log_level=normalize_log_level(env.get("DAYPLAN_LOG_LEVEL")),
            log_file=log_file,
            banner=banner,
        )

    def with_overrides(self, *, log_level: Optional[str] = None, log_file: Optional[str] = None) -> "PlannerConfig":
        cfg = self
        if log_level is not None:
            cfg = replace(cfg, log_level=normalize_log_level(log_level))
        if log_file is not None:
            cfg = replace(cfg, log_file=log_file.strip() or None)
        return cfg
