from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from .config import DEFAULT_BANNER, PlannerConfig
from .errors import DayPlanError
from .log import configure_logging
from .model import Activity
from .notify import ConsoleSink
from .outcome import Outcome
from .registry import Registry

logger = logging.getLogger(__name__)

MENU = (
    "1. Add plan",
    "2. Remove plan",
    "3. View all",
    "4. Edit",
    "5. Mark done",
    "6. View by priority",
    "7. Exit",
)


class _Console:
    def __init__(self, registry: Registry, stdin: TextIO, stdout: TextIO):
        self.registry = registry
        self.stdin = stdin
        self.stdout = stdout

    def say(self, line: str = "") -> None:
        print(line, file=self.stdout)

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def show(self, outcome: Outcome) -> None:
        for line in outcome.view.render():
            self.say(line)

    def do_add(self) -> None:
        name = self.ask("Name: ")
        start = self.ask("Start (HH:mm): ")
        end = self.ask("End (HH:mm): ")
        level = self.ask("Priority (High/Medium/Low): ")
        try:
            plan = Activity.from_text(name, start, end, level)
        except DayPlanError as e:
            logger.info("add input rejected: %s", e)
            self.say("Invalid input.")
            return
        self.registry.add(plan)

    def do_remove(self) -> None:
        self.registry.remove(self.ask("Name to remove: "))

    def do_list(self) -> None:
        self.show(self.registry.list_all())

    def do_edit(self) -> None:
        old = self.ask("Old name: ")
        new = self.ask("New name: ")
        start = self.ask("New start: ")
        end = self.ask("New end: ")
        level = self.ask("New priority: ")
        self.registry.edit(old, new, start, end, level)

    def do_complete(self) -> None:
        self.registry.complete(self.ask("Name: "))

    def do_by_priority(self) -> None:
        self.show(self.registry.list_by_priority(self.ask("Priority: ")))


def run_console(
    registry: Registry,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    *,
    banner: str = DEFAULT_BANNER,
) -> None:
    """Menu loop; returns on option 7 or end of input."""
    con = _Console(registry, stdin or sys.stdin, stdout or sys.stdout)
    actions = {
        "1": con.do_add,
        "2": con.do_remove,
        "3": con.do_list,
        "4": con.do_edit,
        "5": con.do_complete,
        "6": con.do_by_priority,
    }

    con.say(banner)
    while True:
        con.say()
        for line in MENU:
            con.say(line)
        try:
            choice = con.ask("Option: ").strip()
            if choice == "7":
                con.say("Bye!")
                return
            action = actions.get(choice)
            if action is None:
                con.say("Invalid!")
                continue
            action()
        except EOFError:
            con.say()
            logger.debug("console input closed")
            return


def main(argv: list[str] | None = None) -> int:
    try:
        base = PlannerConfig.from_env()
    except ValueError as e:
        raise SystemExit(f"DAYPLAN_LOG_LEVEL: {e}")
    ap = argparse.ArgumentParser(
        prog="dayplan",
        description="Interactive single-day planner that rejects overlapping activities.",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: env DAYPLAN_LOG_LEVEL or {base.log_level})",
    )
    ap.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of stderr (default: env DAYPLAN_LOG_FILE)",
    )
    args = ap.parse_args(argv)

    try:
        cfg = base.with_overrides(log_level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        raise SystemExit(f"--log-level: {e}")

    configure_logging(cfg.log_level_no, cfg.log_file)

    registry = Registry(sinks=[ConsoleSink()])
    run_console(registry, banner=cfg.banner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
