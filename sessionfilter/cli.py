"""
CLI (Command Line Interface).

Quick terminal commands for checking what a teacher or student would see:

    sessionfilter list [sessions.json] --role teacher --filter today --search algebra
    sessionfilter query --role student --filter month --search algebra
    sessionfilter ranges

All commands accept --now (ISO date/time) to pin the clock, which makes it
easy to reproduce what the list looked like at a given moment.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from sessionfilter.classify import STATUS_ACTIVE, STATUS_PAST, session_status
from sessionfilter.clock import SYSTEM_CLOCK, Clock, FixedClock
from sessionfilter.config import configure_logging
from sessionfilter.date_ranges import compute_date_ranges
from sessionfilter.display import format_date_only, format_date_time, format_time_only
from sessionfilter.filtering import filter_sessions
from sessionfilter.query import build_sessions_query
from sessionfilter.roles import ROLES, RoleRules
from sessionfilter.storage import load_sessions, parse_instant

logger = logging.getLogger(__name__)

DEFAULT_FILTER = {"teacher": "all_date", "student": "all"}

_STATUS_STYLE = {STATUS_ACTIVE: "[bold green]active[/]", STATUS_PAST: "[dim]past[/]"}


def _clock_from_args(args: argparse.Namespace) -> Optional[Clock]:
    """
    Return a FixedClock for --now, the system clock without it, or None if
    --now could not be parsed.
    """
    raw = (getattr(args, "now", None) or "").strip()
    if not raw:
        return SYSTEM_CLOCK
    instant = parse_instant(raw)
    if instant is None:
        print(f"Invalid --now value: {raw!r} (expected ISO date/time, e.g. 2024-06-10T09:00)")
        return None
    return FixedClock(instant)


def _resolve_filter(args: argparse.Namespace, rules: RoleRules) -> Optional[str]:
    selection = args.filter or DEFAULT_FILTER[rules.name]
    if selection not in rules.filters:
        print(f"Unknown filter for {rules.name}: {selection!r}. Choose one of: {', '.join(rules.filters)}")
        return None
    return selection


def _cmd_list(args: argparse.Namespace) -> int:
    """
    Filter a local sessions file and print the result as a table.
    """
    rules = ROLES[args.role]
    selection = _resolve_filter(args, rules)
    clock = _clock_from_args(args)
    if selection is None or clock is None:
        return 1

    now = clock.now()
    sessions = load_sessions(args.file)
    shown = filter_sessions(rules, sessions, selection, args.search, FixedClock(now))

    console = Console()
    if not shown:
        console.print("No sessions.")
        return 0

    table = Table(title=f"Sessions ({rules.name}, {selection}, {format_date_only(now)})", box=box.SIMPLE)
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Course")
    table.add_column("Group")
    table.add_column("Location")
    table.add_column("Status")
    for s in shown:
        status = session_status(s, now)
        table.add_row(
            format_date_time(s.date_start),
            format_time_only(s.date_end),
            s.course_name or "",
            s.course_group_name or "",
            s.location_name or "",
            _STATUS_STYLE.get(status, status),
        )
    console.print(table)
    console.print(f"{len(shown)} of {len(sessions)} sessions")
    return 0


def _cmd_query(args: argparse.Namespace) -> int:
    """
    Print the server query parameters for a role/filter/search combination.
    """
    rules = ROLES[args.role]
    selection = _resolve_filter(args, rules)
    clock = _clock_from_args(args)
    if selection is None or clock is None:
        return 1

    descriptor = build_sessions_query(rules, selection, args.search, clock)
    print(json.dumps(descriptor.to_params(), indent=2, ensure_ascii=False))
    if descriptor.unpaged:
        print("Note: unpaged query, pageSize asks the server for every matching session.", file=sys.stderr)
    return 0


def _cmd_ranges(args: argparse.Namespace) -> int:
    """
    Print every named date window for "now".
    """
    clock = _clock_from_args(args)
    if clock is None:
        return 1

    ranges = compute_date_ranges(clock.now())
    table = Table(title=f"Date windows (now = {ranges.now.isoformat(timespec='seconds')})", box=box.SIMPLE)
    table.add_column("Window")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("End edge")
    for name in ("today", "tomorrow", "this_week", "next_week", "this_month"):
        window = getattr(ranges, name)
        table.add_row(
            name,
            window.start.isoformat(timespec="milliseconds"),
            window.end.isoformat(timespec="milliseconds"),
            "inclusive" if window.end_inclusive else "exclusive",
        )
    Console().print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="sessionfilter", description="Session filter CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_selection_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--role", "-r", choices=sorted(ROLES), default="teacher", help="Whose filter menu to use")
        p.add_argument("--filter", "-f", type=str, default=None, help="Filter selection (e.g. today, past)")
        p.add_argument("--search", "-s", type=str, default="", help="Search text")
        p.add_argument("--now", type=str, default=None, help="Pin 'now' (ISO date/time)")

    p_list = sub.add_parser("list", help="Filter a local sessions file")
    p_list.add_argument("file", type=str, nargs="?", default=None, help="Sessions JSON file")
    add_selection_args(p_list)

    p_query = sub.add_parser("query", help="Show server query parameters")
    add_selection_args(p_query)

    p_ranges = sub.add_parser("ranges", help="Show date windows")
    p_ranges.add_argument("--now", type=str, default=None, help="Pin 'now' (ISO date/time)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)
    logger.debug("command=%s args=%r", args.command, vars(args))

    if args.command == "list":
        raise SystemExit(_cmd_list(args))
    if args.command == "query":
        raise SystemExit(_cmd_query(args))
    if args.command == "ranges":
        raise SystemExit(_cmd_ranges(args))

    raise SystemExit(2)
