"""CLI entry point for pomostats.

Enables ``python -m pomostats <command>`` usage.

Subcommands:
    range    — Resolve a timeframe into start/end instants (JSON).
    fill     — Zero-fill sparse JSON rows over a date range (JSON).
    describe — Machine-readable API schema (JSON to stdout).
    version  — Print pomostats version.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pomostats.core.errors import PomoStatsError


def _build_calendar(args: argparse.Namespace) -> Any:
    from pomostats.core.clock import FixedClock, SystemClock
    from pomostats.core.config import CalendarConfig
    from pomostats.time.calendar import ReferenceCalendar

    config = CalendarConfig() if args.offset is None else CalendarConfig(
        utc_offset_hours=args.offset,
        zone_label=f"UTC{args.offset:+g}",
    )
    clock = FixedClock(args.now) if args.now else SystemClock()
    return ReferenceCalendar(config=config, clock=clock)


def _cmd_range(args: argparse.Namespace) -> int:
    """Print the resolved range for a timeframe."""
    from pomostats.stats.timeframe import parse_timeframe, select_chart_view
    from pomostats.time.keys import to_iso

    cal = _build_calendar(args)
    date_range = parse_timeframe(args.timeframe, cal)
    plan = select_chart_view(date_range, calendar=cal)

    payload: dict[str, Any] = {
        "period": date_range.period,
        "start": to_iso(date_range.start) if date_range.start else None,
        "end": to_iso(date_range.end) if date_range.end else None,
        "start_key": cal.to_date_key(date_range.start) if date_range.start else None,
        "end_key": cal.to_date_key(date_range.end) if date_range.end else None,
        "chart_view": plan.view,
        "available_views": list(plan.available),
    }
    json.dump(payload, sys.stdout, indent=2)
    print()
    return 0


def _cmd_fill(args: argparse.Namespace) -> int:
    """Read sparse rows as JSON and print the dense series."""
    from pomostats.core.types import KEY_COLUMNS
    from pomostats.series.fill import fill_series

    cal = _build_calendar(args)
    if args.input == "-":
        rows = json.load(sys.stdin)
    else:
        with open(args.input, encoding="utf-8") as f:
            rows = json.load(f)

    start = cal.parse_date_key(args.start)
    end = cal.parse_date_key(args.end)
    series = fill_series(rows, start, end, args.granularity, cal)

    key_name = KEY_COLUMNS[args.granularity]
    json.dump([point.to_dict(key_name) for point in series], sys.stdout, indent=2)
    print()
    return 0


def _cmd_describe() -> int:
    """Print machine-readable API schema as JSON."""
    from pomostats.discovery import describe

    info = describe()
    json.dump(info, sys.stdout, indent=2, default=str)
    print()  # trailing newline
    return 0


def _cmd_version() -> int:
    """Print version string."""
    import pomostats

    print(pomostats.__version__)
    return 0


def _add_calendar_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--now", help="Pin the current instant (ISO-8601, e.g. 2026-01-31T15:00:00Z)")
    parser.add_argument(
        "--offset",
        type=float,
        default=None,
        help="Reference zone UTC offset in hours (default: -5, US Eastern)",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pomostats",
        description="pomostats — calendar ranges and chart series for pomodoro statistics",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    range_parser = subparsers.add_parser("range", help="Resolve a timeframe into start/end instants")
    range_parser.add_argument(
        "timeframe",
        nargs="?",
        default=None,
        help="Preset (this-week, last-week, this-month, this-year, last-year, all-time) or START,END",
    )
    _add_calendar_args(range_parser)

    fill_parser = subparsers.add_parser("fill", help="Zero-fill sparse JSON rows over a range")
    fill_parser.add_argument("granularity", choices=["day", "week", "month"])
    fill_parser.add_argument("--start", required=True, help="Range start (YYYY-MM-DD)")
    fill_parser.add_argument("--end", required=True, help="Range end (YYYY-MM-DD)")
    fill_parser.add_argument("--input", default="-", help="JSON file with sparse rows (default: stdin)")
    _add_calendar_args(fill_parser)

    subparsers.add_parser("describe", help="Machine-readable API schema (JSON)")
    subparsers.add_parser("version", help="Print version")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "range":
            return _cmd_range(args)
        elif args.command == "fill":
            return _cmd_fill(args)
        elif args.command == "describe":
            return _cmd_describe()
        elif args.command == "version":
            return _cmd_version()
        else:
            parser.print_help()
            return 0
    except PomoStatsError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
