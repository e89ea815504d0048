#!/usr/bin/env python3
"""
Pace Table CLI.

Print pace/time reference tables in the terminal.

Usage:
    pace-table table                                  # Official distances
    pace-table table --color --vma 16                 # Colored against VMA
    pace-table table --mode interval --interval 10    # Interval distances
    pace-table table --mode intermediate --race 10km --split-interval 1000
    pace-table distances --mode official
    pace-table prefs --set vma=16 --set theme=dark
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_settings
from .exceptions import PaceTableError
from .metrics.paces import format_pace
from .models.distances import OFFICIAL_DISTANCES
from .models.pace_table import DistanceSelection, PaceRangeConfig, PaceTable, TableMode
from .services.preferences_service import PreferencesService, SqliteStore
from .services.table_service import build_table, list_distances


# ANSI color codes
class Colors:
    BOLD = "\033[1m"
    DIM = "\033[2m"
    BLACK = "\033[30m"
    YELLOW = "\033[93m"
    RESET = "\033[0m"

    @staticmethod
    def background(red: int, green: int, blue: int) -> str:
        """24-bit background color."""
        return f"\033[48;2;{red};{green};{blue}m"


def parse_pace(value: str) -> int:
    """Parse 'm:ss' or plain seconds into seconds per km."""
    try:
        if ":" in value:
            minutes, seconds = value.split(":", 1)
            return int(minutes) * 60 + int(seconds)
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid pace '{value}', expected m:ss or seconds")


def render_table(table: PaceTable, use_color: bool = True) -> str:
    """Render a pace table as aligned text, cell colors as ANSI backgrounds."""
    lines = [f"{Colors.BOLD}{table.title}{Colors.RESET}" if use_color else table.title]
    if table.vma_pace:
        lines.append(f"VMA pace: {table.vma_pace}/km")
    lines.append("")

    if not table.is_ready:
        message = table.message or ""
        lines.append(f"{Colors.YELLOW}{message}{Colors.RESET}" if use_color else message)
        return "\n".join(lines)

    header = ["Pace (min/km)"] + [column.label for column in table.columns]
    body = [
        [row.pace.label] + [cell.time for cell in row.cells]
        for row in table.rows
    ]
    widths = [
        max(len(line[i]) for line in [header] + body)
        for i in range(len(header))
    ]

    lines.append("  ".join(text.rjust(width) for text, width in zip(header, widths)))
    lines.append("  ".join("-" * width for width in widths))
    for row, texts in zip(table.rows, body):
        parts = [texts[0].rjust(widths[0])]
        for cell, text, width in zip(row.cells, texts[1:], widths[1:]):
            padded = text.rjust(width)
            if use_color and cell.color is not None:
                c = cell.color
                padded = f"{Colors.background(c.red, c.green, c.blue)}{Colors.BLACK}{padded}{Colors.RESET}"
            parts.append(padded)
        lines.append("  ".join(parts))
    return "\n".join(lines)


def _preferences_service(args) -> PreferencesService:
    store = SqliteStore(args.db) if args.db else None
    return PreferencesService(store=store)


def cmd_table(args, prefs_service: PreferencesService) -> int:
    """Print a pace table, options overriding stored preferences."""
    prefs = prefs_service.get_preferences()
    config = PaceRangeConfig(
        max_seconds=args.max_pace if args.max_pace is not None else prefs.max_pace_seconds,
        min_seconds=args.min_pace if args.min_pace is not None else prefs.min_pace_seconds,
        interval_seconds=args.interval if args.interval is not None else prefs.pace_interval_seconds,
    )
    selection = DistanceSelection(
        race_key=args.race,
        split_interval_meters=args.split_interval or prefs.split_interval_meters,
    )
    vma = args.vma if args.vma is not None else prefs.vma_kmh

    if args.race and args.race not in OFFICIAL_DISTANCES:
        print(f"Unknown race '{args.race}'. Choose one of: {', '.join(OFFICIAL_DISTANCES.keys())}")
        return 1

    table = build_table(TableMode(args.mode), config, selection, vma=vma, color_enabled=args.color)
    print(render_table(table, use_color=not args.no_ansi))
    return 0


def cmd_distances(args, prefs_service: PreferencesService) -> int:
    """List the distances of a mode."""
    selection = DistanceSelection(
        race_key=args.race,
        split_interval_meters=args.split_interval or prefs_service.get_preferences().split_interval_meters,
    )
    distances = list_distances(TableMode(args.mode), selection)
    if not distances:
        print("No distances (select a race with --race for intermediate mode).")
        return 0
    for entry in distances:
        bounds = ""
        if entry.has_effort_bounds:
            bounds = f"  {entry.min_soutien:g}-{entry.max_soutien:g}% VMA"
        print(f"  {entry.key:<10} {entry.label:<15} {entry.meters:>9g} m{bounds}")
    return 0


def cmd_prefs(args, prefs_service: PreferencesService) -> int:
    """Show or update stored preferences."""
    if args.set:
        changes = {}
        for item in args.set:
            if "=" not in item:
                print(f"Invalid --set '{item}', expected key=value")
                return 1
            key, value = item.split("=", 1)
            if key in ("max_pace_seconds", "min_pace_seconds"):
                try:
                    value = str(parse_pace(value))
                except argparse.ArgumentTypeError as e:
                    print(f"Error: {e}")
                    return 1
            changes[key] = value
        try:
            prefs = prefs_service.update_preferences(**changes)
        except PaceTableError as e:
            print(f"Error: {e.message}")
            return 1
    else:
        prefs = prefs_service.get_preferences()

    print("Preferences:")
    print(f"  Slowest pace:   {format_pace(prefs.max_pace_seconds)}/km")
    print(f"  Fastest pace:   {format_pace(prefs.min_pace_seconds)}/km")
    print(f"  Pace interval:  {prefs.pace_interval_seconds}s")
    print(f"  VMA:            {prefs.vma} km/h")
    print(f"  Split interval: {prefs.split_interval_meters}m")
    print(f"  Theme:          {prefs.theme}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pace-table",
        description="Pace and split time reference tables for runners",
    )
    parser.add_argument("--db", help="SQLite file for stored preferences")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    modes = [mode.value for mode in TableMode]
    split_choices = get_settings().split_interval_options

    table = subparsers.add_parser("table", help="Print a pace table")
    table.add_argument("--mode", choices=modes, default=TableMode.OFFICIAL.value)
    table.add_argument("--race", help="Official race key for intermediate mode")
    table.add_argument("--split-interval", type=int, choices=split_choices, help="Split interval in meters")
    table.add_argument("--max-pace", type=parse_pace, help="Slowest pace (m:ss)")
    table.add_argument("--min-pace", type=parse_pace, help="Fastest pace (m:ss)")
    table.add_argument("--interval", type=int, help="Seconds between pace rows")
    table.add_argument("--vma", type=float, help="VMA in km/h")
    table.add_argument("--color", action="store_true", help="Color cells against VMA")
    table.add_argument("--no-ansi", action="store_true", help="Plain text output")
    table.set_defaults(func=cmd_table)

    distances = subparsers.add_parser("distances", help="List distances of a mode")
    distances.add_argument("--mode", choices=modes, default=TableMode.OFFICIAL.value)
    distances.add_argument("--race", help="Official race key for intermediate mode")
    distances.add_argument("--split-interval", type=int, choices=split_choices)
    distances.set_defaults(func=cmd_distances)

    prefs = subparsers.add_parser("prefs", help="Show or update preferences")
    prefs.add_argument("--set", action="append", metavar="KEY=VALUE", help="Update a preference")
    prefs.set_defaults(func=cmd_prefs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level.upper())

    return args.func(args, _preferences_service(args))


if __name__ == "__main__":
    sys.exit(main())
